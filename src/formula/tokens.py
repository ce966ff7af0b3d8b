'''
Tokens, operators, and variable bindings.

The token stream and the expression tree share one family of classes. Only
Number, Reference, and Expr make it into a parsed tree; Operator and the
parens only live between the lexer and the parser.
'''

from enum import Enum
import operator
import math


def _is_odd_integer(n):
    return math.isfinite(n) and n.is_integer() and n % 2 == 1


def _divide(left, right):
    '''
    IEEE division: dividing by zero gives infinity, or nan for 0/0.
    '''
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)


def _power(base, exponent):
    '''
    Real power, with C pow() results instead of exceptions.
    '''
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        # 0 to a negative power; anything else is a negative base raised to
        # a non-integer.
        if base == 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


class OperatorKind(Enum):
    '''
    Binary operators, with their symbol, textual alias, and precedence.
    '''
    ADD = ('+', 'plus', 1, operator.__add__)
    SUB = ('-', 'minus', 1, operator.__sub__)
    MUL = ('*', 'times', 2, operator.__mul__)
    DIV = ('/', 'div', 2, _divide)
    POW = ('^', 'pow', 3, _power)

    def __init__(self, symbol, alias, precedence, function):
        self.symbol = symbol
        self.alias = alias
        self.precedence = precedence
        self.function = function

    def apply(self, left, right):
        return self.function(float(left), float(right))

    @classmethod
    def lookup(cls, text):
        '''
        Return the operator spelled text, by symbol or alias, or None.
        '''
        return _SPELLINGS.get(text)

    def __str__(self):
        return self.symbol


_SPELLINGS = {
    spelling: kind
    for kind in OperatorKind
    for spelling in (kind.symbol, kind.alias)
}


class Token:
    '''
    Base of all tokens. Equal when of the same class with equal fields.
    '''
    __slots__ = ()

    def _key(self):
        return tuple(getattr(self, slot) for slot in self.__slots__)

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash((type(self), self._key()))

    def __repr__(self):
        return '{}({})'.format(type(self).__name__,
                               ', '.join(map(repr, self._key())))


class Number(Token):
    __slots__ = ('value',)

    def __init__(self, value):
        self.value = float(value)

    def __str__(self):
        return str(self.value)


class Operator(Token):
    __slots__ = ('kind',)

    def __init__(self, kind):
        self.kind = kind

    def __str__(self):
        return self.kind.symbol


class Reference(Token):
    __slots__ = ('name',)

    def __init__(self, name):
        self.name = name

    def __str__(self):
        return '#' + self.name


class OpenParen(Token):
    __slots__ = ()

    def __str__(self):
        return '('


class CloseParen(Token):
    __slots__ = ()

    def __str__(self):
        return ')'


class Expr(Token):
    '''
    Binary expression node. Children are Number, Reference, or Expr.
    '''
    __slots__ = ('left', 'op', 'right')

    def __init__(self, left, op, right):
        self.left = left
        self.op = op
        self.right = right

    def __str__(self):
        return '{{{} {} {}}}'.format(self.left, self.op, self.right)


# Tokens that may stand as a value: the root of a tree, or a child of Expr.
TREE_TOKENS = Number, Reference, Expr


class Variable:
    '''
    A named binding of a tree token, for the duration of one evaluation.
    '''
    __slots__ = ('name', 'value')

    def __init__(self, name, value):
        self.name = name
        self.value = value

    @classmethod
    def number(cls, name, value):
        return cls(name, Number(value))

    @classmethod
    def reference(cls, name, other):
        return cls(name, Reference(other))

    @classmethod
    def expr(cls, name, left, op, right):
        return cls(name, Expr(left, op, right))

    @classmethod
    def parse(cls, name, text):
        '''
        Bind name to the expression tree parsed from text.
        '''
        # Deferred; the parser sits later in the pipeline than the tokens.
        from . import parse_text
        return cls(name, parse_text(text))

    def __eq__(self, other):
        if not isinstance(other, Variable):
            return NotImplemented
        return (self.name, self.value) == (other.name, other.value)

    def __hash__(self):
        return hash((self.name, self.value))

    def __repr__(self):
        return 'Variable({!r}, {!r})'.format(self.name, self.value)

    def __str__(self):
        return 'Variable {} = {}'.format(self.name, self.value)
