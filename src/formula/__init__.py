'''
Infix arithmetic formulas, with variables.

Formulas are plain arithmetic over numbers and named variables:

    (A + B) * 2 pow 3

Operators, loosest binding first: + - (or plus, minus), then * / (times,
div), then ^ (pow). Parens group. No unary operators, no functions.

Variables are bound per evaluation, to numbers or to further expressions,
and are resolved recursively. Binding a variable to itself, even through
other variables, is an error rather than an endless loop.

The pipeline is tokenize, lex, parse, evaluate:

>>> evaluate(parse(lex(tokenize('2 + 2 * 2'))))
6.0
>>> calculate('A / 4', [Variable.number('A', 10)])
2.5
'''

from .lexer import Tokenizer, Lexer
from .parser import Parser
from .machine import Machine
from .tokens import OperatorKind, Token, Number, Operator, Reference, \
                    OpenParen, CloseParen, Expr, Variable
from .util import MathError, NumberFormatError, UnknownTokenError, \
                  ParseError, UnexpectedTokenError, EvalError, \
                  UnknownReferenceError, CyclicReferenceError


def tokenize(text):
    '''
    Return the lexeme strings of text.
    '''
    return list(Tokenizer().tokenize(text))


def lex(strings):
    '''
    Return the tokens of lexeme strings.
    '''
    return list(Lexer().lex(strings))


def parse(tokens):
    '''
    Return the expression tree of tokens.
    '''
    return Parser().parse(tokens)


def parse_text(text):
    '''
    Return the expression tree of formula text.
    '''
    return parse(lex(tokenize(text)))


def evaluate(expr, variables=(), trace=None):
    '''
    Return the value of expression tree expr, given variables.
    '''
    return Machine(variables, trace=trace).evaluate(expr)


def resolve_and_evaluate(name, variables, trace=None):
    '''
    Return the value of variable name, given variables.
    '''
    return Machine(variables, trace=trace).resolve(name)


def calculate(text, variables=(), trace=None):
    '''
    Return the value of formula text, given variables.
    '''
    return evaluate(parse_text(text), variables, trace=trace)


__all__ = (
    'tokenize', 'lex', 'parse', 'parse_text', 'evaluate',
    'resolve_and_evaluate', 'calculate',
    'Tokenizer', 'Lexer', 'Parser', 'Machine',
    'OperatorKind', 'Token', 'Number', 'Operator', 'Reference', 'OpenParen',
    'CloseParen', 'Expr', 'Variable',
    'MathError', 'NumberFormatError', 'UnknownTokenError', 'ParseError',
    'UnexpectedTokenError', 'EvalError', 'UnknownReferenceError',
    'CyclicReferenceError',
)
