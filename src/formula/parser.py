from collections import deque
import logging

from .tokens import Operator, Number, Reference, OpenParen, CloseParen, Expr
from .util import ParseError, UnexpectedTokenError


logger = logging.getLogger(__name__)


class Parser:
    '''
    Operator precedence (shunting-yard) parser.

    Builds one expression tree out of a token sequence, using an operator
    stack and a value stack. Equal precedence groups left to right.

    Stacks are built afresh for every parse; the parser holds no state.
    '''

    def parse(self, tokens):
        '''
        Return the expression tree of tokens.

        :param tokens: Tokens as produced by the lexer.
        '''
        operators = deque()
        values = deque()
        for token in tokens:
            self.feed(token, operators, values)
        # Unmatched open parens are dropped, much like unmatched closing ones.
        while operators:
            if isinstance(operators[-1], OpenParen):
                operators.pop()
            else:
                self._reduce(operators, values)
        if not values:
            raise ParseError()
        if len(values) > 1:
            raise UnexpectedTokenError(values[-1], 'dangling operand')
        tree = values.pop()
        logger.debug('parsed %s', tree)
        return tree

    def feed(self, token, operators, values):
        '''
        Shift one token, reducing as far as precedence allows.
        '''
        if isinstance(token, OpenParen):
            operators.append(token)
        elif isinstance(token, (Number, Reference)):
            values.append(token)
        elif isinstance(token, CloseParen):
            while operators and not isinstance(operators[-1], OpenParen):
                self._reduce(operators, values)
            if operators:
                operators.pop()
        elif isinstance(token, Operator):
            while operators and self._precedes(operators[-1], token):
                self._reduce(operators, values)
            operators.append(token)
        else:
            raise UnexpectedTokenError(token, 'not an operator, paren, '
                                              'number or reference')

    def _precedes(self, stacked, incoming):
        '''
        Return True if stacked operator must be reduced before incoming.
        '''
        return isinstance(stacked, Operator) and \
            stacked.kind.precedence >= incoming.kind.precedence

    def _reduce(self, operators, values):
        '''
        Pop an operator and its two operands, push back their expression.
        '''
        op = operators.pop()
        if len(values) < 2:
            raise UnexpectedTokenError(op, 'missing operand')
        # Right hand side is on top.
        right = values.pop()
        left = values.pop()
        values.append(Expr(left, op.kind, right))
