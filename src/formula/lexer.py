from functools import reduce
import operator

import regex

from .tokens import OperatorKind, Operator, Number, Reference, OpenParen, \
                    CloseParen
from .util import NumberFormatError, UnknownTokenError, wrap_user_errors


class Tokenizer:
    '''
    Splits formula text into lexeme strings.

    Holds no internal state; the grammar lives in the class attributes.
    '''
    # Single character lexemes, always split whatever is around them.
    OPERATORS = r'[!~+\-/*^()]'
    # Separators, dropped from the output.
    WHITESPACE = r'[\x20\t\n]+'
    # Operators are captured, so that splitting keeps them.
    SEPARATOR = r'(' + OPERATORS + r')|' + WHITESPACE
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)

    def tokenize(self, text):
        '''
        Yield the lexemes of text, in order.

        Never yields empty or whitespace-only lexemes.
        '''
        for piece in regex.split(type(self).SEPARATOR, text,
                                 flags=type(self).FLAGS):
            # Non-participating operator group, on whitespace splits.
            if piece is None:
                continue
            piece = piece.strip()
            if piece:
                yield piece


class Lexer:
    '''
    Classifies lexeme strings into tokens.

    For consistency with the tokenizer, needs to be instantiated, despite
    holding no internal state.
    '''
    # 1, 12, 1.5, 1. (notice trailing dot), .5; but neither . nor 1.2.3
    NUMBER = r'''
              (?:
                  [0-9]+
                  (?:
                      \.
                      [0-9]*
                  )?
              )|(?:
                  \.
                  [0-9]+
              )
              '''
    FLAGS = reduce(operator.__or__,
                   {regex.VERSION1,
                    regex.VERBOSE},
                   0)
    PARENS = {
        '(': OpenParen,
        ')': CloseParen,
    }

    def lex(self, strings):
        '''
        Yield one token per lexeme string, order preserved.
        '''
        for string in strings:
            yield self.classify(string)

    def classify(self, string):
        '''
        Return the token for a single lexeme string.

        Operators first, then numbers, then parens; everything else names a
        variable.
        '''
        if not string or string.isspace():
            raise UnknownTokenError(string)
        kind = OperatorKind.lookup(string)
        if kind is not None:
            return Operator(kind)
        if self.isnumber(string):
            return Number(self._number(string))
        paren = type(self).PARENS.get(string)
        if paren is not None:
            return paren()
        return Reference(string)

    def isnumber(self, string):
        '''
        Return True if string is a numeric literal.
        '''
        return regex.fullmatch(type(self).NUMBER, string,
                               flags=type(self).FLAGS) is not None

    @wrap_user_errors('{1}', error=NumberFormatError)
    def _number(self, string):
        return float(string)
