'''
Parser tests
'''

from formula import tokenize, lex, parse, parse_text, Parser, OperatorKind, \
                    Operator, Number, Reference, OpenParen, Expr
from formula.tokens import TREE_TOKENS
from formula.util import ParseError, UnexpectedTokenError

from pytest import mark, raises


A, B, C = Reference('A'), Reference('B'), Reference('C')
ADD, SUB, MUL, DIV, POW = OperatorKind


def test_single_value():
    assert parse(lex(tokenize('A'))) == A
    assert parse(lex(tokenize('2'))) == Number(2)


def test_simple():
    assert parse(lex(tokenize('A + B'))) == Expr(A, ADD, B)


def test_precedence():
    assert parse_text('A + B * C') == Expr(A, ADD, Expr(B, MUL, C))
    assert parse_text('A + B * C') != Expr(Expr(A, ADD, B), MUL, C)
    assert parse_text('1.23431283 + B * C') == \
        Expr(Number(1.23431283), ADD, Expr(B, MUL, C))


def test_parens_override_precedence():
    assert parse_text('(A + B) * C') == Expr(Expr(A, ADD, B), MUL, C)


@mark.parametrize('text, tree', [
    ('A - B - C', Expr(Expr(A, SUB, B), SUB, C)),
    ('A / B * C', Expr(Expr(A, DIV, B), MUL, C)),
    ('A ^ B ^ C', Expr(Expr(A, POW, B), POW, C)),
])
def test_left_to_right(text, tree):
    assert parse_text(text) == tree


def test_nested():
    inner = Expr(Expr(Expr(Expr(A, ADD, B), MUL, Number(2)), ADD, A),
                 SUB, Number(6.213))
    assert parse_text('(((A plus B) * 2) + A minus 6.213) * (A + B)') == \
        Expr(inner, MUL, Expr(A, ADD, B))
    assert parse_text('(((A plus B) * 2) + A minus 6.213) * (A + B) pow 2') \
        == Expr(inner, MUL, Expr(Expr(A, ADD, B), POW, Number(2)))


def test_unmatched_parens_dropped():
    assert parse_text('(A + B') == Expr(A, ADD, B)
    assert parse_text('A + B)') == Expr(A, ADD, B)
    assert parse_text('((A)') == A


@mark.parametrize('text', ['', '(', '()'])
def test_nothing_to_parse(text):
    with raises(ParseError):
        parse_text(text)


@mark.parametrize('text', ['A +', '* B', 'A + * B'])
def test_missing_operand(text):
    with raises(UnexpectedTokenError, match='missing operand'):
        parse_text(text)


def test_dangling_operand():
    with raises(UnexpectedTokenError) as excinfo:
        parse_text('A B')
    assert excinfo.value.token == B


def test_expr_is_not_input():
    with raises(UnexpectedTokenError):
        parse([OpenParen(), Expr(A, ADD, B)])


def test_parser_reusable():
    parser = Parser()
    assert parser.parse([A, Operator(ADD)] + [B]) == Expr(A, ADD, B)
    assert parser.parse([C]) == C


def _walk(tree):
    pending = [tree]
    while pending:
        token = pending.pop()
        yield token
        if isinstance(token, Expr):
            pending.extend((token.left, token.right))


@mark.parametrize('text', [
    'A',
    '(((A plus B) * 2) + A minus 6.213) * (A + B) pow 2',
    '(A + B',
    '2 ^ (3 - C) / ((4))',
])
def test_only_tree_tokens(text):
    assert all(isinstance(token, TREE_TOKENS)
               for token in _walk(parse_text(text)))


def test_parse_is_reentrant():
    parser = Parser()
    inner = iter(lex(tokenize('B * C')))

    def tokens():
        yield A
        yield Operator(ADD)
        # Parse something else in the middle of this parse.
        assert parser.parse(inner) == Expr(B, MUL, C)
        yield B

    assert parser.parse(tokens()) == Expr(A, ADD, B)


def test_long_formula_parses():
    tree = parse_text(' - '.join(['1'] * 5000))
    assert tree.op is SUB
    assert tree.right == Number(1)
