from pytest import fixture

from formula import Variable, OperatorKind, Reference, Number


@fixture
def chained():
    '''
    A = B + C, B = 4, C = B * 2; so A is 12.
    '''
    return [
        Variable.expr('A', Reference('B'), OperatorKind.ADD, Reference('C')),
        Variable.number('B', 4),
        Variable.expr('C', Reference('B'), OperatorKind.MUL, Number(2)),
    ]


@fixture
def cyclic():
    '''
    A = B + 1, B = C, C = A * 2; no way out.
    '''
    return [
        Variable.expr('A', Reference('B'), OperatorKind.ADD, Number(1)),
        Variable.reference('B', 'C'),
        Variable.expr('C', Reference('A'), OperatorKind.MUL, Number(2)),
    ]
