from collections import deque
import logging

from .tokens import Number, Reference, Expr
from .util import EvalError, UnknownReferenceError, CyclicReferenceError


logger = logging.getLogger(__name__)


# Work stack actions.
_VISIT = 'visit'
_APPLY = 'apply'
_RESOLVED = 'resolved'


class Machine:
    '''
    Expression tree evaluator.

    Evaluates trees against a fixed set of variable bindings, resolving
    references recursively. A binding may be a number, another reference, or
    a whole expression.

    Works off an explicit work stack and value stack rather than the call
    stack, so neither deep trees nor long reference chains are limited by
    the interpreter's recursion limit.
    '''

    def __init__(self, variables=(), trace=None):
        '''
        Create machine over these bindings.

        :param variables: Variables, in order. The first of a name wins.
        :param trace: Called with a line describing each evaluation step.
        '''
        self.variables = tuple(variables)
        self.bindings = dict()
        for variable in self.variables:
            self.bindings.setdefault(variable.name, variable.value)
        self.trace = trace
        # Names being resolved, outermost first.
        self.resolving = []

    def evaluate(self, expr):
        '''
        Return value of expression tree.
        '''
        return self._run(deque([(_VISIT, expr)]), len(self.resolving))

    def resolve(self, name):
        '''
        Return value of the expression bound to name.
        '''
        depth = len(self.resolving)
        work = deque()
        self._enter(name, None, work)
        return self._run(work, depth)

    def _run(self, work, depth):
        '''
        Pop and run actions off work until it's empty, returning the value.

        Left operands are fully evaluated before right ones.
        '''
        values = deque()
        try:
            while work:
                action, token = work.pop()
                if action is _VISIT:
                    self._visit(token, work, values)
                elif action is _APPLY:
                    right = values.pop()
                    left = values.pop()
                    value = token.op.apply(left, right)
                    self._trace('eval {} = {} {} {} -> {}',
                                token, left, token.op, right, value)
                    values.append(value)
                else:
                    name, reference = token
                    self.resolving.pop()
                    self._trace('{} -> {}', name, values[-1])
                    if reference is not None:
                        self._trace('eval {} -> {}', reference, values[-1])
        finally:
            # Unwind whatever an error left half resolved.
            del self.resolving[depth:]
        return values.pop()

    def _visit(self, token, work, values):
        if isinstance(token, Number):
            self._trace('eval {} -> {}', token, token.value)
            values.append(token.value)
        elif isinstance(token, Reference):
            self._enter(token.name, token, work)
        elif isinstance(token, Expr):
            # Stack, so pushed in reverse.
            work.append((_APPLY, token))
            work.append((_VISIT, token.right))
            work.append((_VISIT, token.left))
        else:
            raise EvalError(token, self.variables, 'Invalid token to eval')

    def _enter(self, name, reference, work):
        '''
        Start resolving name, queuing its bound expression.
        '''
        try:
            bound = self.bindings[name]
        except KeyError:
            raise UnknownReferenceError(name) from None
        if name in self.resolving:
            chain = self.resolving[self.resolving.index(name):] + [name]
            raise CyclicReferenceError(chain)
        self.resolving.append(name)
        work.append((_RESOLVED, (name, reference)))
        work.append((_VISIT, bound))

    def _trace(self, fmt, *args):
        '''
        Report one evaluation step, to the log and the trace callback.
        '''
        if self.trace is None and not logger.isEnabledFor(logging.DEBUG):
            return
        line = fmt.format(*args)
        logger.debug(line)
        if self.trace is not None:
            self.trace(line)
