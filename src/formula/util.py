from functools import wraps


class MathError(Exception):
    pass


class NumberFormatError(MathError):
    def __init__(self, text, *args):
        super().__init__('Bad number {}'.format(repr(text)), *args)
        self.text = text


class UnknownTokenError(MathError):
    def __init__(self, text):
        super().__init__('Unknown token {}'.format(repr(text)))
        self.text = text


class ParseError(MathError):
    def __init__(self, message='Nothing to parse'):
        super().__init__(message)


class UnexpectedTokenError(MathError):
    def __init__(self, token, context):
        super().__init__('Unexpected {} ({})'.format(token, context))
        self.token = token
        self.context = context


class EvalError(MathError):
    def __init__(self, token, variables, reason):
        super().__init__('Cannot evaluate {}: {}'.format(token, reason))
        self.token = token
        self.variables = variables
        self.reason = reason


class UnknownReferenceError(MathError):
    def __init__(self, name):
        super().__init__('No such variable {}'.format(repr(name)))
        self.name = name


class CyclicReferenceError(MathError):
    def __init__(self, chain):
        super().__init__('Circular reference {}'.format(' -> '.join(chain)))
        self.chain = tuple(chain)


def wrap_user_errors(fmt, error=MathError):
    '''
    Decorator that converts stray exceptions into package errors.

    Passes through MathErrors. The formatted message (args and kwargs of the
    wrapped call) is the first argument of the raised error.
    '''
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            try:
                return f(*args, **kwargs)
            except MathError:
                raise
            except Exception as e:
                raise error(fmt.format(*args, **kwargs), e) from e
        return wrapper
    return decorator
