"""Miscellaneous tools, boilerplate, and shortcuts"""
from .errors import NullArgumentError


def identity(obj):
    """identity function, returns input unmodified"""
    return obj


class compose:
    """compose a function from a chain of functions

    The rightmost function is applied first,
    i.e. ``compose(f, g)(x) == f(g(x))``.
    """

    __slots__ = "funcs"

    def __init__(self, *funcs):
        assert funcs
        self.funcs = funcs

    def __call__(self, *args, **kwargs):
        *tail, head = self.funcs
        value = head(*args, **kwargs)
        for func in reversed(tail):
            value = func(value)
        return value

    def __eq__(self, other):
        if isinstance(other, compose):
            return self.funcs == other.funcs
        return NotImplemented

    def __hash__(self):
        return hash(self.funcs)

    def __repr__(self):
        return "compose({})".format(", ".join(map(repr, self.funcs)))


def require(obj, name):
    """return ``obj``, raising :class:`~lambdautils.errors.NullArgumentError`
    if it is ``None``"""
    if obj is None:
        raise NullArgumentError(name)
    return obj
