"""Named function kinds, composition, and predicates on extracted keys"""
import typing as t
from functools import partial
from operator import eq

from .utils import compose, require

__all__ = [
    "Function",
    "Predicate",
    "Consumer",
    "function",
    "predicate",
    "consumer",
    "always_none",
    "testing",
]

T = t.TypeVar("T")
U = t.TypeVar("U")
R = t.TypeVar("R")


class _Wrapper:
    __slots__ = "__wrapped__"

    def __init__(self, func):
        self.__wrapped__ = require(func, "func")

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return self.__wrapped__ == other.__wrapped__
        return NotImplemented

    def __hash__(self):
        return hash((self.__class__, self.__wrapped__))

    def __repr__(self):
        return "{}({!r})".format(self.__class__.__name__, self.__wrapped__)


class Function(_Wrapper, t.Generic[T, R]):
    """A one-argument callable which can be chained with others.

    Calling the function calls the wrapped callable.

    Parameters
    ----------
    func: ~typing.Callable[[T], R]
        the callable to wrap

    Example
    -------

    >>> strlen = Function(str).and_then(len)
    >>> strlen(1234)
    4
    """

    __slots__ = ()

    def __call__(self, arg: T) -> R:
        return self.__wrapped__(arg)

    def and_then(self, after: t.Callable[[R], U]) -> "Function[T, U]":
        """Create a function which applies this function,
        then ``after`` to its result"""
        return Function(compose(require(after, "after"), self.__wrapped__))

    def compose(self, before: t.Callable[[U], T]) -> "Function[U, R]":
        """Create a function which applies ``before``,
        then this function to its result"""
        return Function(compose(self.__wrapped__, require(before, "before")))


class _pair:
    __slots__ = "first", "second"

    def __init__(self, first, second):
        self.first, self.second = first, second

    def __eq__(self, other):
        if isinstance(other, self.__class__):
            return (self.first, self.second) == (other.first, other.second)
        return NotImplemented

    def __hash__(self):
        return hash((self.__class__, self.first, self.second))


class _both(_pair):
    __slots__ = ()

    def __call__(self, arg):
        return self.first(arg) and self.second(arg)

    def __repr__(self):
        return "({!r} & {!r})".format(self.first, self.second)


class _either(_pair):
    __slots__ = ()

    def __call__(self, arg):
        return self.first(arg) or self.second(arg)

    def __repr__(self):
        return "({!r} | {!r})".format(self.first, self.second)


class _negated:
    __slots__ = "inner"

    def __init__(self, inner):
        self.inner = inner

    def __call__(self, arg):
        return not self.inner(arg)

    def __eq__(self, other):
        if isinstance(other, _negated):
            return self.inner == other.inner
        return NotImplemented

    def __hash__(self):
        return hash((_negated, self.inner))

    def __repr__(self):
        return "~{!r}".format(self.inner)


class Predicate(_Wrapper, t.Generic[T]):
    """A one-argument callable returning a :class:`bool`,
    which can be combined with other predicates.

    ``&``, ``|``, and ``~`` are shorthands for
    :meth:`and_`, :meth:`or_`, and :meth:`negate`.
    Combined predicates short-circuit like ``and``/``or``.

    Parameters
    ----------
    func: ~typing.Callable[[T], bool]
        the callable to wrap. Its results are converted to :class:`bool`.

    Example
    -------

    >>> is_small_odd = Predicate(lambda n: n % 2) & (lambda n: n < 10)
    >>> [n for n in range(15) if is_small_odd(n)]
    [1, 3, 5, 7, 9]
    """

    __slots__ = ()

    def __call__(self, arg: T) -> bool:
        return bool(self.__wrapped__(arg))

    def and_(self, other: t.Callable[[T], bool]) -> "Predicate[T]":
        """Create a predicate which holds when both this predicate
        and ``other`` hold"""
        return Predicate(_both(self, predicate(require(other, "other"))))

    def or_(self, other: t.Callable[[T], bool]) -> "Predicate[T]":
        """Create a predicate which holds when this predicate
        or ``other`` holds"""
        return Predicate(_either(self, predicate(require(other, "other"))))

    def negate(self) -> "Predicate[T]":
        """Create the logical negation of this predicate"""
        return Predicate(_negated(self))

    def __and__(self, other):
        if not callable(other):
            return NotImplemented
        return self.and_(other)

    def __or__(self, other):
        if not callable(other):
            return NotImplemented
        return self.or_(other)

    def __invert__(self):
        return self.negate()

    @staticmethod
    def is_equal(target) -> "Predicate":
        """Create a predicate which tests for equality with ``target``"""
        return Predicate(partial(eq, target))


class _sequence(_pair):
    __slots__ = ()

    def __call__(self, arg):
        self.first(arg)
        self.second(arg)

    def __repr__(self):
        return "_sequence({!r}, {!r})".format(self.first, self.second)


class Consumer(_Wrapper, t.Generic[T]):
    """A one-argument callable used only for its side effects.
    The result of the wrapped callable is discarded.

    Parameters
    ----------
    func: ~typing.Callable[[T], None]
        the callable to wrap
    """

    __slots__ = ()

    def __call__(self, arg: T) -> None:
        self.__wrapped__(arg)

    def and_then(self, after: t.Callable[[T], t.Any]) -> "Consumer[T]":
        """Create a consumer which calls this consumer,
        then ``after``, with the same argument"""
        return Consumer(_sequence(self, require(after, "after")))


def function(func: t.Callable[[T], R]) -> Function[T, R]:
    """Shorthand for wrapping a callable (often a lambda)
    in a :class:`Function`. Existing functions are returned as-is."""
    return func if isinstance(func, Function) else Function(func)


def predicate(func: t.Callable[[T], bool]) -> Predicate[T]:
    """Shorthand for wrapping a callable (often a lambda)
    in a :class:`Predicate`. Existing predicates are returned as-is.

    Example
    -------

    >>> filter(predicate(Fruit.is_orange).and_(Fruit.is_round), fruits)
    """
    return func if isinstance(func, Predicate) else Predicate(func)


def consumer(func: t.Callable[[T], t.Any]) -> Consumer[T]:
    """Shorthand for wrapping a callable (often a lambda)
    in a :class:`Consumer`. Existing consumers are returned as-is."""
    return func if isinstance(func, Consumer) else Consumer(func)


def _none(obj):
    return None


def always_none() -> Function[t.Any, None]:
    """A function which accepts anything and always returns ``None``"""
    return Function(_none)


def testing(
    key: t.Callable[[T], U], predicate: t.Callable[[U], bool]
) -> Predicate[T]:
    """Create a predicate which tests a key extracted from its argument.

    Both arguments are checked immediately.
    ``None`` keys are passed to ``predicate`` like any other key.
    The result pickles if both ``key`` and ``predicate`` do.

    Parameters
    ----------
    key: ~typing.Callable[[T], U]
        extracts the key to test
    predicate: ~typing.Callable[[U], bool]
        tests the extracted key

    Raises
    ------
    ~lambdautils.errors.NullArgumentError
        if either argument is ``None``

    Example
    -------

    >>> is_adult = testing(attrgetter('age'), lambda age: age >= 18)
    >>> adults = list(filter(is_adult, people))
    """
    require(key, "key")
    require(predicate, "predicate")
    return Predicate(compose(predicate, key))
