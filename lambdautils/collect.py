"""Collecting records into mappings with unique keys"""
import typing as t
from functools import reduce

from .errors import DuplicateKeyError
from .utils import identity, require

__all__ = ["to_map", "build_unique_map", "throwing_merger"]

T = t.TypeVar("T")
K = t.TypeVar("K")
V = t.TypeVar("V")
M = t.TypeVar("M", bound=t.MutableMapping)


def _put_unique(mapping, key, value):
    # membership uses the mapping's own notion of key equality
    if key in mapping:
        raise DuplicateKeyError(mapping[key], value, key)
    mapping[key] = value


def _throwing_merge(existing, value):
    raise DuplicateKeyError(existing, value)


def throwing_merger() -> t.Callable[[V, V], t.NoReturn]:
    """A merge function which always raises
    :class:`~lambdautils.errors.DuplicateKeyError`.

    Use it wherever an API asks how to merge two values for the same key,
    to enforce that the keys are distinct in the first place.
    The merge function only sees the two values,
    so the error identifies the collision by the existing value.
    """
    return _throwing_merge


class to_map(t.Generic[T, K, V, M]):
    """A collector of records into a mapping with unique keys.

    Each record ``r`` becomes an entry ``key(r) -> value(r)``
    in a fresh mapping from ``factory``.
    The mapping type decides when two keys are equal:
    a case-insensitive mapping will reject ``"a"`` after ``"A"``.

    Collection stops at the first duplicate key,
    raising :class:`~lambdautils.errors.DuplicateKeyError`.
    No further records are consumed, and the partly filled mapping
    is never returned.

    Parameters
    ----------
    key: ~typing.Callable[[T], K]
        extracts the key from a record
    value: ~typing.Callable[[T], V]
        extracts the value from a record. Defaults to the record itself.
    factory: ~typing.Callable[[], M]
        creates a new, empty mapping to collect into.
        Defaults to :class:`dict`.

    Raises
    ------
    ~lambdautils.errors.NullArgumentError
        if any argument is ``None``

    Example
    -------

    >>> by_name = to_map(attrgetter('name'), factory=CaseInsensitiveDict)
    >>> by_name([Widget('a'), Widget('B')])
    {'a': Widget('a'), 'B': Widget('B')}

    A collector may also be run on partitions of the input,
    with results merged under the same duplicate policy:

    >>> with ThreadPoolExecutor() as pool:
    ...     by_name.from_partitions(chunks, map_func=pool.map)
    """

    __slots__ = "key", "value", "factory"

    def __init__(self, key, value=identity, factory=dict):
        self.key = require(key, "key")
        self.value = require(value, "value")
        self.factory = require(factory, "factory")

    def supply(self) -> M:
        """A new, empty mapping"""
        return self.factory()

    def accumulate(self, mapping: M, record: T) -> M:
        """Add a record's entry to a mapping

        Returns
        -------
        M
            the same mapping

        Raises
        ------
        ~lambdautils.errors.DuplicateKeyError
            if the record's key is already present
        """
        _put_unique(mapping, self.key(record), self.value(record))
        return mapping

    def combine(self, left: M, right: M) -> M:
        """Add all entries of ``right`` to ``left``.
        Overlapping keys are an error, not an overwrite.

        Returns
        -------
        M
            the ``left`` mapping

        Raises
        ------
        ~lambdautils.errors.DuplicateKeyError
            if the mappings share a key
        """
        for key, value in right.items():
            _put_unique(left, key, value)
        return left

    def __call__(self, records: t.Iterable[T]) -> M:
        return reduce(self.accumulate, records, self.supply())

    def from_partitions(
        self, partitions: t.Iterable[t.Iterable[T]], map_func=map
    ) -> M:
        """Collect each partition separately, then combine the results
        in partition order.

        Parameters
        ----------
        partitions
            the partitioned records
        map_func
            used to collect the partitions, e.g. an executor's ``map``.
            Each partition is collected into its own mapping,
            combining happens in the calling thread.
        """
        return reduce(self.combine, map_func(self, partitions), self.supply())

    def __eq__(self, other):
        if isinstance(other, to_map):
            return (self.key, self.value, self.factory) == (
                other.key,
                other.value,
                other.factory,
            )
        return NotImplemented

    def __hash__(self):
        return hash((self.key, self.value, self.factory))

    def __repr__(self):
        return "to_map({0.key!r}, {0.value!r}, {0.factory!r})".format(self)


def build_unique_map(
    records: t.Iterable[T],
    key: t.Callable[[T], K],
    value: t.Callable[[T], V] = identity,
    factory: t.Callable[[], M] = dict,
) -> M:
    """Collect records into a mapping with unique keys.

    Shortcut for ``to_map(key, value, factory)(records)``.
    All arguments are checked before any record is consumed.

    Parameters
    ----------
    records
        the records to collect
    key
        extracts the key from a record
    value
        extracts the value from a record. Defaults to the record itself.
    factory
        creates a new, empty mapping. Defaults to :class:`dict`.

    Raises
    ------
    ~lambdautils.errors.NullArgumentError
        if a callable argument is ``None``
    ~lambdautils.errors.DuplicateKeyError
        if two records produce equal keys
    """
    return to_map(key, value, factory)(records)
