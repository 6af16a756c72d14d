"""Null-safe flattening of nested collections"""
import typing as t
from itertools import chain

from .errors import NullExtractorError
from .utils import require

__all__ = ["flat_mapper", "flat_map"]

T = t.TypeVar("T")
R = t.TypeVar("R")


class flat_mapper(t.Generic[T, R]):
    """Turn a function extracting an optional collection from an element
    into a function returning an iterator over that collection.

    If the extractor returns ``None``, the iterator is empty.
    Otherwise it iterates the extracted collection itself,
    in its own order, without copying it.

    Intended as the per-element step of :func:`flat_map`.

    Parameters
    ----------
    extractor: ~typing.Callable[[T], ~typing.Optional[~typing.Iterable[R]]]
        extracts the nested collection from an element.
        ``None`` is accepted here, but calling the resulting
        mapper raises :class:`~lambdautils.errors.NullExtractorError`.

    Example
    -------

    >>> widgets = flat_map(flat_mapper(attrgetter('widgets')), warehouses)
    """

    __slots__ = "extractor"

    def __init__(self, extractor):
        self.extractor = extractor

    def __call__(self, element: T) -> t.Iterator[R]:
        if self.extractor is None:
            raise NullExtractorError()
        nested = self.extractor(element)
        return iter(()) if nested is None else iter(nested)

    def __eq__(self, other):
        if isinstance(other, flat_mapper):
            return self.extractor == other.extractor
        return NotImplemented

    def __hash__(self):
        return hash(self.extractor)

    def __repr__(self):
        return "flat_mapper({!r})".format(self.extractor)


def flat_map(
    func: t.Callable[[T], t.Iterable[R]], iterable: t.Iterable[T]
) -> t.Iterator[R]:
    """Lazily chain together the iterables ``func`` returns
    for each item in ``iterable``"""
    return chain.from_iterable(map(require(func, "func"), iterable))
