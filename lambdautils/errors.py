"""Exceptions raised by the combinators.

Each exception also derives from the builtin a caller would expect,
so ``except TypeError`` or ``except ValueError`` keeps working.
"""

__all__ = ["NullArgumentError", "NullExtractorError", "DuplicateKeyError"]


class NullArgumentError(TypeError):
    """A required callable argument was ``None``

    Parameters
    ----------
    name: str
        the name of the offending argument
    """

    def __init__(self, name):
        super().__init__("{} must not be None".format(name))
        self.name = name


class NullExtractorError(NullArgumentError):
    """A flat mapper was invoked, but it wraps a ``None`` extractor"""

    def __init__(self, name="extractor"):
        super().__init__(name)


_UNKNOWN = object()


class DuplicateKeyError(ValueError):
    """Two records produced the same key during collection

    Parameters
    ----------
    existing
        the value already stored under the key
    value
        the value which could not be stored
    key
        the colliding key. May be omitted where it is not known
        (e.g. inside a merge function), in which case the message
        identifies the collision by the existing value instead.

    Attributes
    ----------
    key
        the colliding key, or ``None`` if it was not given
    """

    def __init__(self, existing, value, key=_UNKNOWN):
        if key is _UNKNOWN:
            msg = "Duplicate key for value {!r}".format(existing)
        else:
            msg = "Duplicate key {!r}".format(key)
        super().__init__(msg)
        self._key = key
        self.existing = existing
        self.value = value

    @property
    def key(self):
        return None if self._key is _UNKNOWN else self._key

    def __reduce__(self):
        args = (self.existing, self.value)
        if self._key is not _UNKNOWN:
            args += (self._key,)
        return type(self), args
