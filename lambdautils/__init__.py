"""
The entire public API is available at root level::

    from lambdautils import to_map, flat_mapper, testing, predicate, ...
"""
from . import errors
from .__about__ import *  # noqa
from .collect import *  # noqa
from .errors import *  # noqa
from .functions import *  # noqa
from .streams import *  # noqa
from .utils import compose, identity  # noqa

__all__ = ["errors", "compose", "identity"]
