__all__ = ["__version__", "__author__", "__copyright__", "__description__"]

__version__ = "0.3.0"
__author__ = "Leshana"
__copyright__ = "2026, " + __author__
__description__ = (
    "Helpers for composing functions and collecting records into mappings"
)
