"""Exceptions raised by the containers and algorithms in this package."""


class CdsError(Exception):
    """Base class for every error raised by this package."""


class EmptyError(CdsError, IndexError):
    """Raised when an element is requested from an empty container."""


class NotFoundError(CdsError, LookupError):
    """Raised when a search finds no matching element."""


class CapacityError(CdsError, OverflowError):
    """Raised when a requested capacity cannot be represented."""