"""Exceptions raised by listcore collections.

Both concrete error kinds also derive from the matching builtin exception, so
callers that only know about ``ValueError`` or ``IndexError`` still catch them.
"""


class CollectionError(Exception):
    """Base class for every error raised by a listcore collection."""


class InvalidArgumentError(CollectionError, ValueError):
    """An argument was of the wrong kind.

    Raised for indexes that are not non-negative integers and for elements
    rejected by the collection's type constraint.
    """


class OutOfRangeError(CollectionError, IndexError):
    """A well-formed index points past the last element."""
