"""Type and interface declarations that are not specific to options.

These declarations and functions are not directly part of the user-facing API,
but are used by collection implementations for annotations and their own
internal checks.
"""

from typing import TypeVar

from typing_extensions import Protocol, TypeGuard

_T_contra = TypeVar("_T_contra", contravariant=True)


class Predicate(Protocol[_T_contra]):
    """A test applied to a single element value.

    Predicates should depend only on the element, never on its position.
    """

    def __call__(self, __element: _T_contra) -> bool:
        ...


class Comparator(Protocol[_T_contra]):
    """A three-way comparison: negative, zero or positive, like ``cmp``."""

    def __call__(self, __a: _T_contra, __b: _T_contra) -> int:
        ...


class EachCallback(Protocol[_T_contra]):
    """Receives ``(index, element)`` pairs from :meth:`BaseCollection.each`."""

    def __call__(self, __index: int, __element: _T_contra) -> object:
        ...


def is_index(it: object) -> TypeGuard[int]:
    """Returns true if the value is usable as a position: an int, not a bool.

    ``bool`` is a subclass of ``int`` but ``coll[True]`` is almost always a
    bug, so it is refused along with floats and numeric strings.
    """
    return isinstance(it, int) and not isinstance(it, bool)
