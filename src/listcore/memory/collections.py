"""In-memory collections that differ only in their insertion policy."""

import bisect
import functools
from typing import Any, Iterable, Optional, TypeVar

from typing_extensions import Final, Self

from .. import collection
from .. import options
from .. import types

_T = TypeVar("_T")


class _EndsCollection(collection.BaseCollection[_T]):
    """Shared ``append``/``prepend`` for variants that insert at either end."""

    __slots__ = ()

    def append(self, element: _T) -> Self:
        return self._insert(len(self._items), element)

    def prepend(self, element: _T) -> Self:
        return self._insert(0, element)


class Collection(_EndsCollection[_T]):
    """A list-like collection where new elements go to the end.

    ``add`` appends, so the collection reads in insertion order::

        nums = Collection([1, 2], element_type=int)
        nums.add(3)
        nums.to_array()  # [1, 2, 3]
    """

    __slots__ = ()

    def add(self, element: _T) -> Self:
        return self.append(element)


class PrependCollection(_EndsCollection[_T]):
    """A collection where new elements go to the front.

    ``add`` prepends, so seeding from ``[1, 2, 3]`` yields ``[3, 2, 1]``.
    """

    __slots__ = ()

    def add(self, element: _T) -> Self:
        return self.prepend(element)


class SortedCollection(_EndsCollection[_T]):
    """A collection that ``add``s each element at its sorted position.

    The ordering comes from a three-way comparator (natural ordering if none
    is given). An element equal to existing ones is placed after them, so
    equal elements keep their insertion order.

    ``append`` and ``prepend`` still place elements at the ends unconditionally,
    and :meth:`set` overwrites in place; after using them the collection is
    only sorted again once :meth:`resort` (or :meth:`sort`) is called.
    """

    __slots__ = ("_comparator",)

    def __init__(
        self,
        items: Iterable[_T] = (),
        *,
        comparator: Optional[types.Comparator[_T]] = None,
        element_type: Optional[options.ElementType] = None,
    ):
        # Must be in place before the base constructor adds the seed items.
        self._comparator: Final = comparator
        super().__init__(items, element_type=element_type)

    @classmethod
    def create(
        cls,
        *,
        element_type: Optional[options.ElementType] = None,
        comparator: Optional[types.Comparator[_T]] = None,
    ) -> Self:
        return cls(comparator=comparator, element_type=element_type)

    @property
    def comparator(self) -> Optional[types.Comparator[_T]]:
        return self._comparator

    def add(self, element: _T) -> Self:
        # Rejected elements may not even be comparable with the stored ones.
        self.validate_element(element)
        return self._insert(self._insertion_point(element), element)

    def resort(self) -> Self:
        """Restores the collection's own ordering after out-of-order writes."""
        return self.sort(self._comparator)

    def _empty_like(self) -> Self:
        return self.create(element_type=self._constraint, comparator=self._comparator)

    def _insertion_point(self, element: _T) -> int:
        """The slot after every stored element not sorting above ``element``."""
        key = functools.cmp_to_key(self._compare)
        return bisect.bisect_right(self._items, key(element), key=key)

    def _compare(self, a: Any, b: Any) -> int:
        if self._comparator is not None:
            return self._comparator(a, b)
        return (a > b) - (a < b)
