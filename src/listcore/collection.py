"""The abstract ordered collection that every listcore variant builds on.

Users should ordinarily not need to import this module directly; relevant
members are exported to the ``listcore`` namespace.
"""

import abc
import functools
import logging
from typing import (
    Any,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
    Union,
    overload,
)

import pyarrow as pa
from typing_extensions import Self

from . import _serialize
from . import errors
from . import options
from . import types

_T = TypeVar("_T")
"""Element type of a collection."""
_D = TypeVar("_D")

logger = logging.getLogger(__name__)


class BaseCollection(Generic[_T], metaclass=abc.ABCMeta):
    """An ordered, index-addressable collection with an optional type rule.

    Every behavior lives here: index validation, searching, removal,
    filtering, type enforcement and iteration. A concrete collection only
    decides what "adding" means by implementing :meth:`add`, :meth:`append`
    and :meth:`prepend`::

        class Stack(BaseCollection[int]):
            def add(self, element):
                return self.prepend(element)

            def append(self, element):
                return self._insert(len(self), element)

            def prepend(self, element):
                return self._insert(0, element)

    Positions are always contiguous: the valid indexes are exactly
    ``0 <= i < len(coll)``, and removing an element shifts everything after it
    down by one.

    Iterating a collection yields ``(index, element)`` pairs in ascending
    order, the same pairs :meth:`each` passes to its callback. Use
    :meth:`values` to iterate the elements alone. Mutating a collection while
    iterating over it, or from inside a predicate or callback, is not
    supported.
    """

    __slots__ = ("_items", "_constraint", "__weakref__")

    def __init__(
        self,
        items: Iterable[_T] = (),
        *,
        element_type: Optional[options.ElementType] = None,
    ):
        """Creates a new collection, seeded with ``items``.

        The type constraint is installed before seeding, and each seed element
        goes through :meth:`add` exactly like a later insertion would.
        """
        self._items: List[_T] = []
        self._constraint: Optional[options.TypeConstraint] = None
        if element_type is not None:
            self._constraint = options.TypeConstraint.coerce(element_type)
        self.add_all(items)

    @classmethod
    def create(cls, *, element_type: Optional[options.ElementType] = None) -> Self:
        """Creates a new, empty collection of this type."""
        return cls(element_type=element_type)

    # Insertion policy

    @abc.abstractmethod
    def add(self, element: _T) -> Self:
        """Inserts an element wherever this kind of collection puts new ones.

        This is the insertion policy of the collection: appending, prepending
        or some custom ordering. :meth:`add_all` and the constructor route
        through it.

        :return: ``self``, to enable method chaining.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def append(self, element: _T) -> Self:
        """Inserts an element after the current last element.

        :return: ``self``, to enable method chaining.
        """
        raise NotImplementedError()

    @abc.abstractmethod
    def prepend(self, element: _T) -> Self:
        """Inserts an element before the current first element.

        :return: ``self``, to enable method chaining.
        """
        raise NotImplementedError()

    def _insert(self, index: int, element: _T) -> Self:
        """Type-checks and places an element; the building block for variants.

        ``index`` is a raw list position (``len(self)`` appends) and is not
        bounds-checked.
        """
        self.validate_element(element)
        self._items.insert(index, element)
        return self

    def add_all(self, elements: Iterable[_T]) -> Self:
        """Adds each element in order via :meth:`add`.

        This is not atomic: if an element is rejected, the elements before it
        stay in the collection.
        """
        if isinstance(elements, (str, bytes)):
            raise errors.InvalidArgumentError(
                f"add_all needs an iterable of elements, not {type(elements).__name__}"
            )
        for element in elements:
            self.add(element)
        return self

    # Type constraint

    def get_type(self) -> Optional[options.TypeConstraint]:
        """The active type constraint, or None if any element is accepted."""
        return self._constraint

    def set_type(self, element_type: Optional[options.ElementType] = None) -> Self:
        """Replaces the type constraint. ``None`` disables enforcement.

        Only future insertions are checked against the new constraint;
        elements already in the collection are left alone.
        """
        if element_type is None:
            self._constraint = None
        else:
            self._constraint = options.TypeConstraint.coerce(element_type)
        logger.debug(
            "%s type constraint set to %s", type(self).__name__, self._constraint
        )
        return self

    @property
    def element_type(self) -> Optional[options.TypeConstraint]:
        """The active type constraint. See :meth:`set_type`."""
        return self._constraint

    @element_type.setter
    def element_type(self, value: Optional[options.ElementType]) -> None:
        self.set_type(value)

    def validate_element(self, element: Any) -> None:
        """Raises InvalidArgumentError if the element breaks the constraint."""
        if self._constraint is None or self._constraint.matches(element):
            return
        logger.debug("Rejected %r for %s", element, type(self).__name__)
        raise errors.InvalidArgumentError(
            f"Collection type must be {self._constraint.describe()};"
            f" got {type(element).__name__}"
        )

    # Size

    def count(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)

    # Indexed access

    def validate_index(self, index: Any) -> None:
        """Checks that ``index`` addresses an existing element.

        :raises InvalidArgumentError: if ``index`` is not an integer, or is
            negative.
        :raises OutOfRangeError: if ``index`` is past the last element.
        """
        if not types.is_index(index):
            raise errors.InvalidArgumentError(
                f"Index must be an integer, not {type(index).__name__}"
            )
        if index < 0:
            raise errors.InvalidArgumentError(
                f"Index must be zero or bigger; got {index}"
            )
        if index > len(self._items) - 1:
            raise errors.OutOfRangeError(
                f"Index {index} is out of range."
                f" Max index is {len(self._items) - 1}"
            )

    def at(self, index: int) -> _T:
        """Returns the element at ``index``, after validating the index."""
        self.validate_index(index)
        return self._items[index]

    index = at

    def first(self) -> _T:
        return self.at(0)

    def last(self) -> _T:
        return self.at(len(self._items) - 1)

    # Index-operator protocol

    def exists(self, index: Any) -> bool:
        """Returns True if ``index`` addresses an element. Never raises."""
        return types.is_index(index) and 0 <= index < len(self._items)

    def get(self, index: int) -> _T:
        return self.at(index)

    def set(self, index: Optional[int], element: _T) -> Self:
        """Overwrites the element at ``index``.

        Passing ``None`` as the index appends the element instead, as a raw
        structural write: neither the index nor the type constraint is checked
        on that path, and the insertion policy is not consulted::

            coll[None] = "anything"  # same as coll.set(None, "anything")

        :return: ``self``, to enable method chaining.
        """
        if index is None:
            self._items.append(element)
            return self
        self.validate_index(index)
        self.validate_element(element)
        self._items[index] = element
        return self

    def unset(self, index: int) -> None:
        self.remove_at(index)

    def __getitem__(self, index: int) -> _T:
        return self.get(index)

    def __setitem__(self, index: Optional[int], element: _T) -> None:
        """Sets an entry into this collection. See :meth:`set` for details."""
        self.set(index, element)

    def __delitem__(self, index: int) -> None:
        self.unset(index)

    # Search

    def find_index(self, predicate: types.Predicate[_T]) -> int:
        """Returns the index of the first matching element, or -1."""
        for index, element in enumerate(self._items):
            if predicate(element):
                return index
        return -1

    @overload
    def find_one(self, predicate: types.Predicate[_T]) -> Optional[_T]:
        ...

    @overload
    def find_one(self, predicate: types.Predicate[_T], default: _D) -> Union[_T, _D]:
        ...

    def find_one(
        self, predicate: types.Predicate[_T], default: Any = None
    ) -> Union[_T, Any]:
        """Returns the first matching element, or ``default`` if none match.

        A miss is a normal outcome and never raises. Pass a private sentinel
        as ``default`` when ``None`` may itself be an element.
        """
        index = self.find_index(predicate)
        if index < 0:
            return default
        return self.at(index)

    def find_indexes(self, predicate: types.Predicate[_T]) -> List[int]:
        """Returns the index of every matching element, in ascending order."""
        return [
            index
            for index, element in enumerate(self._items)
            if predicate(element)
        ]

    def find_all(self, predicate: types.Predicate[_T]) -> Self:
        """Returns a new collection holding only the matching elements.

        The result is the same kind of collection as this one, with the same
        type constraint. Matches keep their relative order regardless of the
        result's insertion policy. This collection is not modified.
        """
        result = self._empty_like()
        result._items.extend(self._items[i] for i in self.find_indexes(predicate))
        return result

    def _empty_like(self) -> Self:
        """A new, empty collection configured like this one.

        Variants whose constructor takes more than the type constraint should
        override this.
        """
        return self.create(element_type=self._constraint)

    # Removal

    def remove_at(self, index: int) -> _T:
        """Removes and returns the element at ``index``, closing the gap."""
        self.validate_index(index)
        return self._items.pop(index)

    def remove(self, predicate: types.Predicate[_T]) -> bool:
        """Removes the first matching element; returns whether one matched."""
        index = self.find_index(predicate)
        if index < 0:
            return False
        self.remove_at(index)
        return True

    def remove_all(self, predicate: types.Predicate[_T]) -> int:
        """Removes matching elements one at a time until none match.

        Each round rescans the collection as it is after the previous removal,
        so a stateful predicate sees the shrinking sequence from the start
        every time.

        :return: The number of elements removed.
        """
        removed = 0
        while self.remove(predicate):
            removed += 1
        logger.debug("Removed %d elements from %s", removed, type(self).__name__)
        return removed

    def clear(self) -> Self:
        """Removes every element. The type constraint is kept."""
        self._items.clear()
        return self

    # Ordering

    def sort(self, comparator: Optional[types.Comparator[_T]] = None) -> Self:
        """Sorts in place using a three-way comparator.

        With no comparator, elements are sorted by their natural ordering.

        :return: ``self``, to enable method chaining.
        """
        if comparator is None:
            self._items.sort()  # type: ignore[call-overload]
        else:
            self._items.sort(key=functools.cmp_to_key(comparator))
        return self

    # Iteration

    def each(self, callback: types.EachCallback[_T]) -> Self:
        """Calls ``callback(index, element)`` for every element, in order."""
        for index, element in self:
            callback(index, element)
        return self

    def __iter__(self) -> Iterator[Tuple[int, _T]]:
        return enumerate(self._items)

    def values(self) -> Iterator[_T]:
        return iter(self._items)

    def __contains__(self, element: Any) -> bool:
        return element in self._items

    # Export

    def to_array(self) -> List[_T]:
        """Returns the elements as a new plain list."""
        return list(self._items)

    def to_json(self) -> str:
        """Encodes the elements as a compact JSON array, like ``[1,2,3]``.

        Elements are encoded generically: JSON scalars, lists, dicts,
        dataclasses and datetimes natively, ``attrs`` classes as objects, and
        nested collections as arrays. Non-string dict keys become strings.

        :raises InvalidArgumentError: if an integer does not fit in 64 bits.
        """
        return _serialize.to_json(self._items)

    def to_arrow(self, type: Optional[pa.DataType] = None) -> pa.Array:
        """Returns the elements as an Arrow array.

        :param type: The Arrow type of the result. If not provided, it is
            inferred from the elements.
        """
        return _serialize.to_arrow(self._items, type)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"
