"""In-memory collection implementations.

Each variant differs from the others only in its insertion policy, that is,
in where :meth:`~listcore.collection.BaseCollection.add` puts a new element.
"""

from .collections import Collection
from .collections import PrependCollection
from .collections import SortedCollection

__all__ = (
    "Collection",
    "PrependCollection",
    "SortedCollection",
)
