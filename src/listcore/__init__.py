"""Ordered, index-addressable collections with optional type constraints.

Types are defined in their own modules and then imported here for a single
unified namespace.
"""

# __init__ files, used strictly for re-exporting, are the exception to the
# "import modules only" style used in listcore.

import importlib.metadata

from .collection import BaseCollection
from .errors import CollectionError
from .errors import InvalidArgumentError
from .errors import OutOfRangeError
from .memory import Collection
from .memory import PrependCollection
from .memory import SortedCollection
from .options import ElementType
from .options import TypeConstraint

try:
    __version__: str = importlib.metadata.version("listcore")
except importlib.metadata.PackageNotFoundError:
    # Imported from a source tree that was never installed.
    __version__ = "0.0.0.dev+not-installed"


__all__ = (
    "BaseCollection",
    "Collection",
    "PrependCollection",
    "SortedCollection",
    "CollectionError",
    "InvalidArgumentError",
    "OutOfRangeError",
    "ElementType",
    "TypeConstraint",
)
