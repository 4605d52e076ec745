"""Encoders turning a collection's items into export formats."""

import logging
from typing import Any, Optional, Sequence

import attrs
import orjson
import pyarrow as pa

from . import errors

logger = logging.getLogger(__name__)


def _default(obj: Any) -> Any:
    """Fallback for values orjson does not encode natively."""
    if attrs.has(type(obj)):
        return attrs.asdict(obj, recurse=False)
    to_array = getattr(obj, "to_array", None)
    if callable(to_array):
        # Nested listcore collections encode as their plain items.
        return to_array()
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def to_json(items: Sequence[Any]) -> str:
    """Encodes the items as a compact JSON array, e.g. ``[1,2,3]``.

    Dict keys that are not strings (ints, floats, bools, dates, enums) are
    written as strings. Integers must fit in 64 bits.

    :raises InvalidArgumentError: if an integer is out of the 64-bit range.
    :raises TypeError: if an element has no JSON encoding.
    """
    try:
        encoded = orjson.dumps(
            list(items), default=_default, option=orjson.OPT_NON_STR_KEYS
        )
    except orjson.JSONEncodeError as jee:
        if "exceeds 64-bit range" in str(jee):
            raise errors.InvalidArgumentError(
                f"Cannot encode as JSON: {jee}"
            ) from jee
        raise
    return encoded.decode("utf-8")


def to_arrow(items: Sequence[Any], type: Optional[pa.DataType] = None) -> pa.Array:
    """Builds an Arrow array from the items, inferring the type if not given."""
    arr = pa.array(list(items), type=type)
    logger.debug("Exported %d items as Arrow %s", len(arr), arr.type)
    return arr
