"""Configuration values accepted by listcore collections.

Option types live here so that collection signatures stay short:
a constraint may be passed as a bare type, a tuple of types, or a fully
spelled-out :class:`TypeConstraint`.
"""

from typing import Any, Tuple, Type, Union

import attrs


def _to_type_tuple(value: Union[type, Tuple[type, ...]]) -> Tuple[type, ...]:
    if isinstance(value, type):
        return (value,)
    return tuple(value)


def _check_types(
    inst: "TypeConstraint", attr: "attrs.Attribute", value: Tuple[type, ...]
) -> None:
    del inst  # unused
    if not value:
        raise ValueError(f"{attr.name} must name at least one type")
    for typ in value:
        if not isinstance(typ, type):
            raise TypeError(f"{attr.name} entries must be types, not {typ!r}")


@attrs.frozen
class TypeConstraint:
    """The single element-type rule a collection may enforce on insertion.

    With ``strict=False`` (the default) an element satisfies the constraint
    when it is an instance of any of ``types``, subclasses included. With
    ``strict=True`` the element's exact class must be one of ``types``::

        TypeConstraint(numbers.Number)          # 1, 2.5, Fraction(1, 3), True
        TypeConstraint(int, strict=True)        # 1, but not True
        TypeConstraint((int, float))            # 1, 2.5
    """

    types: Tuple[type, ...] = attrs.field(
        converter=_to_type_tuple, validator=_check_types
    )
    """The accepted element types."""

    strict: bool = attrs.field(default=False, kw_only=True)
    """Whether subclasses of ``types`` are refused."""

    def matches(self, element: Any) -> bool:
        if self.strict:
            return type(element) in self.types
        return isinstance(element, self.types)

    def describe(self) -> str:
        """A short human-readable rendering used in error messages."""
        names = " | ".join(typ.__qualname__ for typ in self.types)
        return f"exactly {names}" if self.strict else names

    @classmethod
    def coerce(cls, value: "ElementType") -> "TypeConstraint":
        """Normalizes any accepted constraint spelling to a TypeConstraint."""
        if isinstance(value, cls):
            return value
        return cls(value)  # type: ignore[arg-type]


ElementType = Union[Type[Any], Tuple[Type[Any], ...], TypeConstraint]
"""Every spelling of a type constraint that a collection accepts."""
