"""
Concrete Product Specifications

Attribute-equality implementations of the Specification pattern.
"""

from typing import Any

from .product import Color, Product, Size
from .specs import Specification

_MISSING = object()


class AttributeSpec(Specification[Product]):
    """
    Matches items whose named attribute equals a target value.

    No validation is done on the target: a value outside the attribute's
    enumeration gives a spec that nothing satisfies.
    """

    def __init__(self, attribute: str, value: Any):
        self.attribute = attribute
        self.value = value

    def is_satisfied_by(self, item: Product) -> bool:
        return getattr(item, self.attribute, _MISSING) == self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.attribute}={self.value!r})"


class ColorSpec(AttributeSpec):
    """Filters on product color."""

    def __init__(self, color: Color):
        super().__init__("color", color)


class SizeSpec(AttributeSpec):
    """Filters on product size."""

    def __init__(self, size: Size):
        super().__init__("size", size)
