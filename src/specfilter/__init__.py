"""
Specfilter: composable product specifications
"""

from .errors import AbstractInstantiationError
from .filtering import SpecificationFilter, filter_items
from .models import (
    AndSpecification,
    AttributeSpec,
    Color,
    ColorSpec,
    NotSpecification,
    OrSpecification,
    Product,
    Size,
    SizeSpec,
    Specification,
)

__all__ = [
    "AbstractInstantiationError",
    "AndSpecification",
    "AttributeSpec",
    "Color",
    "ColorSpec",
    "NotSpecification",
    "OrSpecification",
    "Product",
    "Size",
    "SizeSpec",
    "Specification",
    "SpecificationFilter",
    "filter_items",
]

__version__ = "0.1.0"
