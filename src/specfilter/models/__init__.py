"""
Specfilter Domain Models

Export core domain objects for external consumption.
"""

from .product import Color, Product, Size
from .product_specs import AttributeSpec, ColorSpec, SizeSpec
from .specs import AndSpecification, NotSpecification, OrSpecification, Specification

__all__ = [
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
]
