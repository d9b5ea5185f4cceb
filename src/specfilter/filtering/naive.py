"""
Per-attribute product filter.

Kept as a counter-example to SpecificationFilter: every new criterion
(or combination of criteria) requires another method on this class.
Not exported from the package root.
"""

from collections.abc import Iterable

from ..models.product import Color, Product, Size


class ProductFilter:
    def filter_by_color(self, products: Iterable[Product], color: Color) -> list[Product]:
        return [p for p in products if p.color == color]

    def filter_by_size(self, products: Iterable[Product], size: Size) -> list[Product]:
        return [p for p in products if p.size == size]
