"""
Sample catalog used by the demo scenarios.
"""

from .models.product import Color, Product, Size

APPLE = Product("Apple", Color.GREEN, Size.SMALL)
TREE = Product("Tree", Color.GREEN, Size.MEDIUM)
HOUSE = Product("House", Color.BLUE, Size.LARGE)


def sample_products() -> list[Product]:
    return [APPLE, TREE, HOUSE]
