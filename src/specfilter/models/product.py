"""
Product Domain Model

Immutable catalog records and the closed attribute sets they draw from.
"""

from dataclasses import dataclass
from enum import Enum


class Color(str, Enum):
    RED = "red"
    GREEN = "green"
    BLUE = "blue"


class Size(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"


@dataclass(frozen=True)
class Product:
    """
    A single catalog item.

    Names are display labels and are not required to be unique.
    """

    name: str
    color: Color
    size: Size
