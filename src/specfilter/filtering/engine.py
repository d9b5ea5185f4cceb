"""
Specification Filtering Engine

Applies any Specification to a collection of items. Adding a new
criterion means writing a new Specification, never editing this module.
"""

import logging
from collections.abc import Iterable
from typing import TypeVar

from ..models.specs import Specification

logger = logging.getLogger(__name__)

T = TypeVar("T")


def filter_items(items: Iterable[T], spec: Specification[T]) -> list[T]:
    """
    Return the items satisfying ``spec``, in input order.

    The input is never mutated; a new list is always returned.
    """
    pool = list(items)
    matches = [item for item in pool if spec.is_satisfied_by(item)]
    logger.debug("Filter %r matched %d/%d items", spec, len(matches), len(pool))
    return matches


class SpecificationFilter:
    """Class form of :func:`filter_items` for callers that inject a filter."""

    def filter(self, items: Iterable[T], spec: Specification[T]) -> list[T]:
        return filter_items(items, spec)
