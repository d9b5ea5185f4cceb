from .engine import SpecificationFilter, filter_items

__all__ = ["SpecificationFilter", "filter_items"]
