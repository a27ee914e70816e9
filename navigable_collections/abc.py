from ._src.abstract_navigable_set import AbstractNavigableSet
from ._src.comparator import SupportsRichComparison

__all__ = ["AbstractNavigableSet", "SupportsRichComparison"]
