"""
Sorted sets with navigation queries, written in Python 3. A navigable set
keeps unique elements in the order given by a comparator and can find the
nearest elements to a value, remove the smallest or largest element, iterate
in either direction, and copy out ranges of its elements.
"""
import logging

from . import abc
from ._src.comparator import Comparator, ReversedComparator, natural_order, reverse_order
from ._src.errors import (
    ElementNotFoundError,
    EmptyContainerError,
    InvalidRangeError,
    IteratorExhaustedError,
    NavigableSetError,
    OutOfRangeError,
)
from ._src.iterator import AscendingIterator, DescendingIterator
from ._src.navigable_set import NavigableSet

__version__ = "1.0.0"

__all__ = [
    "AscendingIterator",
    "Comparator",
    "DescendingIterator",
    "ElementNotFoundError",
    "EmptyContainerError",
    "InvalidRangeError",
    "IteratorExhaustedError",
    "NavigableSet",
    "NavigableSetError",
    "OutOfRangeError",
    "ReversedComparator",
    "natural_order",
    "reverse_order",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
