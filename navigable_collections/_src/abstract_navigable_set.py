import copy
import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator, Reversible, Set as AbstractSet
from functools import cmp_to_key
from typing import Any, Generic, Optional, Type, TypeVar

from .comparator import Comparator, natural_order, reverse_order
from .errors import EmptyContainerError

__all__ = ["AbstractNavigableSet", "unique_sorted"]

logger = logging.getLogger(__name__)

T = TypeVar("T")

Self = TypeVar("Self", bound="AbstractNavigableSet")

reprs_seen: set[int] = set()


def unique_sorted(iterable: Iterable[T], comparator: Comparator[T], /) -> list[T]:
    """
    Sorts the elements using the comparator and drops comparator-duplicates.

    The sort is stable, so the first occurrence of a duplicate is the one kept.
    """
    data = sorted(iterable, key=cmp_to_key(comparator))
    result: list[T] = []
    for element in data:
        if len(result) == 0 or comparator(result[-1], element) != 0:
            result.append(element)
    if len(result) < len(data):
        logger.debug("Dropped %d duplicate(s) while building a set of %d element(s)", len(data) - len(result), len(result))
    return result


class AbstractNavigableSet(AbstractSet[T], Reversible[T], ABC, Generic[T]):

    __slots__ = ()

    def __contains__(self: Self, element: Any, /) -> bool:
        compare = self.comparator
        for x in self.iterator():
            result = compare(x, element)
            if result == 0:
                return True
            elif result > 0:
                return False
        return False

    def __copy__(self: Self, /) -> Self:
        return type(self)._from_sorted(self, self.comparator)

    def __deepcopy__(self: Self, memo: Optional[dict[int, Any]] = None, /) -> Self:
        return type(self)._from_sorted((copy.deepcopy(x, memo) for x in self), self.comparator)

    def __eq__(self: Self, other: Any, /) -> bool:
        if not isinstance(other, AbstractNavigableSet):
            return NotImplemented
        elif len(self) != len(other):
            return False
        return all(x == y for x, y in zip(self, other))

    def __ne__(self: Self, other: Any, /) -> bool:
        result = type(self).__eq__(self, other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self: Self, /) -> int:
        return hash(tuple(self))

    def __iter__(self: Self, /) -> Iterator[T]:
        return self.iterator()

    def __repr__(self: Self, /) -> str:
        if id(self) in reprs_seen:
            return "..."
        reprs_seen.add(id(self))
        try:
            args = []
            if len(self) > 0:
                data = ", ".join([repr(x) for x in self])
                args.append(f"[{data}]")
            if self.comparator is not natural_order:
                args.append(f"comparator={self.comparator!r}")
            return f"{type(self).__name__}({', '.join(args)})"
        finally:
            reprs_seen.remove(id(self))

    def __reversed__(self: Self, /) -> Iterator[T]:
        return self.descending_iterator()

    def _from_iterable(self: Self, iterable: Iterable[T], /) -> Self:
        return type(self)._from_sorted(unique_sorted(iterable, self.comparator), self.comparator)

    @classmethod
    @abstractmethod
    def _from_sorted(cls: Type[Self], iterable: Iterable[T], comparator: Comparator[T], /) -> Self:
        raise NotImplementedError("_from_sorted is a required method for navigable sets")

    @abstractmethod
    def add(self: Self, element: T, /) -> bool:
        raise NotImplementedError("add is a required method for navigable sets")

    def ceiling(self: Self, element: T, /) -> Optional[T]:
        """Returns the least element greater than or equal to the given element, or None."""
        compare = self.comparator
        result = None
        for x in self.descending_iterator():
            if compare(x, element) < 0:
                break
            result = x
        return result

    @property
    @abstractmethod
    def comparator(self: Self, /) -> Comparator[T]:
        raise NotImplementedError("comparator is a required property for navigable sets")

    def copy(self: Self, /) -> Self:
        return copy.copy(self)

    @abstractmethod
    def descending_iterator(self: Self, /) -> Iterator[T]:
        raise NotImplementedError("descending_iterator is a required method for navigable sets")

    def descending_set(self: Self, /) -> Self:
        """Returns a copy of the set ordered by the reversed comparator."""
        return type(self)._from_sorted(self.descending_iterator(), reverse_order(self.comparator))

    def first(self: Self, /) -> T:
        for x in self.iterator():
            return x
        raise EmptyContainerError("cannot get the first element of an empty set")

    def floor(self: Self, element: T, /) -> Optional[T]:
        """Returns the greatest element less than or equal to the given element, or None."""
        compare = self.comparator
        result = None
        for x in self.iterator():
            if compare(x, element) > 0:
                break
            result = x
        return result

    @abstractmethod
    def head_set(self: Self, to_element: T, /, inclusive: bool = False) -> Self:
        raise NotImplementedError("head_set is a required method for navigable sets")

    def higher(self: Self, element: T, /) -> Optional[T]:
        """Returns the least element strictly greater than the given element, or None."""
        compare = self.comparator
        result = None
        for x in self.descending_iterator():
            if compare(x, element) <= 0:
                break
            result = x
        return result

    def is_empty(self: Self, /) -> bool:
        return len(self) == 0

    @abstractmethod
    def iterator(self: Self, /) -> Iterator[T]:
        raise NotImplementedError("iterator is a required method for navigable sets")

    def last(self: Self, /) -> T:
        for x in self.descending_iterator():
            return x
        raise EmptyContainerError("cannot get the last element of an empty set")

    def lower(self: Self, element: T, /) -> Optional[T]:
        """Returns the greatest element strictly less than the given element, or None."""
        compare = self.comparator
        result = None
        for x in self.iterator():
            if compare(x, element) >= 0:
                break
            result = x
        return result

    @abstractmethod
    def poll_first(self: Self, /) -> Optional[T]:
        raise NotImplementedError("poll_first is a required method for navigable sets")

    @abstractmethod
    def poll_last(self: Self, /) -> Optional[T]:
        raise NotImplementedError("poll_last is a required method for navigable sets")

    def size(self: Self, /) -> int:
        return len(self)

    @abstractmethod
    def sub_set(self: Self, from_element: T, to_element: T, /, from_inclusive: bool = True, to_inclusive: bool = False) -> Self:
        raise NotImplementedError("sub_set is a required method for navigable sets")

    @abstractmethod
    def tail_set(self: Self, from_element: T, /, inclusive: bool = True) -> Self:
        raise NotImplementedError("tail_set is a required method for navigable sets")
