from collections.abc import Iterable
from typing import Generic, Optional, Type, TypeVar

from .abstract_navigable_set import AbstractNavigableSet, unique_sorted
from .comparator import Comparator, natural_order
from .errors import ElementNotFoundError, EmptyContainerError, InvalidRangeError, OutOfRangeError
from .iterator import AscendingIterator, DescendingIterator

__all__ = ["NavigableSet"]

T = TypeVar("T")

Self = TypeVar("Self", bound="NavigableSet")


class NavigableSet(AbstractNavigableSet[T], Generic[T]):
    """
    A set of unique elements kept in the order given by a comparator.

    The comparator takes two elements and returns a negative number, zero,
    or a positive number when the first element is less than, equal to, or
    greater than the second. Elements are ordered by their own comparison
    operators when no comparator is given.

    Elements are stored in a sorted list. Insertions and lookups scan the
    list, so they take linear time. Range views such as `sub_set` return
    independent copies of the selected elements.

    Usage:
        >>> s = NavigableSet([5, 1, 3, 7])
        >>> s.floor(4), s.ceiling(4)
        (3, 5)
        >>> list(s.sub_set(3, 7, to_inclusive=True))
        [3, 5, 7]
    """
    _data: list[T]
    _comparator: Comparator[T]

    __slots__ = {
        "_data":
            "The elements, sorted by the comparator with no duplicates.",
        "_comparator":
            "The comparator used to order the elements.",
    }

    def __init__(self: Self, iterable: Optional[Iterable[T]] = None, /, comparator: Optional[Comparator[T]] = None) -> None:
        if comparator is None:
            comparator = natural_order
        elif not callable(comparator):
            raise TypeError(f"{type(self).__name__} expected a callable comparator, got {comparator!r}")
        if iterable is None:
            self._data = []
        elif isinstance(iterable, Iterable):
            self._data = unique_sorted(iterable, comparator)
        else:
            raise TypeError(f"{type(self).__name__} expected an iterable, got {iterable!r}")
        self._comparator = comparator

    @classmethod
    def _from_sorted(cls: Type[Self], iterable: Iterable[T], comparator: Comparator[T], /) -> Self:
        self = cls.__new__(cls)
        self._data = [*iterable]
        self._comparator = comparator
        return self

    def __len__(self: Self, /) -> int:
        return len(self._data)

    def _index(self: Self, element: T, /) -> int:
        """Finds the index of an element used as a range bound."""
        if len(self._data) == 0:
            raise ElementNotFoundError(f"{element!r} is not in the empty set")
        compare = self._comparator
        if compare(element, self._data[0]) < 0:
            raise OutOfRangeError(f"{element!r} is less than the first element {self._data[0]!r}")
        elif compare(element, self._data[-1]) > 0:
            raise OutOfRangeError(f"{element!r} is greater than the last element {self._data[-1]!r}")
        for i, x in enumerate(self._data):
            result = compare(element, x)
            if result == 0:
                return i
            elif result < 0:
                break
        raise ElementNotFoundError(f"{element!r} is not in the set")

    def add(self: Self, element: T, /) -> bool:
        """
        Adds the element if it is not already in the set.

        Returns True if the element was inserted, or False if an equal
        element was already present, in which case the set is unchanged.
        """
        data = self._data
        if len(data) == 0:
            data.append(element)
            return True
        compare = self._comparator
        for i, x in enumerate(data):
            result = compare(element, x)
            if result == 0:
                return False
            elif result < 0:
                data.insert(i, element)
                return True
        data.append(element)
        return True

    @property
    def comparator(self: Self, /) -> Comparator[T]:
        return self._comparator

    def descending_iterator(self: Self, /) -> DescendingIterator[T]:
        return DescendingIterator(self._data)

    def first(self: Self, /) -> T:
        if len(self._data) == 0:
            raise EmptyContainerError("cannot get the first element of an empty set")
        return self._data[0]

    def head_set(self: Self, to_element: T, /, inclusive: bool = False) -> Self:
        """Returns a copy of the elements less than (or equal to, if inclusive) to_element."""
        stop = self._index(to_element)
        if inclusive:
            stop += 1
        return type(self)._from_sorted(self._data[:stop], self._comparator)

    def iterator(self: Self, /) -> AscendingIterator[T]:
        return AscendingIterator(self._data)

    def last(self: Self, /) -> T:
        if len(self._data) == 0:
            raise EmptyContainerError("cannot get the last element of an empty set")
        return self._data[-1]

    def poll_first(self: Self, /) -> Optional[T]:
        if len(self._data) == 0:
            return None
        return self._data.pop(0)

    def poll_last(self: Self, /) -> Optional[T]:
        if len(self._data) == 0:
            return None
        return self._data.pop()

    def sub_set(self: Self, from_element: T, to_element: T, /, from_inclusive: bool = True, to_inclusive: bool = False) -> Self:
        """
        Returns a copy of the elements between from_element and to_element.

        Both endpoints must be elements of the set. By default the range
        includes from_element and excludes to_element.

        Raises:
            InvalidRangeError:
                from_element is greater than to_element.
            OutOfRangeError:
                An endpoint lies outside of the first and last elements.
            ElementNotFoundError:
                An endpoint is not in the set.
        """
        if self._comparator(from_element, to_element) > 0:
            raise InvalidRangeError(f"{from_element!r} is greater than {to_element!r}")
        start = self._index(from_element)
        stop = self._index(to_element)
        if start == stop and not (from_inclusive and to_inclusive):
            return type(self)._from_sorted((), self._comparator)
        if not from_inclusive:
            start += 1
        if to_inclusive:
            stop += 1
        return type(self)._from_sorted(self._data[start:stop], self._comparator)

    def tail_set(self: Self, from_element: T, /, inclusive: bool = True) -> Self:
        """Returns a copy of the elements greater than (or equal to, if inclusive) from_element."""
        start = self._index(from_element)
        if not inclusive:
            start += 1
        return type(self)._from_sorted(self._data[start:], self._comparator)

    def update(self: Self, /, *iterables: Iterable[T]) -> None:
        for iterable in iterables:
            if not isinstance(iterable, Iterable):
                raise TypeError(f"update expected iterables, got {iterable!r}")
        for iterable in iterables:
            for element in iterable:
                self.add(element)
