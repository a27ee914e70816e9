from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

from .errors import IteratorExhaustedError

__all__ = ["AscendingIterator", "DescendingIterator"]

T = TypeVar("T")

Self = TypeVar("Self", bound="AscendingIterator")


class AscendingIterator(Iterator[T], Generic[T]):
    _data: tuple[T, ...]
    _cursor: int

    __slots__ = {
        "_data":
            "A snapshot of the elements taken when the iterator was created.",
        "_cursor":
            "The index of the next element to produce.",
    }

    def __init__(self: Self, data: Iterable[T], /) -> None:
        self._data = tuple(data)
        self._cursor = 0

    def __iter__(self: Self, /) -> Self:
        return self

    def __length_hint__(self: Self, /) -> int:
        return len(self._data) - self._cursor

    def __next__(self: Self, /) -> T:
        if not self.has_next():
            raise IteratorExhaustedError("ascending iterator is exhausted")
        element = self._data[self._cursor]
        self._cursor += 1
        return element

    def __repr__(self: Self, /) -> str:
        return f"<{type(self).__name__} at {self._cursor} of {len(self._data)}>"

    def has_next(self: Self, /) -> bool:
        return self._cursor < len(self._data)


class DescendingIterator(Iterator[T], Generic[T]):
    _data: tuple[T, ...]
    _cursor: int

    __slots__ = {
        "_data":
            "A snapshot of the elements taken when the iterator was created.",
        "_cursor":
            "The index of the next element to produce, -1 once exhausted.",
    }

    def __init__(self, data: Iterable[T], /) -> None:
        self._data = tuple(data)
        self._cursor = len(self._data) - 1

    def __iter__(self) -> "DescendingIterator[T]":
        return self

    def __length_hint__(self) -> int:
        return self._cursor + 1

    def __next__(self) -> T:
        # Index 0 is a valid position.
        if not self.has_next():
            raise IteratorExhaustedError("descending iterator is exhausted")
        element = self._data[self._cursor]
        self._cursor -= 1
        return element

    def __repr__(self) -> str:
        return f"<{type(self).__name__} at {self._cursor} of {len(self._data)}>"

    def has_next(self) -> bool:
        return self._cursor >= 0
