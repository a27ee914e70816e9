from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

__all__ = ["Comparator", "ReversedComparator", "SupportsRichComparison", "natural_order", "reverse_order"]

Self = TypeVar("Self", bound="SupportsRichComparison")
T = TypeVar("T")

Comparator = Callable[[T, T], int]


@runtime_checkable
class SupportsRichComparison(Protocol):

    def __eq__(self: Self, other: Any) -> bool: ...
    def __ge__(self: Self, other: Any) -> bool: ...
    def __gt__(self: Self, other: Any) -> bool: ...
    def __le__(self: Self, other: Any) -> bool: ...
    def __lt__(self: Self, other: Any) -> bool: ...
    def __ne__(self: Self, other: Any) -> bool: ...


def natural_order(x: SupportsRichComparison, y: SupportsRichComparison, /) -> int:
    """Compares two elements using their own ordering, returning -1, 0, or 1."""
    return (x > y) - (x < y)


class ReversedComparator:
    _comparator: Comparator[Any]

    __slots__ = {
        "_comparator":
            "The comparator being reversed.",
    }

    def __init__(self, comparator: Comparator[Any], /) -> None:
        if not callable(comparator):
            raise TypeError(f"expected a callable comparator, got {comparator!r}")
        self._comparator = comparator

    def __call__(self, x: Any, y: Any, /) -> int:
        return self._comparator(y, x)

    def __eq__(self, other: Any, /) -> bool:
        if isinstance(other, ReversedComparator):
            return self._comparator == other._comparator
        else:
            return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self), self._comparator))

    def __repr__(self) -> str:
        return f"{reverse_order.__name__}({self._comparator!r})"

    @property
    def comparator(self) -> Comparator[Any]:
        return self._comparator


def reverse_order(comparator: Comparator[T] = natural_order, /) -> Comparator[T]:
    """
    Returns a comparator imposing the opposite ordering.

    Reversing a reversed comparator gives back the original comparator
    instead of nesting wrappers.
    """
    if isinstance(comparator, ReversedComparator):
        return comparator.comparator
    return ReversedComparator(comparator)
