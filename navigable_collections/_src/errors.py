__all__ = [
    "NavigableSetError",
    "EmptyContainerError",
    "InvalidRangeError",
    "ElementNotFoundError",
    "OutOfRangeError",
    "IteratorExhaustedError",
]


class NavigableSetError(Exception):
    """Base class for errors raised by navigable sets."""


class EmptyContainerError(NavigableSetError, IndexError):
    """Raised when the first or last element of an empty set is requested."""


class InvalidRangeError(NavigableSetError, ValueError):
    """Raised when the endpoints of a range view are inverted or out of bounds."""


class ElementNotFoundError(NavigableSetError, KeyError):
    """Raised when an endpoint of a range view is not in the set."""

    def __str__(self) -> str:
        return Exception.__str__(self)


class OutOfRangeError(InvalidRangeError, ElementNotFoundError):
    """
    Raised when an endpoint of a range view lies below the first element or
    above the last element of the set.

    Such an endpoint is both outside the range of the set and not one of its
    elements, so either of the parent errors may be caught.
    """


class IteratorExhaustedError(StopIteration):
    """Raised when an iterator is advanced past its last element."""
