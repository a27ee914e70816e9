import pytest

from navigable_collections import (
    ElementNotFoundError,
    EmptyContainerError,
    InvalidRangeError,
    IteratorExhaustedError,
    NavigableSetError,
    OutOfRangeError,
    ReversedComparator,
    natural_order,
    reverse_order,
)


class TestNaturalOrder:

    def test_values(self):
        assert natural_order(1, 2) == -1
        assert natural_order(2, 2) == 0
        assert natural_order(3, 2) == 1
        assert natural_order("a", "b") == -1


class TestReverseOrder:

    def test_default(self):
        compare = reverse_order()
        assert compare(1, 2) == 1
        assert compare(2, 1) == -1
        assert compare(2, 2) == 0

    def test_custom(self):
        compare = reverse_order(lambda x, y: len(x) - len(y))
        assert compare("a", "bbb") == 2

    def test_twice(self):
        assert reverse_order(reverse_order()) is natural_order

    def test_equality(self):
        assert reverse_order() == reverse_order()
        assert hash(reverse_order()) == hash(reverse_order())
        assert isinstance(reverse_order(), ReversedComparator)

    def test_rejects_non_callable(self):
        with pytest.raises(TypeError):
            reverse_order(5)


class TestErrors:

    def test_hierarchy(self):
        assert issubclass(EmptyContainerError, NavigableSetError)
        assert issubclass(EmptyContainerError, IndexError)
        assert issubclass(InvalidRangeError, ValueError)
        assert issubclass(ElementNotFoundError, KeyError)
        assert issubclass(OutOfRangeError, InvalidRangeError)
        assert issubclass(OutOfRangeError, ElementNotFoundError)
        assert issubclass(IteratorExhaustedError, StopIteration)

    def test_element_not_found_message(self):
        assert str(ElementNotFoundError("3 is not in the set")) == "3 is not in the set"
