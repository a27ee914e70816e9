import copy

from navigable_collections import NavigableSet, reverse_order
from navigable_collections.abc import AbstractNavigableSet


class TestEquality:

    def test_insertion_order_does_not_matter(self):
        a = NavigableSet()
        b = NavigableSet()
        for x in [3, 1, 2]:
            a.add(x)
        for x in [2, 3, 1]:
            b.add(x)
        assert a == b
        assert not a != b
        assert hash(a) == hash(b)

    def test_value_equality(self):
        a = NavigableSet([(1, "x"), (2, "y")])
        b = NavigableSet([(2, "y"), (1, "x")])
        assert a == b
        assert hash(a) == hash(b)

    def test_equal_values_of_distinct_objects(self):
        big = 10 ** 20
        a = NavigableSet([int(str(big))])
        b = NavigableSet([int(str(big))])
        assert a.first() is not b.first()
        assert a == b

    def test_different_elements(self):
        assert NavigableSet([1, 2, 3]) != NavigableSet([1, 2, 4])
        assert NavigableSet([1, 2]) != NavigableSet([1, 2, 3])

    def test_order_matters(self):
        a = NavigableSet([1, 2, 3])
        b = NavigableSet([1, 2, 3], comparator=reverse_order())
        assert a != b

    def test_empty(self):
        assert NavigableSet() == NavigableSet()
        assert hash(NavigableSet()) == hash(NavigableSet())

    def test_other_types(self):
        assert NavigableSet([1, 2]) != [1, 2]
        assert NavigableSet([1, 2]) != (1, 2)

    def test_usable_as_dict_key(self):
        counts = {NavigableSet([1, 2]): "a"}
        assert counts[NavigableSet([2, 1])] == "a"


class TestRepr:

    def test_empty(self):
        assert repr(NavigableSet()) == "NavigableSet()"

    def test_elements(self):
        assert repr(NavigableSet([3, 1, 2])) == "NavigableSet([1, 2, 3])"

    def test_comparator(self):
        text = repr(NavigableSet([1, 2], comparator=reverse_order()))
        assert text.startswith("NavigableSet([2, 1], comparator=reverse_order(")


class TestCopy:

    def test_copy(self):
        s = NavigableSet([1, 2, 3], comparator=reverse_order())
        c = s.copy()
        assert c == s
        assert c is not s
        assert c.comparator is s.comparator
        c.add(4)
        assert 4 not in s

    def test_copy_module(self):
        s = NavigableSet([1, 2])
        assert copy.copy(s) == s

    def test_deepcopy(self):
        s = NavigableSet([[2], [1]])
        d = copy.deepcopy(s)
        assert list(d) == [[1], [2]]
        assert d.first() is not s.first()


class TestSetAlgebra:

    def test_is_abstract_set(self):
        assert isinstance(NavigableSet(), AbstractNavigableSet)

    def test_intersection(self):
        result = NavigableSet([1, 2, 3]) & NavigableSet([2, 3, 4])
        assert isinstance(result, NavigableSet)
        assert list(result) == [2, 3]

    def test_union_keeps_comparator(self):
        a = NavigableSet([1, 3], comparator=reverse_order())
        result = a | NavigableSet([2, 3])
        assert list(result) == [3, 2, 1]
        assert result.comparator is a.comparator

    def test_difference(self):
        assert list(NavigableSet([1, 2, 3]) - NavigableSet([2])) == [1, 3]

    def test_subset(self):
        assert NavigableSet([1, 2]) <= NavigableSet([1, 2, 3])
        assert not NavigableSet([1, 4]) <= NavigableSet([1, 2, 3])
        assert NavigableSet([1, 2]).isdisjoint(NavigableSet([3]))
