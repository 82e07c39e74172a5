"""
Hoare partition tests.

The partition is the core of quicksort correctness: after one call on (lo, hi)
the pivot taken from a[lo] sits at the returned index s, with nothing larger
to its left and nothing smaller to its right. Sorting then follows by
recursive decomposition.
"""

from __future__ import annotations

from typing import List

import pytest
from hypothesis import assume, given, settings, strategies as st

from sorttrials.algorithms.quick_sort import hoare_partition, quick_sort
from sorttrials.validate import is_permutation, partition_holds


def test_partition_worked_example() -> None:
    a = [5, 3, 8, 3, 1]
    s = hoare_partition(a, 0, 4)
    assert s == 3
    assert a == [3, 3, 1, 5, 8]
    assert partition_holds(a, 0, s, 4)


def test_partition_pivot_is_range_maximum_at_array_end() -> None:
    # The increasing cursor finds nothing >= 9 before running off the end.
    a = [9, 1, 2, 3]
    s = hoare_partition(a, 0, 3)
    assert s == 3
    assert a[s] == 9
    assert partition_holds(a, 0, s, 3)


def test_partition_pivot_is_range_minimum() -> None:
    a = [0, 4, 2, 7]
    s = hoare_partition(a, 0, 3)
    assert s == 0
    assert a == [0, 4, 2, 7]


def test_partition_all_equal() -> None:
    a = [3, 3, 3, 3, 3]
    s = hoare_partition(a, 0, 4)
    assert 0 <= s <= 4
    assert a == [3, 3, 3, 3, 3]


def test_partition_leaves_outside_range_alone() -> None:
    a = [100, 6, 2, 9, 4, -100]
    s = hoare_partition(a, 1, 4)
    assert a[0] == 100 and a[5] == -100
    assert 1 <= s <= 4
    assert a[s] == 6
    assert partition_holds(a, 1, s, 4)


def test_quick_sort_subrange_only() -> None:
    a = [9, 5, 4, 3, 2, 0]
    quick_sort(a, 1, 4)
    assert a == [9, 2, 3, 4, 5, 0]


@pytest.mark.parametrize("lo,hi", [(0, -1), (0, 0), (3, 3), (4, 2)])
def test_quick_sort_trivial_bounds_are_noops(lo: int, hi: int) -> None:
    a = [4, 3, 2, 1, 0]
    quick_sort(a, lo, hi)
    assert a == [4, 3, 2, 1, 0]


@settings(deadline=None, max_examples=150)
@given(st.lists(st.integers(min_value=-50, max_value=50), min_size=2, max_size=120), st.data())
def test_property_partition(a: List[int], data: st.DataObject) -> None:
    lo = data.draw(st.integers(min_value=0, max_value=len(a) - 2))
    hi = data.draw(st.integers(min_value=lo + 1, max_value=len(a) - 1))
    assume(lo < hi)
    before = list(a)
    pivot = a[lo]

    s = hoare_partition(a, lo, hi)

    assert lo <= s <= hi
    assert a[s] == pivot
    assert partition_holds(a, lo, s, hi)
    assert a[:lo] == before[:lo] and a[hi + 1 :] == before[hi + 1 :]
    assert is_permutation(a[lo : hi + 1], before[lo : hi + 1])
