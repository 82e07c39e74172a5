"""
Quicksort with the Hoare partition scheme (in place).

Pivot is always the leftmost element of the active range. There is no
median-of-three selection, so sorted or adversarial inputs degrade toward
O(n^2) comparisons. Recursion depth stays O(log n): only the smaller side of
each split is sorted by a recursive call.

Public API (stable):
    sort(a: list[int]) -> None
    quick_sort(a: list[int], lo: int, hi: int) -> None
    hoare_partition(a: list[int], lo: int, hi: int) -> int

Bounds are plain (lo, hi) ints passed by value to every recursive call;
both ends are inclusive.
"""

from __future__ import annotations

from typing import List

__all__ = ["sort", "quick_sort", "hoare_partition"]


def sort(a: List[int]) -> None:
    """Sort the whole of `a` in place."""
    quick_sort(a, 0, len(a) - 1)


def quick_sort(a: List[int], lo: int, hi: int) -> None:
    """
    Sort the inclusive range a[lo..hi] in place.

    Recurses into the smaller side of each split and loops on the larger one,
    so recursion depth stays O(log n) even when every split is lopsided.
    """
    while lo < hi:
        s = hoare_partition(a, lo, hi)
        if s - lo < hi - s:
            quick_sort(a, lo, s - 1)
            lo = s + 1
        else:
            quick_sort(a, s + 1, hi)
            hi = s - 1


def hoare_partition(a: List[int], lo: int, hi: int) -> int:
    """
    Partition a[lo..hi] around the pivot p = a[lo] and return its final index s.

    Afterwards:
        a[k] <= p for lo <= k <= s
        a[s] == p
        a[k] >= p for s < k <= hi

    Requires lo < hi.
    """
    p = a[lo]
    i = lo
    j = hi + 1
    while True:
        # Increasing cursor is bounded at hi: when p is the maximum of the
        # range there is no element >= p to stop on to its right.
        i += 1
        while i <= hi and a[i] < p:
            i += 1
        # Decreasing cursor always stops at a[lo] == p at the latest.
        j -= 1
        while a[j] > p:
            j -= 1
        if i >= j:
            break
        a[i], a[j] = a[j], a[i]
    a[lo], a[j] = a[j], a[lo]
    return j
