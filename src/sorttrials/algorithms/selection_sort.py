"""
Selection sort (in place).

For each position i in [0, n-2], scan i+1..n-1 for the minimum and swap it
into position i. The scan uses strict `<`, so the earliest minimum wins.

O(n^2) comparisons, O(n) swaps.
"""

from __future__ import annotations

from typing import List

__all__ = ["sort"]


def sort(a: List[int]) -> None:
    """Sort `a` in place into nondecreasing order."""
    n = len(a)
    for i in range(n - 1):
        m = i
        for j in range(i + 1, n):
            if a[j] < a[m]:
                m = j
        a[i], a[m] = a[m], a[i]
