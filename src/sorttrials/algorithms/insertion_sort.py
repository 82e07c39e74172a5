"""
Insertion sort (in place).

O(n^2) worst case, O(n) on already-sorted input.
"""

from __future__ import annotations

from typing import List

__all__ = ["sort"]


def sort(a: List[int]) -> None:
    for i in range(1, len(a)):
        v = a[i]
        j = i - 1
        # Shift larger predecessors one slot right
        while j >= 0 and a[j] > v:
            a[j + 1] = a[j]
            j -= 1
        a[j + 1] = v
