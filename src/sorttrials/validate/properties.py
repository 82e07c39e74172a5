"""
Property helpers for validating sorting results.

The harness uses `is_nondecreasing` as its validity check after every timed
sort; the remaining helpers give precise diagnostics in tests.

Public API (stable):
    is_nondecreasing(xs: Sequence[int]) -> bool
    first_nondecreasing_violation_index(xs: Sequence[int]) -> int | None
    is_permutation(a: Sequence[int], b: Sequence[int]) -> bool
    partition_holds(xs: Sequence[int], lo: int, s: int, hi: int) -> bool
"""

from __future__ import annotations

from collections import Counter
from typing import Optional, Sequence

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "partition_holds",
]


def is_nondecreasing(xs: Sequence[int]) -> bool:
    """Return True iff xs[i] <= xs[i+1] for all i. Stops at the first inversion."""
    return first_nondecreasing_violation_index(xs) is None


def first_nondecreasing_violation_index(xs: Sequence[int]) -> Optional[int]:
    """
    Scan adjacent pairs left to right and return the left index of the first
    inversion (xs[i] > xs[i+1]). Sequences shorter than two never have one.
    """
    prev = None
    for i, x in enumerate(xs):
        if prev is not None and prev > x:
            return i - 1
        prev = x
    return None


def is_permutation(a: Sequence[int], b: Sequence[int]) -> bool:
    """Same values with the same multiplicities, order ignored."""
    return len(a) == len(b) and Counter(a) == Counter(b)


def partition_holds(xs: Sequence[int], lo: int, s: int, hi: int) -> bool:
    """
    Return True iff xs[lo..s] are all <= xs[s] and xs[s+1..hi] are all >= xs[s].

    This is the postcondition of a Hoare partition whose pivot landed at `s`.
    """
    if not lo <= s <= hi:
        return False
    p = xs[s]
    return all(x <= p for x in xs[lo : s + 1]) and all(x >= p for x in xs[s + 1 : hi + 1])
