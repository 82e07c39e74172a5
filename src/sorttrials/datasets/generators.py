"""
Value generators for sorting trials.

Every trial draws its workload uniformly from a small inclusive integer range
(by default [0, 9], i.e. ten distinct keys, so duplicates are frequent).

Public API (stable):
    make_values(n: int, rng: numpy.random.Generator, value_range=(0, 9)) -> list[int]
    parse_value_range(spec) -> tuple[int, int]

Conventions:
- `value_range` is **inclusive** on both ends.
- Returns a Python `list[int]` (algorithms stay NumPy-agnostic).
- The caller supplies the RNG; nothing here seeds or stores one.
"""

from __future__ import annotations

from typing import Any, List, Tuple

import numpy as np

DEFAULT_VALUE_RANGE: Tuple[int, int] = (0, 9)

__all__ = ["DEFAULT_VALUE_RANGE", "make_values", "parse_value_range"]


def make_values(
    n: int,
    rng: np.random.Generator,
    value_range: Tuple[int, int] = DEFAULT_VALUE_RANGE,
) -> List[int]:
    """
    Draw `n` integers uniformly from the inclusive `value_range`.

    Parameters
    ----------
    n : int
        Number of elements to generate. Must be >= 0.
    rng : numpy.random.Generator
        Random number generator owned by the caller (seeded upstream).
    value_range : tuple[int, int]
        Inclusive [lo, hi] bounds.

    Raises
    ------
    ValueError
        If `n` is negative or the range is malformed.
    """
    _validate_n(n)
    lo, hi = parse_value_range(value_range)
    if n == 0:
        return []
    # np.random.Generator.integers is half-open [low, high) by default.
    arr = rng.integers(lo, hi + 1, size=n, dtype=np.int64)
    return arr.tolist()


def parse_value_range(spec: Any) -> Tuple[int, int]:
    """
    Validate an inclusive [min, max] pair and return it as a tuple of ints.
    """
    if not isinstance(spec, (list, tuple)) or len(spec) != 2:
        raise ValueError("value_range must be a 2-element list/tuple [min, max]")
    lo_raw, hi_raw = spec
    if not _is_int_like(lo_raw) or not _is_int_like(hi_raw):
        raise ValueError("value_range values must be integers")
    lo, hi = int(lo_raw), int(hi_raw)
    if lo > hi:
        raise ValueError(f"value_range invalid: min > max ({lo} > {hi})")
    return lo, hi


# ------------------------- helpers ------------------------- #


def _validate_n(n: int) -> None:
    if not _is_int_like(n):
        raise ValueError("n must be an int")
    if n < 0:
        raise ValueError("n must be nonnegative")


def _is_int_like(x: Any) -> bool:
    # Accept Python ints and NumPy integer types, but not bools
    return isinstance(x, (int, np.integer)) and not isinstance(x, bool)
