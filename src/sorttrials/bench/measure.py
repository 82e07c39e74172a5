"""
Timing harness for sorting strategies.

We measure exactly one synchronous call to `strategy.sort(a)` using a monotonic
high-resolution clock, then validate the result with a single left-to-right
scan. Validation happens outside the timed block.

Public API (stable):
    time_sort(strategy, a, *, disable_gc=False) -> (elapsed_ms: float, is_valid: bool)

An exception escaping the sort (for instance a `RecursionError` or `MemoryError`)
does not abort the benchmark: it is logged and the call is reported as invalid,
with the time spent until the failure.
"""

from __future__ import annotations

import gc
import logging
import time
from typing import List, Tuple

from sorttrials.algorithms import SortStrategy
from sorttrials.validate import first_nondecreasing_violation_index

__all__ = ["time_sort", "ns_to_ms"]

logger = logging.getLogger(__name__)


def time_sort(
    strategy: SortStrategy,
    a: List[int],
    *,
    disable_gc: bool = False,
) -> Tuple[float, bool]:
    """
    Time one in-place sort of `a` and check the outcome.

    Parameters
    ----------
    strategy : SortStrategy
        Which algorithm to run.
    a : list[int]
        The sequence to sort. Owned by this call; it is mutated in place.
    disable_gc : bool
        If True, collect and disable Python GC around the timed call; restore afterward.

    Returns
    -------
    (float, bool)
        Elapsed wall-clock milliseconds and whether `a` ended up nondecreasing.
    """
    prev_gc_enabled = gc.isenabled()
    failed = False
    try:
        if disable_gc:
            gc.collect()
            gc.disable()

        t0 = time.perf_counter_ns()
        try:
            strategy.sort(a)
        except Exception:
            failed = True
            logger.exception("%s raised on %d elements", strategy.label, len(a))
        t1 = time.perf_counter_ns()

    finally:
        # Restore original GC state; if GC was already disabled, leave it disabled.
        if disable_gc and prev_gc_enabled:
            gc.enable()

    elapsed_ms = ns_to_ms(t1 - t0)
    if failed:
        return elapsed_ms, False

    bad = first_nondecreasing_violation_index(a)
    if bad is not None:
        logger.debug(
            "%s left %d elements unsorted: a[%d]=%d > a[%d]=%d",
            strategy.label, len(a), bad, a[bad], bad + 1, a[bad + 1],
        )
    return elapsed_ms, bad is None


def ns_to_ms(elapsed_ns: int) -> float:
    """Convert an integer nanosecond span to fractional milliseconds."""
    return elapsed_ns / 1e6
