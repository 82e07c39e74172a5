"""
Trial harness: one dataset, three sorts, one result.

For a given size we draw ONE random dataset and give every strategy its own
copy, so no algorithm ever observes another's mutations. Each copy is timed
and validated exactly once.

Public API (stable):
    generate_trial(size, rng, value_range=(0, 9)) -> tuple[list[int], ...]
    run_trial(size, rng, *, value_range=(0, 9), disable_gc=False) -> TrialResult
    TrialResult
    TrialAllocationError

Allocation failure is fatal for a trial: `TrialAllocationError` names the
sequence that could not be obtained and no partial trial is returned.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple

import numpy as np
import psutil

from sorttrials.algorithms import STRATEGIES, SortFlag, SortStrategy
from sorttrials.bench.measure import time_sort
from sorttrials.datasets import DEFAULT_VALUE_RANGE, make_values

__all__ = [
    "TrialAllocationError",
    "TrialResult",
    "estimate_trial_bytes",
    "generate_trial",
    "run_trial",
]

logger = logging.getLogger(__name__)

# One pointer per list slot on 64-bit CPython.
_BYTES_PER_SLOT = 8


class TrialAllocationError(MemoryError):
    """Memory for a trial's working sequence could not be obtained."""

    def __init__(self, what: str, size: int) -> None:
        super().__init__(f"could not allocate {what} ({size} elements)")
        self.what = what
        self.size = size


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class TrialResult:
    num_elements: int
    selection_ms: float
    insertion_ms: float
    quick_ms: float
    selection_ok: bool = True
    insertion_ok: bool = True
    quick_ok: bool = True

    def duration_ms(self, strategy: SortStrategy) -> float:
        return getattr(self, _FIELD_PREFIX[strategy] + "_ms")

    def is_valid(self, strategy: SortStrategy) -> bool:
        return getattr(self, _FIELD_PREFIX[strategy] + "_ok")

    @property
    def failures(self) -> SortFlag:
        """Bitmask of the strategies whose output failed the order check."""
        mask = SortFlag.NONE
        for s in STRATEGIES:
            if not self.is_valid(s):
                mask |= s.flag
        return mask

    @property
    def ok(self) -> bool:
        return not self.failures


_FIELD_PREFIX = {
    SortStrategy.SELECTION: "selection",
    SortStrategy.INSERTION: "insertion",
    SortStrategy.QUICK: "quick",
}


# ------------------------- trial steps ------------------------- #

def estimate_trial_bytes(size: int) -> int:
    """Rough upper bound on the memory one trial of `size` elements needs."""
    # Three working lists plus the transient base draw.
    return (len(STRATEGIES) + 1) * _BYTES_PER_SLOT * size


def generate_trial(
    size: int,
    rng: np.random.Generator,
    value_range: Tuple[int, int] = DEFAULT_VALUE_RANGE,
) -> Tuple[List[int], ...]:
    """
    Return one independently-owned copy of the same random dataset per strategy.

    The tuple is ordered like `STRATEGIES`. All copies are element-wise equal
    at creation.

    Raises
    ------
    TrialAllocationError
        If available memory cannot hold the trial, or a copy fails to allocate.
    ValueError
        If `size` is negative or `value_range` is malformed.
    """
    needed = estimate_trial_bytes(size)
    available = psutil.virtual_memory().available
    if needed > available:
        logger.error("trial of %d elements needs ~%d bytes, %d available", size, needed, available)
        raise TrialAllocationError("trial data", size)

    try:
        base = make_values(size, rng, value_range)
    except MemoryError as e:
        raise TrialAllocationError("base dataset", size) from e

    copies: List[List[int]] = []
    for s in STRATEGIES:
        try:
            copies.append(list(base))
        except MemoryError as e:
            raise TrialAllocationError(f"{s.label} data", size) from e
    return tuple(copies)


def run_trial(
    size: int,
    rng: np.random.Generator,
    *,
    value_range: Tuple[int, int] = DEFAULT_VALUE_RANGE,
    disable_gc: bool = False,
) -> TrialResult:
    """Generate a dataset of `size` elements and time every strategy on its own copy."""
    data = generate_trial(size, rng, value_range)

    fields: Dict[str, Any] = {"num_elements": size}
    for strategy, a in zip(STRATEGIES, data):
        elapsed_ms, valid = time_sort(strategy, a, disable_gc=disable_gc)
        prefix = _FIELD_PREFIX[strategy]
        fields[prefix + "_ms"] = elapsed_ms
        fields[prefix + "_ok"] = valid
        logger.debug("n=%d %s: %.3f ms valid=%s", size, strategy.label, elapsed_ms, valid)

    return TrialResult(**fields)
