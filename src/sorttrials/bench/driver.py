"""
Benchmark driver: a fixed number of trials over geometrically growing sizes.

Design notes:
- One growth factor g in [2, 10] is drawn before the first trial and reused
  unchanged, so trial k (1-based) has base_size * g**k elements.
- The RNG is owned by the driver for the whole run and threaded through every
  trial; pass one in (or a seed) for deterministic runs.
- A trial whose sorts produce unsorted output is recorded as a failure and the
  run continues. Only allocation failure stops a run.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import List, Optional, Tuple

import numpy as np
from tqdm import tqdm

from sorttrials.algorithms import SortFlag
from sorttrials.bench.harness import TrialResult, run_trial
from sorttrials.datasets import DEFAULT_VALUE_RANGE

__all__ = [
    "BenchmarkRun",
    "DEFAULT_BASE_SIZE",
    "DEFAULT_NUM_TRIALS",
    "GROWTH_RANGE",
    "pick_growth_factor",
    "run_benchmark",
    "trial_sizes",
]

logger = logging.getLogger(__name__)

DEFAULT_BASE_SIZE = 10000
DEFAULT_NUM_TRIALS = 3
GROWTH_RANGE: Tuple[int, int] = (2, 10)  # inclusive


# ------------------------- data structures ------------------------- #

@dataclass(frozen=True)
class BenchmarkRun:
    base_size: int
    growth_factor: int
    seed: Optional[int]
    results: Tuple[TrialResult, ...]
    failures: Tuple[Tuple[int, SortFlag], ...] = ()

    @property
    def ok(self) -> bool:
        return not self.failures

    @property
    def failure_mask(self) -> SortFlag:
        """Union of every strategy that failed in any trial."""
        mask = SortFlag.NONE
        for _, flags in self.failures:
            mask |= flags
        return mask


# ------------------------- helpers ------------------------- #

def pick_growth_factor(rng: np.random.Generator) -> int:
    lo, hi = GROWTH_RANGE
    return int(rng.integers(lo, hi + 1))


def trial_sizes(base_size: int, growth_factor: int, num_trials: int) -> List[int]:
    """Return [base*g, base*g**2, ..., base*g**num_trials]."""
    sizes = []
    size = base_size
    for _ in range(num_trials):
        size *= growth_factor
        sizes.append(size)
    return sizes


def _validate_args(base_size: int, num_trials: int, growth_factor: Optional[int]) -> None:
    if not isinstance(base_size, int) or base_size < 0:
        raise ValueError(f"base_size must be a nonnegative int; got {base_size!r}")
    if not isinstance(num_trials, int) or num_trials < 1:
        raise ValueError(f"num_trials must be an int >= 1; got {num_trials!r}")
    if growth_factor is not None:
        lo, hi = GROWTH_RANGE
        if not isinstance(growth_factor, int) or not lo <= growth_factor <= hi:
            raise ValueError(f"growth_factor must be an int in [{lo}, {hi}]; got {growth_factor!r}")


# ------------------------- core driver ------------------------- #

def run_benchmark(
    base_size: int = DEFAULT_BASE_SIZE,
    *,
    num_trials: int = DEFAULT_NUM_TRIALS,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
    growth_factor: Optional[int] = None,
    value_range: Tuple[int, int] = DEFAULT_VALUE_RANGE,
    disable_gc: bool = False,
    progress: bool = False,
) -> BenchmarkRun:
    """
    Run `num_trials` trials and collect their results in order.

    Parameters
    ----------
    base_size : int
        Size the first trial's size is grown from (the first trial has
        base_size * growth_factor elements).
    rng : numpy.random.Generator, optional
        Random source for growth factor and data. Takes precedence over `seed`.
    seed : int, optional
        Seed for a fresh `numpy.random.default_rng`. When neither `rng` nor
        `seed` is given, the wall clock is used.
    growth_factor : int, optional
        Fixed multiplier in [2, 10]; drawn from the RNG when omitted.

    Raises
    ------
    TrialAllocationError
        If a trial cannot obtain its working memory.
    ValueError
        On invalid arguments.
    """
    _validate_args(base_size, num_trials, growth_factor)

    if rng is None:
        if seed is None:
            seed = time.time_ns()
        rng = np.random.default_rng(seed)
        logger.info("seeded RNG with %d", seed)

    if growth_factor is None:
        growth_factor = pick_growth_factor(rng)
    logger.info("growth factor %d over %d trials from base size %d", growth_factor, num_trials, base_size)

    sizes = trial_sizes(base_size, growth_factor, num_trials)
    size_iter = sizes
    if progress:
        size_iter = tqdm(sizes, desc="Trials", unit="trial")

    results: List[TrialResult] = []
    failures: List[Tuple[int, SortFlag]] = []
    for idx, n in enumerate(size_iter):
        res = run_trial(n, rng, value_range=value_range, disable_gc=disable_gc)
        results.append(res)
        if not res.ok:
            failures.append((idx, res.failures))
            logger.warning("trial %d (n=%d): unsorted output from %s", idx, n, res.failures)

    return BenchmarkRun(
        base_size=base_size,
        growth_factor=growth_factor,
        seed=seed,
        results=tuple(results),
        failures=tuple(failures),
    )
