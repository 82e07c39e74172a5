"""
Benchmark package public API.

Re-export the pieces callers usually need:
    from sorttrials.bench import run_benchmark, run_trial, TrialResult
"""

from .driver import BenchmarkRun, pick_growth_factor, run_benchmark, trial_sizes
from .harness import TrialAllocationError, TrialResult, generate_trial, run_trial
from .measure import time_sort

__all__ = [
    "BenchmarkRun",
    "TrialAllocationError",
    "TrialResult",
    "generate_trial",
    "pick_growth_factor",
    "run_benchmark",
    "run_trial",
    "time_sort",
    "trial_sizes",
]
