"""
sorttrials: time textbook integer sorts over growing random arrays.

Subpackages:
    algorithms  - selection, insertion and Hoare-partition quicksort
    datasets    - uniform integer workloads from a caller-owned RNG
    validate    - order / permutation / partition checks
    bench       - timing harness, trial driver, reporting
"""

__version__ = "0.1.0"
