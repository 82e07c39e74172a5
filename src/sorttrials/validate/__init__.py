"""
Validation utilities public API.

Re-exports:
    is_nondecreasing
    first_nondecreasing_violation_index
    is_permutation
    partition_holds
"""

from .properties import (
    first_nondecreasing_violation_index,
    is_nondecreasing,
    is_permutation,
    partition_holds,
)

__all__ = [
    "is_nondecreasing",
    "first_nondecreasing_violation_index",
    "is_permutation",
    "partition_holds",
]
