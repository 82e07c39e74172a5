"""
Datasets package public API.

Re-export the value generator so callers can write:
    from sorttrials.datasets import make_values
"""

from .generators import DEFAULT_VALUE_RANGE, make_values, parse_value_range

__all__ = ["DEFAULT_VALUE_RANGE", "make_values", "parse_value_range"]
