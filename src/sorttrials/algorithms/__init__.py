"""
Sorting algorithms public API.

The benchmark works over a closed set of in-place integer sorts:

    SortStrategy.SELECTION  -> selection_sort.sort
    SortStrategy.INSERTION  -> insertion_sort.sort
    SortStrategy.QUICK      -> quick_sort.sort   (Hoare partition, leftmost pivot)

Every strategy exposes the same operation:
    strategy.sort(a: list[int]) -> None

`STRATEGIES` is the fixed order in which a trial runs them. `SortFlag` is the
bitmask used to report which strategies produced unsorted output.
"""

from __future__ import annotations

import enum
from typing import Callable, Dict, List, Tuple

from . import insertion_sort, quick_sort, selection_sort

__all__ = ["SortFlag", "SortStrategy", "STRATEGIES"]


class SortFlag(enum.IntFlag):
    NONE = 0
    SELECTION = 1
    QUICK = 2
    INSERTION = 4


class SortStrategy(enum.Enum):
    SELECTION = "selection_sort"
    INSERTION = "insertion_sort"
    QUICK = "quick_sort"

    @property
    def flag(self) -> SortFlag:
        return SortFlag[self.name]

    @property
    def label(self) -> str:
        """Human-readable name used in tables and messages."""
        return _LABELS[self]

    def sort(self, a: List[int]) -> None:
        """Sort `a` in place with this strategy."""
        _SORTERS[self](a)


_SORTERS: Dict[SortStrategy, Callable[[List[int]], None]] = {
    SortStrategy.SELECTION: selection_sort.sort,
    SortStrategy.INSERTION: insertion_sort.sort,
    SortStrategy.QUICK: quick_sort.sort,
}

_LABELS: Dict[SortStrategy, str] = {
    SortStrategy.SELECTION: "Selection Sort",
    SortStrategy.INSERTION: "Insertion sort",
    SortStrategy.QUICK: "Quicksort",
}

STRATEGIES: Tuple[SortStrategy, ...] = (
    SortStrategy.SELECTION,
    SortStrategy.INSERTION,
    SortStrategy.QUICK,
)
