"""
Reporting for benchmark runs.

Consumes an ordered sequence of TrialResult records and renders them; nothing
here feeds back into the benchmark.

    trials_frame(results)         -> pandas.DataFrame (one row per trial)
    format_table(results)         -> fixed-width text table
    print_table(results, console) -> rich table
    describe_failures(mask)       -> "ERROR! INSERTION. QUICK." style line
    slower_than_expected(results) -> strategies whose times shrink as n grows
    machine_summary()             -> one-line CPU/RAM/platform description
"""

from __future__ import annotations

import platform
from typing import List, Optional, Sequence

import pandas as pd
import psutil
from rich.console import Console
from rich.table import Table

from sorttrials.algorithms import STRATEGIES, SortFlag, SortStrategy
from sorttrials.bench.harness import TrialResult

__all__ = [
    "COLUMNS",
    "trials_frame",
    "format_table",
    "print_table",
    "describe_failures",
    "slower_than_expected",
    "machine_summary",
]

COLUMNS = ["num_elements", "selection_ms", "insertion_ms", "quick_ms"]

_STRATEGY_COLUMN = {
    SortStrategy.SELECTION: "selection_ms",
    SortStrategy.INSERTION: "insertion_ms",
    SortStrategy.QUICK: "quick_ms",
}

# Fixed-width layout: element count, then one column per strategy.
_WIDTHS = (23, 17, 16, 12)
_HEADERS = ("Number of Elements", "Selection Sort", "Insertion sort", "Quicksort")


# ------------------------- tabular data ------------------------- #

def trials_frame(results: Sequence[TrialResult]) -> pd.DataFrame:
    """Return one row per trial, in trial order, with millisecond timings."""
    rows = [
        {
            "num_elements": r.num_elements,
            "selection_ms": r.selection_ms,
            "insertion_ms": r.insertion_ms,
            "quick_ms": r.quick_ms,
        }
        for r in results
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def slower_than_expected(results: Sequence[TrialResult]) -> List[SortStrategy]:
    """
    Return the strategies whose durations are not nondecreasing across trials.

    Timing noise makes this a soft signal; callers should only report it.
    """
    df = trials_frame(results)
    return [s for s in STRATEGIES if not df[_STRATEGY_COLUMN[s]].is_monotonic_increasing]


# ------------------------- text output ------------------------- #

def _border() -> str:
    return "+" + "+".join("-" * w for w in _WIDTHS) + "+"


def _header() -> str:
    return "|" + "|".join(f"{h:>{w - 1}} " for h, w in zip(_HEADERS, _WIDTHS)) + "|"


def _row(r: TrialResult) -> str:
    w0, w1, w2, w3 = _WIDTHS
    return (
        f"|{r.num_elements:{w0}d}|{r.selection_ms:{w1}f}"
        f"|{r.insertion_ms:{w2}f}|{r.quick_ms:{w3}f}|"
    )


def format_table(results: Sequence[TrialResult]) -> str:
    """
    Render results as a fixed-width table bounded by border rows.

    +-----------------------+-----------------+----------------+------------+
    |    Number of Elements |  Selection Sort | Insertion sort |  Quicksort |
    +-----------------------+-----------------+----------------+------------+
    |                  50000|       812.004000|      655.120000|   41.870000|
    +-----------------------+-----------------+----------------+------------+
    """
    border = _border()
    lines = [border, _header(), border]
    lines.extend(_row(r) for r in results)
    lines.append(border)
    return "\n".join(lines)


def describe_failures(mask: SortFlag) -> str:
    """Return an error line naming each failed strategy, or '' if none failed."""
    if not mask:
        return ""
    parts = ["ERROR!"]
    for flag in (SortFlag.INSERTION, SortFlag.SELECTION, SortFlag.QUICK):
        if mask & flag:
            parts.append(f"{flag.name}.")
    return " ".join(parts)


def print_table(
    results: Sequence[TrialResult],
    console: Optional[Console] = None,
    *,
    caption: Optional[str] = None,
) -> None:
    console = console or Console()
    table = Table(title="Sort Trials (ms)", caption=caption)
    table.add_column(_HEADERS[0], justify="right", style="bold")
    for s in STRATEGIES:
        table.add_column(s.label, justify="right")

    for r in results:
        cells = [str(r.num_elements)]
        for s in STRATEGIES:
            cell = f"{r.duration_ms(s):.6f}"
            if not r.is_valid(s):
                cell = f"[red]{cell} ✗[/]"
            cells.append(cell)
        table.add_row(*cells)

    console.print()
    console.print(table)
    console.print()


def machine_summary() -> str:
    cpu = platform.processor() or platform.machine()
    cores = psutil.cpu_count(logical=True)
    ram_gb = round(psutil.virtual_memory().total / (1024**3), 2)
    return f"python {platform.python_version()} | {cpu} x{cores} | {ram_gb} GB RAM | {platform.platform()}"
