"""
Reporting tests: data frame, fixed-width table, failure line, rich output.
"""

from __future__ import annotations

from rich.console import Console

from sorttrials.algorithms import SortFlag, SortStrategy
from sorttrials.bench.harness import TrialResult
from sorttrials.bench.report import (
    COLUMNS,
    describe_failures,
    format_table,
    machine_summary,
    print_table,
    slower_than_expected,
    trials_frame,
)

RESULTS = [
    TrialResult(num_elements=20000, selection_ms=10.5, insertion_ms=8.25, quick_ms=1.0),
    TrialResult(num_elements=40000, selection_ms=42.0, insertion_ms=33.0, quick_ms=2.125),
]


def test_trials_frame_keeps_order_and_columns() -> None:
    df = trials_frame(RESULTS)
    assert list(df.columns) == COLUMNS
    assert df["num_elements"].tolist() == [20000, 40000]
    assert df["quick_ms"].tolist() == [1.0, 2.125]


def test_trials_frame_empty() -> None:
    df = trials_frame([])
    assert df.empty
    assert list(df.columns) == COLUMNS


def test_format_table_layout() -> None:
    lines = format_table(RESULTS).splitlines()
    border = "+-----------------------+-----------------+----------------+------------+"
    assert lines[0] == border
    assert lines[1] == "|    Number of Elements |  Selection Sort | Insertion sort |  Quicksort |"
    assert lines[2] == border
    assert lines[3] == "|                  20000|        10.500000|        8.250000|    1.000000|"
    assert lines[4] == "|                  40000|        42.000000|       33.000000|    2.125000|"
    assert lines[5] == border
    assert len(lines) == 6
    assert all(len(line) == len(border) for line in lines)


def test_describe_failures() -> None:
    assert describe_failures(SortFlag.NONE) == ""
    assert describe_failures(SortFlag.QUICK) == "ERROR! QUICK."
    mask = SortFlag.QUICK | SortFlag.SELECTION | SortFlag.INSERTION
    assert describe_failures(mask) == "ERROR! INSERTION. SELECTION. QUICK."


def test_slower_than_expected() -> None:
    assert slower_than_expected(RESULTS) == []
    noisy = RESULTS + [TrialResult(num_elements=80000, selection_ms=170.0, insertion_ms=130.0, quick_ms=2.0)]
    assert slower_than_expected(noisy) == [SortStrategy.QUICK]


def test_print_table_marks_invalid_cells() -> None:
    console = Console(record=True, width=120)
    bad = TrialResult(num_elements=5, selection_ms=0.1, insertion_ms=0.1, quick_ms=0.1, quick_ok=False)
    print_table(RESULTS + [bad], console, caption="demo")
    text = console.export_text()
    assert "Selection Sort" in text and "Quicksort" in text
    assert "40000" in text
    assert "✗" in text
    assert "demo" in text


def test_machine_summary_mentions_python() -> None:
    assert machine_summary().startswith("python ")
