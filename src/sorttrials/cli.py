"""
Command-line entry point.

Usage:
    sorttrials n [--trials K] [--seed S] [--growth G] [--config FILE] [--plain]
    python -m sorttrials.cli n

Runs the trials, prints a comparison table, and reports any strategy whose
output failed the order check. Exit status:
    0  run completed (validity failures are reported, not fatal)
    1  bad or missing base size, bad config, or a trial could not allocate memory
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from sorttrials.bench.driver import run_benchmark
from sorttrials.bench.harness import TrialAllocationError
from sorttrials.bench.report import (
    describe_failures,
    format_table,
    machine_summary,
    print_table,
    slower_than_expected,
)
from sorttrials.config import LOG_LEVELS, BenchConfig, load_config

logger = logging.getLogger(__name__)

_console = Console()


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="sorttrials",
        description="Time selection sort, insertion sort and quicksort over growing random arrays.",
    )
    # Integer inputs stay strings so a malformed value produces our usage line, not argparse's.
    p.add_argument("n", nargs="?", default=None, help="Base array size (first trial has n * growth elements)")
    p.add_argument("--trials", "-t", default=None, help="Number of trials (default 3)")
    p.add_argument("--seed", "-s", default=None, help="RNG seed (default: wall clock)")
    p.add_argument("--growth", "-g", default=None, help="Fixed growth factor in [2, 10]")
    p.add_argument("--config", "-c", type=str, default=None, help="Path to YAML config")
    p.add_argument("--plain", action="store_true", help="Print a fixed-width text table instead of a rich table")
    p.add_argument("--no-progress", action="store_true", help="Disable the progress bar")
    p.add_argument("--log-level", "-l", choices=LOG_LEVELS, default=None, help="Logging level")
    return p.parse_args(argv)


def _parse_count(raw: Optional[str]) -> Optional[int]:
    """Parse a nonnegative integer argument; None passes through."""
    if raw is None:
        return None
    n = int(raw.strip())
    if n < 0:
        raise ValueError(f"expected a nonnegative integer; got {n}")
    return n


def _usage(prog: str) -> int:
    # Plain print keeps the usage line free of rich wrapping and markup.
    print(f"usage: {prog} n")
    return 1


def _configure_logging(level: str) -> None:
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    root.setLevel(getattr(logging, level))


def _apply_args(cfg: BenchConfig, args: argparse.Namespace) -> BenchConfig:
    return cfg.override(
        base_size=_parse_count(args.n),
        num_trials=_parse_count(args.trials),
        seed=_parse_count(args.seed),
        growth_factor=_parse_count(args.growth),
        progress=False if args.no_progress else None,
        log_level=args.log_level,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    prog = Path(sys.argv[0]).name or "sorttrials"

    if args.config:
        config_path = Path(args.config).resolve()
        if not config_path.exists():
            _console.print(f"[bold red]Config file not found:[/bold red] {config_path}")
            return 1
        try:
            cfg = load_config(config_path)
        except ValueError as e:
            _console.print(f"[bold red]Invalid config:[/bold red] {e}")
            return 1
    else:
        cfg = load_config()

    try:
        cfg = _apply_args(cfg, args)
    except ValueError:
        return _usage(prog)

    if cfg.base_size is None:
        return _usage(prog)

    _configure_logging(cfg.log_level)

    try:
        run = run_benchmark(
            cfg.base_size,
            num_trials=cfg.num_trials,
            seed=cfg.seed,
            growth_factor=cfg.growth_factor,
            value_range=cfg.value_range,
            disable_gc=cfg.disable_gc,
            progress=cfg.progress,
        )
    except TrialAllocationError as e:
        _console.print(f"[bold red]Allocation failed:[/bold red] {e}")
        return 1

    for idx, mask in run.failures:
        _console.print(f"[bold red]{describe_failures(mask)}[/bold red] (trial {idx + 1})")

    if args.plain:
        print(format_table(run.results))
    else:
        caption = f"growth x{run.growth_factor}, seed {run.seed} | {machine_summary()}"
        print_table(run.results, _console, caption=caption)

    drifting = slower_than_expected(run.results)
    if drifting:
        logger.info("timings not monotonic for: %s", ", ".join(s.label for s in drifting))

    return 0


if __name__ == "__main__":
    sys.exit(main())
