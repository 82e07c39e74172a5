"""
Benchmark configuration.

A run can be described by a small YAML file; every key is optional:

    base_size: 10000        # or the `n` argument; first trial has base_size * growth_factor elements
    num_trials: 3
    value_range: [0, 9]     # inclusive
    seed: null              # null -> seeded from the wall clock
    growth_factor: null     # null -> drawn uniformly from [2, 10]
    disable_gc: false
    progress: true
    log_level: WARNING

Command-line flags override whatever the file provides.
"""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import yaml

from sorttrials.bench.driver import DEFAULT_NUM_TRIALS, GROWTH_RANGE
from sorttrials.datasets import DEFAULT_VALUE_RANGE, parse_value_range

__all__ = ["BenchConfig", "LOG_LEVELS", "load_config"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class BenchConfig:
    base_size: Optional[int] = None
    num_trials: int = DEFAULT_NUM_TRIALS
    value_range: Tuple[int, int] = DEFAULT_VALUE_RANGE
    seed: Optional[int] = None
    growth_factor: Optional[int] = None
    disable_gc: bool = False
    progress: bool = True
    log_level: str = "WARNING"

    def override(self, **changes: Any) -> "BenchConfig":
        """Return a copy with every non-None keyword applied, then validated."""
        applied = {k: v for k, v in changes.items() if v is not None}
        return _validated(replace(self, **applied))


def _load_yaml(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must be a mapping at the top level")
    return data


def load_config(path: Optional[Path] = None) -> BenchConfig:
    """
    Load a BenchConfig from YAML, or return the defaults when `path` is None.

    Raises
    ------
    ValueError
        On unknown keys or invalid values.
    """
    if path is None:
        return BenchConfig()

    raw = _load_yaml(Path(path))
    known = {f.name for f in fields(BenchConfig)}
    unknown = sorted(set(raw) - known)
    if unknown:
        raise ValueError(f"Unknown config keys: {unknown}")

    if "value_range" in raw:
        raw["value_range"] = parse_value_range(raw["value_range"])
    return _validated(BenchConfig(**raw))


def _validated(cfg: BenchConfig) -> BenchConfig:
    if cfg.base_size is not None and (not _is_int(cfg.base_size) or cfg.base_size < 0):
        raise ValueError(f"base_size must be a nonnegative integer; got {cfg.base_size!r}")
    if not _is_int(cfg.num_trials) or cfg.num_trials < 1:
        raise ValueError(f"num_trials must be an integer >= 1; got {cfg.num_trials!r}")
    if cfg.seed is not None and not _is_int(cfg.seed):
        raise ValueError(f"seed must be an integer or null; got {cfg.seed!r}")
    if cfg.growth_factor is not None:
        lo, hi = GROWTH_RANGE
        if not _is_int(cfg.growth_factor) or not lo <= cfg.growth_factor <= hi:
            raise ValueError(f"growth_factor must be an integer in [{lo}, {hi}]; got {cfg.growth_factor!r}")
    if not isinstance(cfg.disable_gc, bool) or not isinstance(cfg.progress, bool):
        raise ValueError("disable_gc and progress must be booleans")
    if str(cfg.log_level).upper() not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {list(LOG_LEVELS)}; got {cfg.log_level!r}")
    return replace(cfg, value_range=parse_value_range(cfg.value_range), log_level=str(cfg.log_level).upper())


def _is_int(x: Any) -> bool:
    return isinstance(x, int) and not isinstance(x, bool)
