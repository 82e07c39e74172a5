"""
Configuration loading tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from sorttrials.config import BenchConfig, load_config


def _write(tmp_path: Path, text: str) -> Path:
    p = tmp_path / "bench.yaml"
    p.write_text(text, encoding="utf-8")
    return p


def test_defaults() -> None:
    cfg = load_config()
    assert cfg == BenchConfig()
    assert cfg.base_size is None
    assert cfg.num_trials == 3
    assert cfg.value_range == (0, 9)
    assert cfg.log_level == "WARNING"


def test_load_full_config(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        """
base_size: 500
num_trials: 4
value_range: [-5, 5]
seed: 11
growth_factor: 3
disable_gc: true
progress: false
log_level: debug
""",
    )
    cfg = load_config(path)
    assert cfg.base_size == 500
    assert cfg.num_trials == 4
    assert cfg.value_range == (-5, 5)
    assert cfg.seed == 11
    assert cfg.growth_factor == 3
    assert cfg.disable_gc is True
    assert cfg.progress is False
    assert cfg.log_level == "DEBUG"


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    assert load_config(_write(tmp_path, "")) == BenchConfig()


@pytest.mark.parametrize(
    "text",
    [
        "unknown_key: 1",
        "base_size: -3",
        "num_trials: 0",
        "growth_factor: 12",
        "value_range: [9, 0]",
        "seed: abc",
        "log_level: LOUD",
        "- just\n- a list",
    ],
)
def test_invalid_configs(tmp_path: Path, text: str) -> None:
    with pytest.raises(ValueError):
        load_config(_write(tmp_path, text))


def test_override_ignores_none_and_validates() -> None:
    cfg = BenchConfig(base_size=10, num_trials=2)
    out = cfg.override(base_size=None, num_trials=5, seed=None)
    assert out.base_size == 10
    assert out.num_trials == 5
    with pytest.raises(ValueError):
        cfg.override(growth_factor=1)
