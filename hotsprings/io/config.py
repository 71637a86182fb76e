from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path

import yaml

from hotsprings.core.exceptions import ConfigError
from hotsprings.core.search import STRATEGY_REGISTRY


@dataclass
class SolverOptions:
    strategy: str = "merged"
    repeat: int = 1
    log_level: str = "WARNING"

    def validate(self) -> SolverOptions:
        if self.strategy not in STRATEGY_REGISTRY:
            raise ConfigError(
                f"unknown strategy {self.strategy!r}, expected one of {sorted(STRATEGY_REGISTRY)}"
            )
        if isinstance(self.repeat, bool) or not isinstance(self.repeat, int) or self.repeat < 1:
            raise ConfigError(f"repeat must be a positive integer, got {self.repeat!r}")
        if not isinstance(logging.getLevelName(str(self.log_level).upper()), int):
            raise ConfigError(f"unknown log level {self.log_level!r}")
        return self


def load_options(path: str | Path) -> SolverOptions:
    """Load solver options from a YAML mapping."""
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigError(f"{path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{path}: expected a mapping of options")
    known = {f.name for f in fields(SolverOptions)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"{path}: unknown options {unknown}")

    return SolverOptions(**data).validate()
