# src/pathfinding/config.py
"""
Search configuration loaded from config/pathfinding.yaml.

Example file:

    max_iterations: 2048
    heuristic_weight: 2.5
    goal_proximity: 4
    log_level: INFO

Every key is optional; missing keys fall back to the engine defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .task import GOAL_PROXIMITY, HEURISTIC_WEIGHT

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_ROOT = PROJECT_ROOT / "config"
DEFAULT_CONFIG_PATH = CONFIG_ROOT / "pathfinding.yaml"

DEFAULT_MAX_ITERATIONS = 2048

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class SearchConfig:
    """Tunables for one or more pathfinding searches."""

    max_iterations: int = DEFAULT_MAX_ITERATIONS
    heuristic_weight: float = HEURISTIC_WEIGHT
    goal_proximity: int = GOAL_PROXIMITY
    log_level: str = "INFO"


def _load_yaml(path: Path) -> Dict[str, Any]:
    """Load a YAML mapping from path."""
    if not path.exists():
        raise FileNotFoundError(f"Missing config file: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected mapping at top of {path}, got {type(data)}")
    return data


def parse_search_config(raw: Dict[str, Any]) -> SearchConfig:
    """Build and validate a SearchConfig from a raw mapping."""
    unknown = set(raw) - {"max_iterations", "heuristic_weight", "goal_proximity", "log_level"}
    if unknown:
        raise ValueError(f"Unknown pathfinding config keys: {sorted(unknown)}")

    max_iterations = raw.get("max_iterations", DEFAULT_MAX_ITERATIONS)
    heuristic_weight = raw.get("heuristic_weight", HEURISTIC_WEIGHT)
    goal_proximity = raw.get("goal_proximity", GOAL_PROXIMITY)
    log_level = str(raw.get("log_level", "INFO")).upper()

    # bool is an int subclass; reject it explicitly
    if isinstance(max_iterations, bool) or not isinstance(max_iterations, int):
        raise ValueError(f"max_iterations must be an integer, got {max_iterations!r}")
    if isinstance(heuristic_weight, bool) or not isinstance(heuristic_weight, (int, float)):
        raise ValueError(f"heuristic_weight must be a number, got {heuristic_weight!r}")
    if heuristic_weight <= 0:
        raise ValueError(f"heuristic_weight must be positive, got {heuristic_weight}")
    if isinstance(goal_proximity, bool) or not isinstance(goal_proximity, int):
        raise ValueError(f"goal_proximity must be an integer, got {goal_proximity!r}")
    if goal_proximity < 0:
        raise ValueError(f"goal_proximity must be >= 0, got {goal_proximity}")
    if log_level not in _LOG_LEVELS:
        raise ValueError(f"Invalid log_level: {log_level}")

    return SearchConfig(
        max_iterations=max_iterations,
        heuristic_weight=float(heuristic_weight),
        goal_proximity=goal_proximity,
        log_level=log_level,
    )


def load_search_config(path: Optional[Path] = None) -> SearchConfig:
    """Main entry point: load SearchConfig from path or the default file."""
    return parse_search_config(_load_yaml(path or DEFAULT_CONFIG_PATH))


__all__ = [
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_MAX_ITERATIONS",
    "SearchConfig",
    "parse_search_config",
    "load_search_config",
]
