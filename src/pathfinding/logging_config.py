# src/pathfinding/logging_config.py
"""
Central logging configuration for pathfinder entrypoints.

Call configure_logging() once from a script, usually with the level from
config/pathfinding.yaml:

    from pathfinding.config import load_search_config
    from pathfinding.logging_config import configure_logging

    configure_logging(load_search_config().log_level)

Search traces go to logger "pathfinding.search"; the engine's debug lines
go to "pathfinding.task".
"""

from __future__ import annotations

import logging
import sys
from typing import Union

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: Union[int, str] = logging.INFO) -> None:
    """
    Attach a stdout handler to the root logger unless one already exists.

    Args:
        level: logging level as a constant (logging.DEBUG) or name ("DEBUG")
    """
    root = logging.getLogger()

    if root.handlers:
        return

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT))
    root.addHandler(handler)
    root.setLevel(level)
