# src/pathfinding/tracing.py
"""
Tracing for pathfinding searches.

Provides a thin, structured logging layer around PathFindingTask.execute
so that callers (monitoring, experience replay, debugging tools) can
consume one consistent record per search.

It does NOT:
- Influence the search
- Keep node-level detail (use PathFindingTask.get_explored for that)
"""

from __future__ import annotations

import logging
import time
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Optional, Sequence

from .node import Coord, PathNode


@dataclass
class SearchTraceRecord:
    """Structured record of a single search invocation."""

    timestamp: float           # wall-clock time (time.time())
    duration_s: float          # time spent inside execute()

    start: Coord
    goal: Coord
    terminal: Optional[Coord]  # first element of the returned path

    outcome: str               # see PathFindingTask.outcome
    iterations: int
    explored: int
    path_length: int


class SearchTracer:
    """
    In-memory search tracer with optional logging.

    Keeps a rolling buffer of SearchTraceRecord entries and emits one
    info line per search.
    """

    def __init__(
        self,
        *,
        logger: Optional[logging.Logger] = None,
        max_records: int = 1_000,
    ) -> None:
        self._logger = logger or logging.getLogger("pathfinding.search")
        self._records: Deque[SearchTraceRecord] = deque(maxlen=max_records)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def record(
        self,
        *,
        start: Coord,
        goal: Coord,
        path: Sequence[PathNode],
        outcome: str,
        iterations: int,
        explored: int,
        duration_s: float,
    ) -> None:
        """Record a trace for a completed search, whatever its outcome."""
        try:
            record = SearchTraceRecord(
                timestamp=time.time(),
                duration_s=float(duration_s),
                start=tuple(start),  # type: ignore[arg-type]
                goal=tuple(goal),  # type: ignore[arg-type]
                terminal=path[0].position if path else None,
                outcome=str(outcome),
                iterations=int(iterations),
                explored=int(explored),
                path_length=len(path),
            )
        except Exception:
            # Tracing must never crash the caller.
            self._logger.exception("Failed to build SearchTraceRecord")
            return

        self._records.append(record)

        self._logger.info(
            "search outcome=%s start=%s goal=%s terminal=%s iterations=%d "
            "explored=%d path_len=%d duration=%.4fs",
            record.outcome,
            record.start,
            record.goal,
            record.terminal,
            record.iterations,
            record.explored,
            record.path_length,
            record.duration_s,
        )

    def get_records(self) -> List[SearchTraceRecord]:
        """Return a snapshot of all currently buffered records."""
        return list(self._records)


__all__ = ["SearchTraceRecord", "SearchTracer"]
