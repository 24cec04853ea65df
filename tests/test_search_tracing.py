# tests/test_search_tracing.py
"""
Tests for SearchTracer and its wiring into PathFindingTask.
"""

from __future__ import annotations

import logging

import pytest

from pathfinding.task import PathFindingTask
from pathfinding.testing.fakes import FakeBlockWorld
from pathfinding.tracing import SearchTracer


def test_execute_records_one_trace_per_call(caplog: pytest.LogCaptureFixture) -> None:
    tracer = SearchTracer()
    world = FakeBlockWorld(floor_y=63)
    task = PathFindingTask((0, 64, 0), (3, 64, 0), tracer=tracer)

    with caplog.at_level(logging.INFO, logger="pathfinding.search"):
        path = task.execute(100, world)

    records = tracer.get_records()
    assert len(records) == 1

    rec = records[0]
    assert rec.start == (0, 64, 0)
    assert rec.goal == (3, 64, 0)
    assert rec.terminal == (3, 64, 0)
    assert rec.outcome == "goal_reached"
    assert rec.iterations == task.iterations
    assert rec.explored == len(task.get_explored())
    assert rec.path_length == len(path)
    assert rec.duration_s >= 0.0

    assert any("search outcome=goal_reached" in r.getMessage() for r in caplog.records)


def test_tracer_buffer_is_bounded() -> None:
    tracer = SearchTracer(max_records=2)
    world = FakeBlockWorld(floor_y=63)

    for goal_x in (1, 2, 3):
        PathFindingTask((0, 64, 0), (goal_x, 64, 0), tracer=tracer).execute(50, world)

    records = tracer.get_records()
    assert [r.goal for r in records] == [(2, 64, 0), (3, 64, 0)]


def test_tracer_never_raises(caplog: pytest.LogCaptureFixture) -> None:
    tracer = SearchTracer()

    with caplog.at_level(logging.ERROR, logger="pathfinding.search"):
        tracer.record(
            start=(0, 64, 0),
            goal=(1, 64, 0),
            path=[],
            outcome="budget_exhausted",
            iterations="many",  # type: ignore[arg-type]
            explored=0,
            duration_s=0.0,
        )

    assert tracer.get_records() == []
    assert any("Failed to build SearchTraceRecord" in r.getMessage() for r in caplog.records)
