# tests/test_find_path.py
"""
Tests for the find_path convenience wrapper.
"""

from __future__ import annotations

from pathfinding import find_path
from pathfinding.config import SearchConfig
from pathfinding.testing.fakes import FakeBlockWorld


def test_find_path_returns_start_to_goal_coords(flat_world: FakeBlockWorld) -> None:
    result = find_path((0, 64, 0), (4, 64, 0), flat_world, max_iterations=100)

    assert result.success
    assert result.reason == "goal_reached"
    assert result.path[0] == (0, 64, 0)
    assert result.path[-1] == (4, 64, 0)
    assert len(result.path) == 5
    assert result.explored > 0


def test_find_path_counts_nearby_arrival_as_success() -> None:
    goal = (8, 64, 0)
    world = FakeBlockWorld(floor_y=63).enclose(goal)

    result = find_path((0, 64, 0), goal, world)

    assert result.success
    assert result.reason == "goal_nearby"
    assert result.path[0] == (0, 64, 0)


def test_find_path_uses_config_budget() -> None:
    world = FakeBlockWorld(floor_y=63)

    result = find_path(
        (0, 64, 0), (50, 64, 0), world, config=SearchConfig(max_iterations=0)
    )

    assert not result.success
    assert result.reason == "budget_exhausted"
    assert result.path == [(0, 64, 0)]


def test_max_iterations_overrides_config(flat_world: FakeBlockWorld) -> None:
    result = find_path(
        (0, 64, 0),
        (5, 64, 0),
        flat_world,
        max_iterations=100,
        config=SearchConfig(max_iterations=0),
    )

    assert result.success
    assert result.path[-1] == (5, 64, 0)
