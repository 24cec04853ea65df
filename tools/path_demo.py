#!/usr/bin/env python3
"""
tools/path_demo.py

Run one search in an in-memory FakeBlockWorld and draw the result.

    python tools/path_demo.py --goal 12 64 0 --wall
    python tools/path_demo.py --goal 8 64 8 --enclose-goal --max-iterations 500

Prints the search outcome, the path (start -> terminal) and a rich
rendering of the start layer.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Ensure src/ is on sys.path when running as a script
# ---------------------------------------------------------------------------

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"

if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

# ---------------------------------------------------------------------------
# Imports from the project
# ---------------------------------------------------------------------------

from rich.console import Console

from pathfinding import PathFindingTask  # type: ignore[import]
from pathfinding.config import load_search_config  # type: ignore[import]
from pathfinding.logging_config import configure_logging  # type: ignore[import]
from pathfinding.render import render_panel  # type: ignore[import]
from pathfinding.testing.fakes import FakeBlockWorld  # type: ignore[import]
from pathfinding.tracing import SearchTracer  # type: ignore[import]


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pathfinder demo on a fake world")
    parser.add_argument("--start", nargs=3, type=int, default=[0, 64, 0], metavar=("X", "Y", "Z"))
    parser.add_argument("--goal", nargs=3, type=int, default=[12, 64, 0], metavar=("X", "Y", "Z"))
    parser.add_argument("--max-iterations", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="path to a pathfinding.yaml")
    parser.add_argument("--wall", action="store_true", help="put a wall between start and goal")
    parser.add_argument("--enclose-goal", action="store_true", help="surround the goal with solid blocks")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    cfg = load_search_config(args.config)
    configure_logging(cfg.log_level)
    log = logging.getLogger("tools.path_demo")

    start = tuple(args.start)
    goal = tuple(args.goal)

    world = FakeBlockWorld(floor_y=start[1] - 1, record_queries=False)
    if args.wall:
        mid_x = (start[0] + goal[0]) // 2
        world.wall([mid_x], range(start[1], start[1] + 3), range(start[2] - 4, start[2] + 5))
    if args.enclose_goal:
        world.enclose(goal)

    task = PathFindingTask(
        start,  # type: ignore[arg-type]
        goal,  # type: ignore[arg-type]
        heuristic_weight=cfg.heuristic_weight,
        goal_proximity=cfg.goal_proximity,
        tracer=SearchTracer(),
    )
    budget = cfg.max_iterations if args.max_iterations is None else args.max_iterations
    path = task.execute(budget, world)
    path.reverse()

    log.info("outcome=%s iterations=%d explored=%d", task.outcome, task.iterations, len(task.get_explored()))

    console = Console()
    console.print(" -> ".join(str(node.position) for node in path))
    console.print(
        render_panel(
            task.get_explored(),
            path,
            start[1],
            start=start,  # type: ignore[arg-type]
            goal=goal,  # type: ignore[arg-type]
            title=f"{task.outcome} ({len(path)} nodes)",
        )
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
