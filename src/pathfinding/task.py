# incremental weighted A* over the block lattice
# src/pathfinding/task.py
"""
Weighted A* pathfinding over a 3-D block lattice.

- Inflated Manhattan heuristic (weight 2.5): greedy, fast, not optimal.
- 24 neighbours per cell (see node.NEIGHBOR_OFFSETS), integer step costs.
- Iteration budget instead of cancellation.
- Never fails: if the goal is not reached, the path leads to the node
  with the lowest heuristic seen so far.

All search state (frontier, predecessor map, node cache) belongs to one
PathFindingTask instance. Tasks must not share state; run concurrent
searches on separate instances.
"""

from __future__ import annotations

import heapq
import itertools
import logging
from dataclasses import dataclass
from time import perf_counter
from typing import TYPE_CHECKING, Dict, List, Mapping, Optional, Tuple

from .node import NEIGHBOR_OFFSETS, Coord, NodeStore, PathNode
from .tracing import SearchTracer
from .world import WorldAccessor

if TYPE_CHECKING:
    from .config import SearchConfig

log = logging.getLogger(__name__)

HEURISTIC_WEIGHT = 2.5
GOAL_PROXIMITY = 4

# Search outcomes, exposed as PathFindingTask.outcome
GOAL_REACHED = "goal_reached"
GOAL_NEARBY = "goal_nearby"
FRONTIER_EXHAUSTED = "frontier_exhausted"
BUDGET_EXHAUSTED = "budget_exhausted"

# (f_score, h_score, insertion seq, g_score at push, node)
_FrontierEntry = Tuple[float, float, int, float, PathNode]


def manhattan_distance(a: PathNode, b: PathNode) -> int:
    """L1 distance between two nodes over all three axes."""
    return abs(a.x - b.x) + abs(a.y - b.y) + abs(a.z - b.z)


class PathFindingTask:
    """
    One pathfinding search from start to goal.

    Usage:

        task = PathFindingTask((0, 64, 0), (10, 64, 3))
        path = task.execute(2048, world)   # terminal node first
        path.reverse()                     # start -> terminal

    execute() may be called again to continue the same search with a
    fresh iteration budget.

    Frontier ties are broken by lowest h_score, then by insertion order,
    so results are deterministic for a given world.
    """

    def __init__(
        self,
        start: Coord,
        goal: Coord,
        *,
        heuristic_weight: float = HEURISTIC_WEIGHT,
        goal_proximity: int = GOAL_PROXIMITY,
        tracer: Optional[SearchTracer] = None,
    ) -> None:
        self.heuristic_weight = heuristic_weight
        self.goal_proximity = goal_proximity
        self._tracer = tracer

        self._store = NodeStore()
        # node -> predecessor on its best known path
        self._came_from: Dict[PathNode, PathNode] = {}
        self._frontier: List[_FrontierEntry] = []
        self._seq = itertools.count()

        self.start = self._store.register(PathNode(*start))
        self.goal = PathNode(*goal)

        self.start.g_score = 0.0
        self.start.h_score = self.heuristic(self.start)

        self.best_node = self.start

        self.outcome: Optional[str] = None
        self.iterations = 0

        self._push(self.start)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def execute(self, max_iterations: int, world: WorldAccessor) -> List[PathNode]:
        """
        Run up to max_iterations expansion steps against world.

        Returns the path in terminal-to-start order; the terminal is the
        goal, a node near an inaccessible goal, or the best node found.
        A non-positive budget expands nothing and returns the path to the
        current best node (just the start node on a fresh task).
        """
        started = perf_counter()
        path = self._search(max_iterations, world)

        if self._tracer is not None:
            self._tracer.record(
                start=self.start.position,
                goal=self.goal.position,
                path=path,
                outcome=self.outcome,
                iterations=self.iterations,
                explored=len(self._store),
                duration_s=perf_counter() - started,
            )

        return path

    def get_explored(self) -> List[PathNode]:
        """Returns all nodes materialised so far, unordered."""
        return self._store.all_discovered()

    @property
    def came_from(self) -> Mapping[PathNode, PathNode]:
        """Live predecessor map (node -> previous node on its best path)."""
        return self._came_from

    def heuristic(self, node: PathNode) -> float:
        """Inflated Manhattan distance from node to the goal."""
        return self.heuristic_weight * manhattan_distance(node, self.goal)

    def retrace_path(self, node: PathNode) -> List[PathNode]:
        """
        Walk predecessor links from node back to the start.

        Stops before revisiting a node, so a cycle in the predecessor map
        yields a finite, repeat-free path instead of looping forever.
        """
        visited = set()
        path: List[PathNode] = []

        current: Optional[PathNode] = node
        while current is not None and current not in visited:
            visited.add(current)
            path.append(current)
            current = self._came_from.get(current)

        return path

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _push(self, node: PathNode) -> None:
        heapq.heappush(
            self._frontier,
            (node.f_score, node.h_score, next(self._seq), node.g_score, node),
        )

    def _search(self, max_iterations: int, world: WorldAccessor) -> List[PathNode]:
        # Evaluated lazily, once per call: the world is assumed stable
        # for the duration of a search.
        goal_accessible: Optional[bool] = None
        steps = 0

        while steps < max_iterations:
            if not self._frontier:
                self.outcome = FRONTIER_EXHAUSTED
                log.debug(
                    "frontier exhausted after %d iterations; best node %s",
                    self.iterations,
                    self.best_node.position,
                )
                return self.retrace_path(self.best_node)

            _, _, _, pushed_g, current = heapq.heappop(self._frontier)

            # A better path to this node was found after this entry was pushed.
            if pushed_g > current.g_score:
                continue

            steps += 1
            self.iterations += 1

            if current == self.goal:
                self.outcome = GOAL_REACHED
                log.debug("goal %s reached after %d iterations", current.position, self.iterations)
                return self.retrace_path(current)

            if manhattan_distance(current, self.goal) < self.goal_proximity:
                if goal_accessible is None:
                    goal_accessible = self.goal.is_accessible(world)
                if not goal_accessible:
                    self.outcome = GOAL_NEARBY
                    log.debug(
                        "goal %s inaccessible; stopping at %s",
                        self.goal.position,
                        current.position,
                    )
                    return self.retrace_path(current)

            self._expand(current, world)

        self.outcome = BUDGET_EXHAUSTED
        log.debug(
            "iteration budget %d exhausted; best node %s",
            max_iterations,
            self.best_node.position,
        )
        return self.retrace_path(self.best_node)

    def _expand(self, current: PathNode, world: WorldAccessor) -> None:
        for dx, dy, dz, cost in NEIGHBOR_OFFSETS:
            neighbor = self._store.get_or_create(
                current.x + dx, current.y + dy, current.z + dz
            )
            tentative_g = current.g_score + cost

            if tentative_g < neighbor.g_score and neighbor.is_accessible(world):
                self._came_from[neighbor] = current

                neighbor.g_score = tentative_g
                neighbor.h_score = self.heuristic(neighbor)
                if neighbor.h_score < self.best_node.h_score:
                    self.best_node = neighbor

                self._push(neighbor)


# ---------------------------------------------------------------------------
# Convenience entry point
# ---------------------------------------------------------------------------


@dataclass
class PathfindingResult:
    """Structured result for a pathfinding attempt."""

    path: List[Coord]          # start -> terminal
    success: bool              # goal reached, or stopped next to an inaccessible goal
    reason: str | None = None  # the task outcome
    explored: int = 0


def find_path(
    start: Coord,
    goal: Coord,
    world: WorldAccessor,
    *,
    max_iterations: Optional[int] = None,
    config: Optional["SearchConfig"] = None,
    tracer: Optional[SearchTracer] = None,
) -> PathfindingResult:
    """
    Run a single search and return coordinates in start-to-terminal order.

    max_iterations overrides config.max_iterations when given.
    This function does not mutate world state.
    """
    if config is None:
        from .config import SearchConfig

        config = SearchConfig()

    budget = config.max_iterations if max_iterations is None else max_iterations

    task = PathFindingTask(
        start,
        goal,
        heuristic_weight=config.heuristic_weight,
        goal_proximity=config.goal_proximity,
        tracer=tracer,
    )
    nodes = task.execute(budget, world)

    return PathfindingResult(
        path=[node.position for node in reversed(nodes)],
        success=task.outcome in (GOAL_REACHED, GOAL_NEARBY),
        reason=task.outcome,
        explored=len(task.get_explored()),
    )


__all__ = [
    "HEURISTIC_WEIGHT",
    "GOAL_PROXIMITY",
    "GOAL_REACHED",
    "GOAL_NEARBY",
    "FRONTIER_EXHAUSTED",
    "BUDGET_EXHAUSTED",
    "manhattan_distance",
    "PathFindingTask",
    "PathfindingResult",
    "find_path",
]
