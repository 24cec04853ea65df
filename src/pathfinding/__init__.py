# pathfinding package
# src/pathfinding/__init__.py
"""
Block-lattice pathfinding.

Exports:
    - PathFindingTask: incremental weighted A* search, one instance per search
    - find_path: one-shot convenience wrapper returning PathfindingResult
    - PathNode / NodeStore / position_hash: lattice nodes and their cache
    - WorldAccessor / is_accessible: the world-facing accessibility predicate
"""

from __future__ import annotations

from .node import NEIGHBOR_OFFSETS, Coord, NodeStore, PathNode, position_hash
from .task import (
    GOAL_PROXIMITY,
    HEURISTIC_WEIGHT,
    PathFindingTask,
    PathfindingResult,
    find_path,
    manhattan_distance,
)
from .world import BlockCollisionProfile, CallbackWorld, WorldAccessor, is_accessible

__all__ = [
    "Coord",
    "NEIGHBOR_OFFSETS",
    "NodeStore",
    "PathNode",
    "position_hash",
    "GOAL_PROXIMITY",
    "HEURISTIC_WEIGHT",
    "PathFindingTask",
    "PathfindingResult",
    "find_path",
    "manhattan_distance",
    "BlockCollisionProfile",
    "CallbackWorld",
    "WorldAccessor",
    "is_accessible",
]
