# lattice nodes, position hashing and the per-task node cache
# src/pathfinding/node.py
"""
Path nodes for the block-lattice pathfinder.

This module owns:
- PathNode: one lattice cell plus its search bookkeeping (g/h scores)
- position_hash: the 32-bit canonical key for a coordinate triple
- NEIGHBOR_OFFSETS: movement offsets and their integer step costs
- NodeStore: per-task cache that hands out one PathNode per coordinate

It does NOT:
- Decide whether a cell is walkable (see pathfinding.world)
- Run the search loop (see pathfinding.task)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterator, List, Tuple

if TYPE_CHECKING:
    from .world import WorldAccessor

# (x, y, z) integer block coordinates
Coord = Tuple[int, int, int]

# (dx, dy, dz, cost). Every offset in {-1, 0, 1}^3 except the zero offset
# and the two purely vertical moves. Cost = number of axes changed.
NEIGHBOR_OFFSETS: Tuple[Tuple[int, int, int, int], ...] = (
    (-1, -1, -1, 3),
    (-1, -1, 0, 2),
    (-1, -1, 1, 3),
    (-1, 0, -1, 2),
    (-1, 0, 0, 1),
    (-1, 0, 1, 2),
    (-1, 1, -1, 3),
    (-1, 1, 0, 2),
    (-1, 1, 1, 3),
    (0, -1, -1, 2),
    (0, -1, 1, 2),
    (0, 0, -1, 1),
    (0, 0, 1, 1),
    (0, 1, -1, 2),
    (0, 1, 1, 2),
    (1, -1, -1, 3),
    (1, -1, 0, 2),
    (1, -1, 1, 3),
    (1, 0, -1, 2),
    (1, 0, 0, 1),
    (1, 0, 1, 2),
    (1, 1, -1, 3),
    (1, 1, 0, 2),
    (1, 1, 1, 3),
)

_HORIZONTAL_MASK = 0xFFF  # 12 bits: x, z in [-2048, 2048)
_VERTICAL_MASK = 0xFF  # 8 bits: y in [0, 256)


def position_hash(x: int, y: int, z: int) -> int:
    """
    Pack a coordinate triple into a 32-bit key.

    Layout: x in bits 0-11, y in bits 12-19, z in bits 20-31.

    Injective for x, z in [-2048, 2048) and y in [0, 256). Coordinates
    outside that envelope alias onto covered keys, so the key is only
    used for bucketing; NodeStore and PathNode equality also compare
    the exact coordinates.
    """
    x_comp = x & _HORIZONTAL_MASK
    y_comp = (y & _VERTICAL_MASK) << 12
    z_comp = (z & _HORIZONTAL_MASK) << 20

    return x_comp | y_comp | z_comp


class PathNode:
    """
    One lattice cell as seen by a single search task.

    Scores start at +inf and are lowered in place by the search as better
    paths are found. The canonical key is computed once in __init__.
    """

    __slots__ = ("x", "y", "z", "key", "g_score", "h_score")

    def __init__(self, x: int, y: int, z: int) -> None:
        self.x = x
        self.y = y
        self.z = z
        self.key = position_hash(x, y, z)

        self.g_score: float = float("inf")
        self.h_score: float = float("inf")

    @property
    def f_score(self) -> float:
        """Total priority: cost so far plus estimated remaining cost."""
        return self.g_score + self.h_score

    @property
    def position(self) -> Coord:
        return (self.x, self.y, self.z)

    @property
    def center(self) -> Tuple[float, float, float]:
        """Centre of the block, which is where a mover should aim."""
        return (self.x + 0.5, self.y + 0.5, self.z + 0.5)

    def is_accessible(self, world: "WorldAccessor") -> bool:
        """True if an agent can stand in this cell (open space on solid ground)."""
        from .world import is_accessible

        return is_accessible(world, self.x, self.y, self.z)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathNode):
            return NotImplemented
        return (
            self.key == other.key
            and self.x == other.x
            and self.y == other.y
            and self.z == other.z
        )

    def __hash__(self) -> int:
        return self.key

    def __repr__(self) -> str:
        return (
            f"PathNode(x={self.x}, y={self.y}, z={self.z}, "
            f"g={self.g_score}, h={self.h_score})"
        )


class NodeStore:
    """
    Cache of every PathNode materialised by one search task.

    get_or_create() is idempotent: the same coordinates always return the
    same instance, so score updates are visible through every reference.
    A store must never be shared between tasks.
    """

    def __init__(self) -> None:
        self._nodes: Dict[Coord, PathNode] = {}

    def get_or_create(self, x: int, y: int, z: int) -> PathNode:
        coord = (x, y, z)
        node = self._nodes.get(coord)
        if node is not None:
            return node

        node = PathNode(x, y, z)
        self._nodes[coord] = node
        return node

    def register(self, node: PathNode) -> PathNode:
        """
        Add an externally created node (e.g. the start node).

        If a node already exists at those coordinates the cached one wins
        and is returned.
        """
        return self._nodes.setdefault(node.position, node)

    def all_discovered(self) -> List[PathNode]:
        """Every node materialised so far, in no particular order."""
        return list(self._nodes.values())

    def __contains__(self, coord: object) -> bool:
        return coord in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[PathNode]:
        return iter(self._nodes.values())


__all__ = [
    "Coord",
    "NEIGHBOR_OFFSETS",
    "position_hash",
    "PathNode",
    "NodeStore",
]
