# accessibility predicate over an external block world
# src/pathfinding/world.py
"""
World access for the pathfinder.

The search never looks at blocks directly. It asks a WorldAccessor one
question, "is the block at (x, y, z) passable?", and derives walkability
from that:

    - the cell itself is passable (feet)
    - the cell above is passable (head)
    - the cell below is NOT passable (floor)

Hosts plug in their own WorldAccessor. Two small adapters live here:
- CallbackWorld: wraps a plain passable(x, y, z) callable
- BlockCollisionProfile: air-like block lookup with a flat-floor fallback

This module does NOT:
- Translate world coordinates (float positions, chunk offsets)
- Reason about hazards (lava, fire, etc.)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Protocol, runtime_checkable

# Signature for a "block passable" callback:
#   passable(x, y, z) -> bool
BlockPassableFn = Callable[[int, int, int], bool]

# Signature for a "block lookup" function:
#   block_at(x, y, z) -> Any
BlockAtFn = Callable[[int, int, int], Any]


@runtime_checkable
class WorldAccessor(Protocol):
    """Read-only view of the world the search runs against."""

    def is_block_passable(self, x: int, y: int, z: int) -> bool:
        ...


def is_accessible(world: WorldAccessor, x: int, y: int, z: int) -> bool:
    """
    Determine if an agent can occupy (x, y, z).

    Must be fast and side-effect free; the search calls it up to
    24 times per expansion step.
    """
    return (
        world.is_block_passable(x, y, z)
        and world.is_block_passable(x, y + 1, z)
        and not world.is_block_passable(x, y - 1, z)
    )


@dataclass
class CallbackWorld:
    """WorldAccessor backed by a plain passable(x, y, z) callable."""

    passable: BlockPassableFn

    def is_block_passable(self, x: int, y: int, z: int) -> bool:
        return bool(self.passable(x, y, z))


_AIR_IDS = frozenset({"air", "minecraft:air"})


def _is_air_like(block: Any) -> bool:
    """
    True when block_at data means "nothing occupies this cell".

    block_at may hand back None (unloaded or empty), a numeric block id
    (0 is air), a registry id string, or a mapping carrying that id under
    "id" or "name".
    """
    if block is None:
        return True

    if isinstance(block, Mapping):
        block = block.get("id") or block.get("name")

    if isinstance(block, str):
        return block.lower() in _AIR_IDS

    return isinstance(block, int) and not isinstance(block, bool) and block == 0


@dataclass
class BlockCollisionProfile:
    """
    Collision policy usable directly as a WorldAccessor.

    Parameters:
        block_at:
            Optional function returning block data at (x, y, z).

        default_floor_y:
            Y-level treated as "solid floor everywhere" when block_at is
            not available. Crude, but enough for flat test worlds.

    Behavior of is_block_passable:
        - block_at given: passable iff the block is air-like
        - else default_floor_y given: passable iff y > default_floor_y
        - else: everything is passable (nothing can be stood on)
    """

    block_at: Optional[BlockAtFn] = None
    default_floor_y: Optional[int] = None

    def is_block_passable(self, x: int, y: int, z: int) -> bool:
        if self.block_at is not None:
            return _is_air_like(self.block_at(x, y, z))

        if self.default_floor_y is not None:
            return y > self.default_floor_y

        return True


__all__ = [
    "BlockPassableFn",
    "BlockAtFn",
    "WorldAccessor",
    "is_accessible",
    "CallbackWorld",
    "BlockCollisionProfile",
]
