# tests/test_world_access.py
"""
Tests for the accessibility predicate and its world adapters.
"""

from __future__ import annotations

from pathfinding.node import PathNode
from pathfinding.world import (
    BlockCollisionProfile,
    CallbackWorld,
    WorldAccessor,
    is_accessible,
)
from pathfinding.testing.fakes import FakeBlockWorld


def test_accessible_means_open_space_on_solid_ground() -> None:
    world = FakeBlockWorld(floor_y=63)

    assert is_accessible(world, 0, 64, 0)
    # standing in the floor
    assert not is_accessible(world, 0, 63, 0)
    # floating one block above the walkable layer
    assert not is_accessible(world, 0, 65, 0)


def test_low_ceiling_blocks_access() -> None:
    world = FakeBlockWorld(floor_y=63).place((0, 65, 0))

    assert not is_accessible(world, 0, 64, 0)
    assert is_accessible(world, 1, 64, 0)


def test_path_node_delegates_to_world() -> None:
    world = FakeBlockWorld(floor_y=63)

    assert PathNode(3, 64, 3).is_accessible(world)
    assert world.queries == [(3, 64, 3), (3, 65, 3), (3, 63, 3)]


def test_callback_world() -> None:
    world = CallbackWorld(lambda x, y, z: y >= 10)

    assert isinstance(world, WorldAccessor)
    assert is_accessible(world, 0, 10, 0)
    assert not is_accessible(world, 0, 11, 0)


def test_collision_profile_with_block_lookup() -> None:
    blocks = {
        (0, 63, 0): {"id": "minecraft:stone"},
        (0, 64, 0): {"id": "minecraft:air"},
        (0, 65, 0): 0,
        (1, 63, 0): 1,
        (1, 64, 0): None,
        (1, 65, 0): {"name": "gregtech:machine"},
    }
    profile = BlockCollisionProfile(block_at=lambda x, y, z: blocks.get((x, y, z)))

    assert is_accessible(profile, 0, 64, 0)
    # head hits the machine
    assert not is_accessible(profile, 1, 64, 0)


def test_collision_profile_default_floor() -> None:
    profile = BlockCollisionProfile(default_floor_y=63)

    assert not profile.is_block_passable(0, 63, 0)
    assert profile.is_block_passable(0, 64, 0)
    assert is_accessible(profile, 7, 64, -7)


def test_collision_profile_without_information_has_no_floor() -> None:
    profile = BlockCollisionProfile()

    assert profile.is_block_passable(0, 0, 0)
    assert not is_accessible(profile, 0, 64, 0)


def test_collision_profile_block_shapes() -> None:
    shapes = {
        (0, 0, 0): None,
        (1, 0, 0): 0,
        (2, 0, 0): "minecraft:air",
        (3, 0, 0): "AIR",
        (4, 0, 0): {"name": "air"},
        (5, 0, 0): 4,
        (6, 0, 0): "minecraft:stone",
        (7, 0, 0): {"meta": 3},
        (8, 0, 0): False,
    }
    profile = BlockCollisionProfile(block_at=lambda x, y, z: shapes.get((x, y, z)))

    passable = [profile.is_block_passable(x, 0, 0) for x in range(9)]

    assert passable == [True, True, True, True, True, False, False, False, False]


def test_fake_world_can_skip_query_log() -> None:
    world = FakeBlockWorld(floor_y=63, record_queries=False)

    assert is_accessible(world, 0, 64, 0)
    assert world.queries == []
