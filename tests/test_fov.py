"""Tests for the visibility adapter."""

import numpy as np
import pytest

from qrpg.world.fov import FOV_ALGORITHMS, VisibilityMap, get_fov_algorithm
from qrpg.world.level import Level
from qrpg.world.tiles import Tile


@pytest.fixture
def two_rooms() -> Level:
    """Two floor areas split by a solid two-cell wall at x=9..10."""
    level = Level(20, 10)
    for y in range(1, 9):
        for x in list(range(1, 9)) + list(range(11, 19)):
            level.set_tile(x, y, Tile.floor())
    return level


def test_from_level_copies_flags(two_rooms: Level) -> None:
    """Test transparency and walkability come from the tiles."""
    fov = VisibilityMap.from_level(two_rooms)
    assert fov.transparent[4, 4]
    assert not fov.transparent[9, 4]
    assert fov.walkable[15, 4]
    assert not fov.walkable[0, 0]
    assert not fov.visible.any()


def test_compute_and_query(two_rooms: Level) -> None:
    """Test walls stop sight."""
    fov = VisibilityMap.from_level(two_rooms)
    fov.compute(4, 4, radius=10, light_walls=True, algorithm="restrictive")

    assert fov.is_in_fov(4, 4)
    assert fov.is_in_fov(6, 4)
    assert fov.is_in_fov(8, 4)
    assert fov.is_in_fov(9, 4)  # Lit wall face
    assert not fov.is_in_fov(15, 4)


def test_radius_limits_sight() -> None:
    """Test cells beyond the torch radius stay dark."""
    level = Level(30, 3)
    for x in range(30):
        level.set_tile(x, 1, Tile.floor())
    fov = VisibilityMap.from_level(level)
    fov.compute(0, 1, radius=5)

    assert fov.is_in_fov(3, 1)
    assert not fov.is_in_fov(20, 1)


def test_explored_survives_recompute(two_rooms: Level) -> None:
    """Test explored flags are never cleared by later recomputes."""
    fov = VisibilityMap.from_level(two_rooms)
    fov.compute(4, 4, radius=10)
    seen = fov.mark_explored(two_rooms)
    assert seen > 0
    assert two_rooms.get_tile(4, 4).explored
    assert not two_rooms.get_tile(15, 4).explored

    fov.compute(15, 4, radius=10)
    fov.mark_explored(two_rooms)

    assert not fov.is_in_fov(4, 4)
    assert two_rooms.get_tile(4, 4).explored
    assert two_rooms.get_tile(15, 4).explored


def test_visible_array_shape(two_rooms: Level) -> None:
    """Test visibility is indexed like the level arrays."""
    fov = VisibilityMap.from_level(two_rooms)
    fov.compute(2, 2, radius=3)
    assert fov.visible.shape == (20, 10)
    assert fov.visible.dtype == np.bool_


@pytest.mark.parametrize("name", sorted(FOV_ALGORITHMS))
def test_known_algorithms(name: str) -> None:
    """Test every configured algorithm runs."""
    level = Level(5, 5)
    level.set_tile(2, 2, Tile.floor())
    fov = VisibilityMap.from_level(level)
    fov.compute(2, 2, radius=2, algorithm=name)
    assert fov.is_in_fov(2, 2)


def test_unknown_algorithm() -> None:
    """Test unknown algorithm names are rejected."""
    with pytest.raises(ValueError):
        get_fov_algorithm("raycast")
