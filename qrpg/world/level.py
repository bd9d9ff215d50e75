"""Dungeon level tile grid."""

from typing import TYPE_CHECKING

import numpy as np

from qrpg.world.tiles import Tile

if TYPE_CHECKING:
    from qrpg.world.dungeon_gen import Room


class Level:
    """Fixed-size grid of tiles for one dungeon."""

    def __init__(self, width: int, height: int) -> None:
        """Initialize level with every cell a wall."""
        self.width = width
        self.height = height
        self.tiles: list[list[Tile]] = [
            [Tile.wall() for _ in range(width)] for _ in range(height)
        ]
        self.rooms: list["Room"] = []

    def in_bounds(self, x: int, y: int) -> bool:
        """Check if position lies inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def get_tile(self, x: int, y: int) -> Tile:
        """Get tile at position."""
        if not self.in_bounds(x, y):
            raise IndexError(f"tile ({x}, {y}) outside {self.width}x{self.height} level")
        return self.tiles[y][x]

    def set_tile(self, x: int, y: int, tile: Tile) -> None:
        """Set tile at position."""
        if not self.in_bounds(x, y):
            raise IndexError(f"tile ({x}, {y}) outside {self.width}x{self.height} level")
        self.tiles[y][x] = tile

    def is_tile_blocked(self, x: int, y: int) -> bool:
        """Check if the static tile at position blocks movement."""
        return self.get_tile(x, y).blocked

    def blocks_sight(self, x: int, y: int) -> bool:
        """Check if position blocks sight."""
        return self.get_tile(x, y).blocks_sight

    def transparency(self) -> np.ndarray:
        """Boolean array indexed [x, y], True where light passes."""
        return np.array(
            [[not self.blocks_sight(x, y) for y in range(self.height)] for x in range(self.width)],
            dtype=bool,
        )

    def walkability(self) -> np.ndarray:
        """Boolean array indexed [x, y], True where the tile can be entered."""
        return np.array(
            [[not self.is_tile_blocked(x, y) for y in range(self.height)] for x in range(self.width)],
            dtype=bool,
        )
