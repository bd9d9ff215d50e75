"""Tile definitions and tile colors."""

from dataclasses import dataclass

DARK_WALL = (0, 0, 100)
LIGHT_WALL = (130, 110, 50)
DARK_GROUND = (50, 50, 150)
LIGHT_GROUND = (200, 180, 50)


@dataclass
class Tile:
    """Represents a single map cell."""

    blocked: bool
    blocks_sight: bool
    explored: bool = False

    @classmethod
    def wall(cls) -> "Tile":
        """Create an unexplored wall tile."""
        return cls(blocked=True, blocks_sight=True)

    @classmethod
    def floor(cls) -> "Tile":
        """Create an unexplored floor tile."""
        return cls(blocked=False, blocks_sight=False)

    def mark_explored(self) -> None:
        """Mark tile as explored. Explored tiles stay explored."""
        self.explored = True


def get_tile_color(visible: bool, wall: bool) -> tuple[int, int, int]:
    """Get background color for a tile."""
    if visible:
        return LIGHT_WALL if wall else LIGHT_GROUND
    return DARK_WALL if wall else DARK_GROUND
