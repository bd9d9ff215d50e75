"""Field-of-view adapter around tcod."""

import numpy as np
import tcod.constants
import tcod.map

from qrpg.world.level import Level

FOV_ALGORITHMS = {
    "basic": tcod.constants.FOV_BASIC,
    "diamond": tcod.constants.FOV_DIAMOND,
    "shadow": tcod.constants.FOV_SHADOW,
    "permissive": tcod.constants.FOV_PERMISSIVE_8,
    "restrictive": tcod.constants.FOV_RESTRICTIVE,
}


def get_fov_algorithm(name: str) -> int:
    """Look up a tcod FOV algorithm by name."""
    try:
        return FOV_ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"Unknown FOV algorithm {name!r}") from None


class VisibilityMap:
    """Visibility state for one level.

    Transparency is copied from the level once; regenerate the map if the
    level's sight-blocking tiles change.
    """

    def __init__(self, transparent: np.ndarray, walkable: np.ndarray) -> None:
        """Initialize from [x, y] indexed boolean arrays."""
        self.transparent = transparent
        self.walkable = walkable
        self.visible = np.zeros_like(transparent, dtype=bool)

    @classmethod
    def from_level(cls, level: Level) -> "VisibilityMap":
        """Build visibility map from level tiles."""
        return cls(level.transparency(), level.walkability())

    def compute(
        self,
        x: int,
        y: int,
        radius: int,
        light_walls: bool = True,
        algorithm: str = "restrictive",
    ) -> None:
        """Recompute visible cells from (x, y)."""
        self.visible = tcod.map.compute_fov(
            self.transparent,
            (x, y),
            radius=radius,
            light_walls=light_walls,
            algorithm=get_fov_algorithm(algorithm),
        )

    def is_in_fov(self, x: int, y: int) -> bool:
        """Check if cell is currently visible."""
        return bool(self.visible[x, y])

    def mark_explored(self, level: Level) -> int:
        """Mark visible tiles as explored. Returns number of visible tiles."""
        xs, ys = np.nonzero(self.visible)
        for x, y in zip(xs.tolist(), ys.tolist()):
            level.get_tile(x, y).mark_explored()
        return len(xs)
