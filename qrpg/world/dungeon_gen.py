"""Dungeon generation: random rooms joined by L-shaped corridors."""

import logging
import random
from dataclasses import dataclass
from typing import Iterator, List, Optional

from qrpg.core.settings import DungeonSettings
from qrpg.ecs.entities import EntityManager
from qrpg.gameplay.enemies import place_monsters
from qrpg.world.level import Level
from qrpg.world.tiles import Tile

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Room:
    """Axis-aligned rectangle. Only the cells strictly inside are carved."""

    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def from_size(cls, x: int, y: int, w: int, h: int) -> "Room":
        """Create room from top-left corner and size."""
        return cls(x, y, x + w, y + h)

    def center(self) -> tuple[int, int]:
        """Integer center of the rectangle."""
        return ((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: "Room") -> bool:
        """Inclusive overlap test; rooms sharing an edge intersect."""
        return (
            self.x1 <= other.x2
            and self.x2 >= other.x1
            and self.y1 <= other.y2
            and self.y2 >= other.y1
        )

    def interior(self) -> Iterator[tuple[int, int]]:
        """Cells carved as floor."""
        for x in range(self.x1 + 1, self.x2):
            for y in range(self.y1 + 1, self.y2):
                yield (x, y)

    def contains(self, x: int, y: int) -> bool:
        """Check if (x, y) is an interior cell."""
        return self.x1 < x < self.x2 and self.y1 < y < self.y2


class DungeonGenerator:
    """Generates a dungeon level by random room placement."""

    def __init__(self, settings: DungeonSettings, rng: Optional[random.Random] = None) -> None:
        """Initialize dungeon generator.

        Args:
            settings: Map size, room size bounds and attempt budget
            rng: Random source; a fresh unseeded one is used if omitted
        """
        self.settings = settings
        self.rng = rng or random.Random()
        self.rooms: List[Room] = []

    def generate(self, entity_manager: EntityManager) -> Level:
        """Generate a dungeon level.

        Runs a fixed number of placement attempts. Rejected attempts are
        discarded, so fewer rooms than ``max_rooms`` are normally placed. The
        player (slot 0 of ``entity_manager``) is moved to the first room's
        center and monsters are appended to the arena room by room.

        Returns:
            Generated level
        """
        settings = self.settings
        level = Level(settings.map_width, settings.map_height)
        self.rooms.clear()

        for _ in range(settings.max_rooms):
            new_room = self._propose_room()
            if any(new_room.intersects(other) for other in self.rooms):
                continue

            self._carve_room(level, new_room)
            new_x, new_y = new_room.center()

            # Player must be in place before the first room spawns monsters
            if not self.rooms:
                entity_manager.player.set_pos(new_x, new_y)

            place_monsters(new_room, level, entity_manager, self.rng, settings.max_room_monsters)

            if self.rooms:
                prev_x, prev_y = self.rooms[-1].center()
                if self.rng.random() < 0.5:
                    self._create_h_tunnel(level, prev_x, new_x, prev_y)
                    self._create_v_tunnel(level, prev_y, new_y, new_x)
                else:
                    self._create_v_tunnel(level, prev_y, new_y, prev_x)
                    self._create_h_tunnel(level, prev_x, new_x, new_y)

            self.rooms.append(new_room)

        level.rooms = list(self.rooms)
        logger.debug(
            "Generated %dx%d level: %d rooms from %d attempts, %d entities",
            level.width,
            level.height,
            len(self.rooms),
            settings.max_rooms,
            len(entity_manager),
        )
        return level

    def _propose_room(self) -> Room:
        """Draw a random room that fits inside the map."""
        settings = self.settings
        w = self.rng.randint(settings.room_min_size, settings.room_max_size)
        h = self.rng.randint(settings.room_min_size, settings.room_max_size)
        x = self.rng.randint(0, settings.map_width - w - 1)
        y = self.rng.randint(0, settings.map_height - h - 1)
        return Room.from_size(x, y, w, h)

    def _carve_room(self, level: Level, room: Room) -> None:
        """Carve a room in the level."""
        for x, y in room.interior():
            level.set_tile(x, y, Tile.floor())

    def _create_h_tunnel(self, level: Level, x1: int, x2: int, y: int) -> None:
        """Carve a horizontal corridor, both ends included."""
        for x in range(min(x1, x2), max(x1, x2) + 1):
            level.set_tile(x, y, Tile.floor())

    def _create_v_tunnel(self, level: Level, y1: int, y2: int, x: int) -> None:
        """Carve a vertical corridor, both ends included."""
        for y in range(min(y1, y2), max(y1, y2) + 1):
            level.set_tile(x, y, Tile.floor())
