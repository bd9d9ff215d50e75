"""Game settings and configuration."""

import json
import logging
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict

import pygame

logger = logging.getLogger(__name__)


@dataclass
class KeyBindings:
    """Keyboard bindings configuration."""

    move_up: int = pygame.K_UP
    move_down: int = pygame.K_DOWN
    move_left: int = pygame.K_LEFT
    move_right: int = pygame.K_RIGHT
    exit: int = pygame.K_ESCAPE
    fullscreen: int = pygame.K_RETURN

    def get_movement_direction(self, key: int) -> tuple[int, int] | None:
        """Get movement direction from key."""
        if key == self.move_up:
            return (0, -1)
        if key == self.move_down:
            return (0, 1)
        if key == self.move_left:
            return (-1, 0)
        if key == self.move_right:
            return (1, 0)
        return None


@dataclass
class DungeonSettings:
    """Dungeon generation and visibility settings."""

    map_width: int = 80
    map_height: int = 45
    room_min_size: int = 6
    room_max_size: int = 10
    max_rooms: int = 40
    max_room_monsters: int = 3
    torch_radius: int = 10
    fov_algorithm: str = "restrictive"
    fov_light_walls: bool = True


@dataclass
class GameSettings:
    """Main game settings."""

    screen_width: int = 80  # In tiles
    screen_height: int = 50
    tile_size: int = 10  # Pixels per tile
    fps: int = 20
    title: str = "QRPG"
    dungeon: DungeonSettings = field(default_factory=DungeonSettings)
    keybindings: KeyBindings = field(default_factory=KeyBindings)

    @classmethod
    def load(cls, path: Path | str = "data/config/settings.json") -> "GameSettings":
        """Load settings from JSON file."""
        path = Path(path)
        if not path.exists():
            return cls()

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, OSError) as e:
            logger.warning("Failed to load settings from %s: %s", path, e)
            return cls()

        if not isinstance(data, dict):
            logger.warning("Ignoring settings in %s: not a JSON object", path)
            return cls()

        defaults = cls()
        return cls(
            screen_width=data.get("screen_width", defaults.screen_width),
            screen_height=data.get("screen_height", defaults.screen_height),
            tile_size=data.get("tile_size", defaults.tile_size),
            fps=data.get("fps", defaults.fps),
            title=data.get("title", defaults.title),
            dungeon=_merge(DungeonSettings, data.get("dungeon")),
            keybindings=_merge(KeyBindings, data.get("keybindings")),
        )

    def save(self, path: Path | str = "data/config/settings.json") -> None:
        """Save settings to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)

        data: Dict[str, Any] = asdict(self)

        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)


def _merge(settings_type: type, data: Any) -> Any:
    """Build a settings dataclass, ignoring unknown keys.

    Anything other than a JSON object (a missing or null section) gives the defaults.
    """
    if not isinstance(data, dict):
        return settings_type()
    known = {f.name for f in fields(settings_type)}
    return settings_type(**{k: v for k, v in data.items() if k in known})
