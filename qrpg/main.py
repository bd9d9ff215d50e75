"""Main entry point for the game."""

import logging
import sys
from pathlib import Path

import pygame

from qrpg.core.loop import GameLoop
from qrpg.core.settings import GameSettings
from qrpg.gameplay.scene import DungeonScene

logger = logging.getLogger(__name__)


def main() -> None:
    """Main game entry point."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    pygame.init()

    # Load settings
    settings_path = Path("data/config/settings.json")
    settings = GameSettings.load(settings_path)
    if not settings_path.exists():
        settings.save(settings_path)

    screen = pygame.display.set_mode(
        (settings.screen_width * settings.tile_size, settings.screen_height * settings.tile_size)
    )
    pygame.display.set_caption(settings.title)

    scene = DungeonScene(settings)
    scene.font = pygame.font.Font(None, settings.tile_size + 4)
    logger.info("Dungeon ready with %d actors", len(scene.entity_manager))

    game_loop = GameLoop(screen, scene, fps=settings.fps)
    game_loop.run()

    # Cleanup
    pygame.quit()
    sys.exit(0)


if __name__ == "__main__":
    main()
