"""Turn-based main loop: redraw, then block until the next input."""

import pygame

from qrpg.core.input import PlayerAction
from qrpg.gameplay.scene import DungeonScene


class GameLoop:
    """Event-driven loop. Nothing changes between key presses."""

    def __init__(self, screen: pygame.Surface, scene: DungeonScene, fps: int = 20) -> None:
        """Initialize game loop."""
        self.screen = screen
        self.scene = scene
        self.fps = fps
        self.running = False
        self.clock = pygame.time.Clock()

    def run(self) -> None:
        """Run the game loop."""
        self.running = True
        self.scene.on_enter()

        while self.running:
            self.scene.render(self.screen)
            pygame.display.flip()
            self.clock.tick(self.fps)

            event = pygame.event.wait()
            action = self.scene.handle_event(event)
            self.scene.update(self.clock.get_time() / 1000.0)

            if self.scene.fullscreen_requested:
                pygame.display.toggle_fullscreen()
                self.scene.fullscreen_requested = False

            if action == PlayerAction.EXIT or self.scene.should_quit:
                self.running = False

        self.scene.on_exit()
