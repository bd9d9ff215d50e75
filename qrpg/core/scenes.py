"""Scene base class."""

from abc import ABC, abstractmethod
from typing import Any

import pygame


class Scene(ABC):
    """Base scene class."""

    def __init__(self) -> None:
        """Initialize scene."""
        self.should_quit = False

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> Any:
        """Handle pygame event."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update scene logic."""

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Render scene."""

    def on_enter(self) -> None:
        """Called when scene is entered."""

    def on_exit(self) -> None:
        """Called when scene is exited."""
