"""ECS Components."""

import math
from dataclasses import dataclass

import pygame


@dataclass
class Position:
    """Position component: tile coordinates."""

    x: int = 0
    y: int = 0

    def to_tuple(self) -> tuple[int, int]:
        """Convert position to tuple."""
        return (self.x, self.y)

    def set(self, x: int, y: int) -> None:
        """Move to new coordinates."""
        self.x = x
        self.y = y

    def distance_to(self, other: "Position") -> float:
        """Euclidean distance to another position."""
        return math.hypot(other.x - self.x, other.y - self.y)


@dataclass
class Render:
    """Render component: glyph and color."""

    glyph: str = "?"
    color: pygame.Color | tuple[int, int, int] = (255, 255, 255)


@dataclass
class Fighter:
    """Combat profile."""

    max_hp: int
    hp: int
    defense: int = 0
    power: int = 0

    def __post_init__(self) -> None:
        """Ensure hp doesn't exceed max_hp."""
        self.hp = min(self.hp, self.max_hp)


@dataclass
class BasicAI:
    """Marks an actor that chases the player when it can see them."""

    # Minimum distance before the actor stops closing in
    reach: float = 2.0
