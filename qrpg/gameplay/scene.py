"""Dungeon scene: owns one game session and runs its turns."""

import random
from typing import Optional

import pygame

from qrpg.core.events import EVENT_ATTACK_PLACEHOLDER, GameEvent, event_bus
from qrpg.core.input import MOVE_DIRECTIONS, InputCommand, PlayerAction, decode_key
from qrpg.core.scenes import Scene
from qrpg.core.settings import GameSettings
from qrpg.ecs.entities import Entity, EntityManager
from qrpg.gameplay.ai import take_monster_turns
from qrpg.gameplay.movement import player_move_or_attack
from qrpg.gameplay.player import create_player
from qrpg.ui.renderer import render_all
from qrpg.world.dungeon_gen import DungeonGenerator
from qrpg.world.fov import VisibilityMap
from qrpg.world.level import Level

MAX_MESSAGES = 20


class DungeonScene(Scene):
    """Turn-based dungeon crawling."""

    def __init__(self, settings: GameSettings, rng: Optional[random.Random] = None) -> None:
        """Initialize scene and generate the first dungeon."""
        super().__init__()
        self.settings = settings
        self.rng = rng or random.Random()
        self.font: Optional[pygame.font.Font] = None
        self.fullscreen_requested = False
        self.messages: list[str] = []

        self.entity_manager = EntityManager()
        self.level: Optional[Level] = None
        self.fov: Optional[VisibilityMap] = None
        self._prev_player_pos: Optional[tuple[int, int]] = None

        self.new_game()

    @property
    def player(self) -> Entity:
        """The player entity."""
        return self.entity_manager.player

    def new_game(self) -> None:
        """Create the player, generate a dungeon and its visibility map."""
        self.entity_manager = EntityManager()
        create_player(self.entity_manager)

        generator = DungeonGenerator(self.settings.dungeon, self.rng)
        self.level = generator.generate(self.entity_manager)
        self.fov = VisibilityMap.from_level(self.level)
        self._prev_player_pos = None
        self.messages.clear()
        event_bus.clear()
        self.refresh_fov()

    def on_enter(self) -> None:
        """Start listening for game messages."""
        event_bus.subscribe(EVENT_ATTACK_PLACEHOLDER, self._on_attack)

    def on_exit(self) -> None:
        """Stop listening for game messages."""
        event_bus.unsubscribe(EVENT_ATTACK_PLACEHOLDER, self._on_attack)

    def _on_attack(self, event: GameEvent) -> None:
        """Keep the latest attack messages."""
        if event.data:
            self.messages.append(event.data["message"])
            del self.messages[:-MAX_MESSAGES]

    def refresh_fov(self) -> bool:
        """Recompute visibility if the player moved and mark what they see.

        Returns:
            True if visibility was recomputed
        """
        pos = self.player.pos()
        recomputed = pos != self._prev_player_pos
        if recomputed:
            dungeon = self.settings.dungeon
            self.fov.compute(
                pos[0],
                pos[1],
                dungeon.torch_radius,
                dungeon.fov_light_walls,
                dungeon.fov_algorithm,
            )
            self._prev_player_pos = pos
        self.fov.mark_explored(self.level)
        return recomputed

    def handle_event(self, event: pygame.event.Event) -> PlayerAction:
        """Handle one input event and run the monsters' turn if one was taken."""
        command = decode_key(event, self.settings.keybindings)

        if command == InputCommand.EXIT:
            self.should_quit = True
            return PlayerAction.EXIT
        if command == InputCommand.TOGGLE_FULLSCREEN:
            self.fullscreen_requested = True
            return PlayerAction.DIDNT_TAKE_TURN
        if command not in MOVE_DIRECTIONS or not self.player.alive:
            return PlayerAction.DIDNT_TAKE_TURN

        dx, dy = MOVE_DIRECTIONS[command]
        player_move_or_attack(dx, dy, self.level, self.entity_manager)

        if self.player.alive:
            self.refresh_fov()
            take_monster_turns(self.level, self.entity_manager, self.fov)
        return PlayerAction.TOOK_TURN

    def update(self, dt: float) -> None:
        """Deliver queued game events."""
        event_bus.process()

    def render(self, screen: pygame.Surface) -> None:
        """Render the explored map and visible actors."""
        self.refresh_fov()
        render_all(
            screen,
            self.level,
            self.entity_manager,
            self.fov,
            self.font,
            self.settings.tile_size,
        )
