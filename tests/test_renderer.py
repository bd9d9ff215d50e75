"""Tests for map rendering."""

import numpy as np
import pygame

from qrpg.ecs.entities import EntityManager
from qrpg.gameplay.enemies import OGRE, create_monster
from qrpg.gameplay.player import create_player
from qrpg.ui.renderer import render_all
from qrpg.world.fov import VisibilityMap
from qrpg.world.level import Level
from qrpg.world.tiles import DARK_GROUND, DARK_WALL, LIGHT_GROUND, LIGHT_WALL, Tile

TILE = 4


def _color_at(surface: pygame.Surface, x: int, y: int) -> tuple[int, int, int]:
    return tuple(surface.get_at((x * TILE + 1, y * TILE + 1)))[:3]


def test_only_explored_tiles_drawn() -> None:
    """Test lit and remembered tiles get their colors, unexplored stays black."""
    level = Level(4, 1)
    level.set_tile(0, 0, Tile.floor())
    level.set_tile(1, 0, Tile.floor())
    for x in range(3):
        level.get_tile(x, 0).mark_explored()

    manager = EntityManager()
    create_player(manager, 0, 0)
    fov = VisibilityMap.from_level(level)
    fov.visible = np.array([[True], [False], [True], [False]])

    surface = pygame.Surface((4 * TILE, TILE))
    render_all(surface, level, manager, fov, None, TILE)

    assert _color_at(surface, 0, 0) == LIGHT_GROUND
    assert _color_at(surface, 1, 0) == DARK_GROUND
    assert _color_at(surface, 2, 0) == LIGHT_WALL
    assert _color_at(surface, 3, 0) == (0, 0, 0)


def test_remembered_wall_is_dark() -> None:
    """Test explored walls out of view use the dark wall color."""
    level = Level(1, 1)
    level.get_tile(0, 0).mark_explored()
    manager = EntityManager()
    create_player(manager, 0, 0)
    fov = VisibilityMap.from_level(level)

    surface = pygame.Surface((TILE, TILE))
    render_all(surface, level, manager, fov, None, TILE)

    assert _color_at(surface, 0, 0) == DARK_WALL


class _RecordingFont:
    """Font stand-in remembering which glyphs were drawn, in order."""

    def __init__(self) -> None:
        self.drawn: list[str] = []

    def render(self, text: str, antialias: bool, color) -> pygame.Surface:
        self.drawn.append(text)
        glyph = pygame.Surface((2, 2))
        glyph.fill(color)
        return glyph


def _cell_colors(surface: pygame.Surface, x: int, y: int, size: int) -> set[tuple[int, int, int]]:
    return {
        tuple(surface.get_at((x * size + dx, y * size + dy)))[:3]
        for dx in range(size)
        for dy in range(size)
    }


def _lit_corridor() -> tuple[Level, EntityManager, VisibilityMap]:
    """Three explored floor cells; only the first two are in view."""
    level = Level(3, 1)
    for x in range(3):
        level.set_tile(x, 0, Tile.floor())
        level.get_tile(x, 0).mark_explored()
    manager = EntityManager()
    create_player(manager, 0, 0)
    fov = VisibilityMap.from_level(level)
    fov.visible = np.array([[True], [True], [False]])
    return level, manager, fov


def test_glyphs_drawn_only_in_view() -> None:
    """Test visible actors get their glyph, actors out of view are hidden."""
    pygame.font.init()
    size = 20
    font = pygame.font.Font(None, 16)
    level, manager, fov = _lit_corridor()
    create_monster(manager, OGRE, 2, 0)

    surface = pygame.Surface((3 * size, size))
    render_all(surface, level, manager, fov, font, size)

    assert _cell_colors(surface, 0, 0, size) != {LIGHT_GROUND}
    assert _cell_colors(surface, 1, 0, size) == {LIGHT_GROUND}
    assert _cell_colors(surface, 2, 0, size) == {DARK_GROUND}


def test_player_drawn_last() -> None:
    """Test the player glyph goes on top of everything else."""
    level, manager, fov = _lit_corridor()
    create_monster(manager, OGRE, 1, 0)
    manager.create_entity("bones", 0, 0, "%", (200, 200, 200))
    font = _RecordingFont()

    render_all(pygame.Surface((3 * TILE, TILE)), level, manager, fov, font, TILE)

    assert font.drawn == ["%", "o", "@"]


def test_glyph_uses_actor_color() -> None:
    """Test glyphs are drawn in the actor's own color."""
    level, manager, fov = _lit_corridor()
    create_monster(manager, OGRE, 1, 0)
    size = 8
    surface = pygame.Surface((3 * size, size))

    render_all(surface, level, manager, fov, _RecordingFont(), size)

    assert OGRE.color in _cell_colors(surface, 1, 0, size)
