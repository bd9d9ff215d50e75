"""Map and actor rendering."""

from typing import Optional

import pygame

from qrpg.ecs.entities import EntityManager
from qrpg.world.fov import VisibilityMap
from qrpg.world.level import Level
from qrpg.world.tiles import get_tile_color


def render_level(surface: pygame.Surface, level: Level, fov: VisibilityMap, tile_size: int) -> None:
    """Draw explored tiles, lit if currently visible."""
    for y in range(level.height):
        for x in range(level.width):
            tile = level.get_tile(x, y)
            if not tile.explored:
                continue
            color = get_tile_color(fov.is_in_fov(x, y), tile.blocks_sight)
            surface.fill(color, pygame.Rect(x * tile_size, y * tile_size, tile_size, tile_size))


def render_entities(
    surface: pygame.Surface,
    entity_manager: EntityManager,
    fov: VisibilityMap,
    font: pygame.font.Font,
    tile_size: int,
) -> None:
    """Draw glyphs of entities in view. The player is drawn last."""
    for entity in reversed(entity_manager.entities):
        x, y = entity.pos()
        if not fov.is_in_fov(x, y):
            continue
        glyph = font.render(entity.render.glyph, True, entity.render.color)
        rect = glyph.get_rect(center=(x * tile_size + tile_size // 2, y * tile_size + tile_size // 2))
        surface.blit(glyph, rect)


def render_all(
    surface: pygame.Surface,
    level: Level,
    entity_manager: EntityManager,
    fov: VisibilityMap,
    font: Optional[pygame.font.Font],
    tile_size: int,
) -> None:
    """Render the whole map view. Entities are skipped without a font."""
    surface.fill((0, 0, 0))
    render_level(surface, level, fov, tile_size)
    if font is not None:
        render_entities(surface, entity_manager, fov, font, tile_size)
