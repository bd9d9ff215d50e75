"""Combined static and dynamic occupancy queries."""

from qrpg.ecs.entities import Entity, EntityManager
from qrpg.world.level import Level


def blocking_entity_at(x: int, y: int, entity_manager: EntityManager) -> Entity | None:
    """First blocking entity standing at (x, y)."""
    for entity in entity_manager:
        if entity.blocks and entity.pos() == (x, y):
            return entity
    return None


def entity_at(x: int, y: int, entity_manager: EntityManager) -> Entity | None:
    """First entity at (x, y), blocking or not."""
    for entity in entity_manager:
        if entity.pos() == (x, y):
            return entity
    return None


def is_blocked(x: int, y: int, level: Level, entity_manager: EntityManager) -> bool:
    """Check if (x, y) is a blocked tile or holds a blocking entity."""
    if level.is_tile_blocked(x, y):
        return True
    return blocking_entity_at(x, y, entity_manager) is not None
