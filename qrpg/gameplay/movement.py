"""Collision-aware movement for actors on the tile grid.

Blocked moves are silent no-ops; callers decide whether to try again.
"""

import logging
import math

from qrpg.core.events import EVENT_ATTACK_PLACEHOLDER, GameEvent, event_bus
from qrpg.ecs.entities import PLAYER, Entity, EntityManager
from qrpg.world.level import Level
from qrpg.world.occupancy import entity_at, is_blocked

logger = logging.getLogger(__name__)


def move_by(entity_id: int, dx: int, dy: int, level: Level, entity_manager: EntityManager) -> bool:
    """Move entity by (dx, dy) unless the destination is blocked.

    Returns:
        True if the entity moved
    """
    entity = entity_manager.get_entity(entity_id)
    x, y = entity.pos()
    if is_blocked(x + dx, y + dy, level, entity_manager):
        return False

    entity.set_pos(x + dx, y + dy)
    return True


def step_toward(x: int, y: int, target_x: int, target_y: int) -> tuple[int, int]:
    """Unit step (each axis in -1..1) along the straight line to target."""
    dx = target_x - x
    dy = target_y - y
    distance = math.hypot(dx, dy)
    if distance == 0:
        return (0, 0)
    return (int(round(dx / distance)), int(round(dy / distance)))


def move_toward(
    entity_id: int, target_x: int, target_y: int, level: Level, entity_manager: EntityManager
) -> bool:
    """Take one step toward the target cell.

    Ties between axes may round to a diagonal step or to no step at all.
    """
    x, y = entity_manager.get_entity(entity_id).pos()
    dx, dy = step_toward(x, y, target_x, target_y)
    if (dx, dy) == (0, 0):
        return False
    return move_by(entity_id, dx, dy, level, entity_manager)


def report_attack(attacker: Entity, target: Entity, message: str) -> None:
    """Announce a placeholder attack. No damage is dealt."""
    logger.info(message)
    event_bus.emit(
        GameEvent(
            EVENT_ATTACK_PLACEHOLDER,
            {"attacker": attacker.id, "target": target.id, "message": message},
        )
    )


def player_move_or_attack(dx: int, dy: int, level: Level, entity_manager: EntityManager) -> Entity | None:
    """Move the player, or bump whoever stands in the destination cell.

    Any entity at the destination counts, blocking or not.

    Returns:
        The entity that was bumped, or None if the player tried to move
    """
    player = entity_manager.player
    x, y = player.pos()
    target = entity_at(x + dx, y + dy, entity_manager)

    if target is not None:
        report_attack(player, target, f"{target.name} laughs at you!")
        return target

    move_by(PLAYER, dx, dy, level, entity_manager)
    return None
