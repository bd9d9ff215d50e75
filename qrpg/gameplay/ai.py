"""Monster turns."""

from qrpg.ecs.components import BasicAI
from qrpg.ecs.entities import PLAYER, EntityManager
from qrpg.gameplay.movement import move_toward, report_attack
from qrpg.world.fov import VisibilityMap
from qrpg.world.level import Level


def take_monster_turns(level: Level, entity_manager: EntityManager, fov: VisibilityMap) -> None:
    """Let every living monster the player can see act once."""
    player = entity_manager.player

    for entity in entity_manager.get_entities_with(BasicAI):
        if entity.id == PLAYER or not entity.alive:
            continue

        x, y = entity.pos()
        if not fov.is_in_fov(x, y):
            continue

        ai = entity.get_component(BasicAI)
        if entity.distance_to(player) >= ai.reach:
            px, py = player.pos()
            move_toward(entity.id, px, py, level, entity_manager)
        elif player.alive:
            report_attack(entity, player, f"The {entity.name} growls!")
