"""Player entity."""

from qrpg.ecs.components import Fighter
from qrpg.ecs.entities import PLAYER, Entity, EntityManager

PLAYER_NAME = "Quincy"
PLAYER_COLOR = (255, 255, 255)


def create_player(entity_manager: EntityManager, x: int = 0, y: int = 0) -> Entity:
    """Create the player. Must be the first entity in the arena."""
    if len(entity_manager) != PLAYER:
        raise ValueError("player must occupy slot 0")

    player = entity_manager.create_entity(PLAYER_NAME, x, y, "@", PLAYER_COLOR, blocks=True)
    player.alive = True
    player.add_component(Fighter(max_hp=30, hp=30, defense=2, power=5))
    return player
