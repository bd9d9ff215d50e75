"""Monster archetypes and per-room monster placement."""

import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING

from qrpg.ecs.components import BasicAI, Fighter
from qrpg.ecs.entities import Entity, EntityManager
from qrpg.world.level import Level
from qrpg.world.occupancy import is_blocked

if TYPE_CHECKING:
    from qrpg.world.dungeon_gen import Room

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MonsterArchetype:
    """Stats and look of a monster kind."""

    name: str
    glyph: str
    color: tuple[int, int, int]
    max_hp: int
    defense: int
    power: int


OGRE = MonsterArchetype("Ogre", "o", (63, 127, 63), max_hp=10, defense=0, power=3)
TROLL = MonsterArchetype("Troll", "T", (0, 127, 0), max_hp=16, defense=1, power=4)

# Chance that a spawned monster is an ogre rather than a troll
OGRE_CHANCE = 0.8


def choose_archetype(rng: random.Random) -> MonsterArchetype:
    """Pick a weighted archetype."""
    return OGRE if rng.random() < OGRE_CHANCE else TROLL


def create_monster(entity_manager: EntityManager, archetype: MonsterArchetype, x: int, y: int) -> Entity:
    """Create a living monster with a combat profile and basic AI."""
    monster = entity_manager.create_entity(
        archetype.name, x, y, archetype.glyph, archetype.color, blocks=True
    )
    monster.add_component(
        Fighter(
            max_hp=archetype.max_hp,
            hp=archetype.max_hp,
            defense=archetype.defense,
            power=archetype.power,
        )
    )
    monster.add_component(BasicAI())
    monster.alive = True
    return monster


def place_monsters(
    room: "Room",
    level: Level,
    entity_manager: EntityManager,
    rng: random.Random,
    max_room_monsters: int,
) -> list[Entity]:
    """Seed a room with up to ``max_room_monsters`` monsters.

    Candidates that land on an occupied cell are dropped, not retried, so a
    room can end up with fewer monsters than drawn.

    Returns:
        Monsters actually placed
    """
    placed = []
    num_monsters = rng.randint(0, max_room_monsters)

    for _ in range(num_monsters):
        x = rng.randint(room.x1 + 1, room.x2 - 1)
        y = rng.randint(room.y1 + 1, room.y2 - 1)
        archetype = choose_archetype(rng)

        if is_blocked(x, y, level, entity_manager):
            logger.debug("Dropped %s spawn at (%d, %d)", archetype.name, x, y)
            continue

        placed.append(create_monster(entity_manager, archetype, x, y))

    return placed
