"""Entity management.

Actors live in a single ordered arena and are referenced by their slot id.
Slot 0 always holds the player. Entities are never removed: death only clears
the ``alive`` flag.
"""

from typing import Any, Dict, Iterator, TypeVar

from qrpg.ecs.components import Position, Render

Component = TypeVar("Component")

PLAYER = 0


class Entity:
    """Positioned actor composed of optional components."""

    def __init__(
        self,
        entity_id: int,
        name: str,
        x: int,
        y: int,
        glyph: str,
        color: tuple[int, int, int],
        blocks: bool = False,
    ) -> None:
        """Initialize entity."""
        self.id = entity_id
        self.name = name
        self.blocks = blocks
        self.alive = False
        self.components: Dict[type, Any] = {}
        self.add_component(Position(x, y))
        self.add_component(Render(glyph, color))

    def add_component(self, component: Any) -> None:
        """Add component to entity."""
        self.components[type(component)] = component

    def get_component(self, component_type: type[Component]) -> Component | None:
        """Get component by type."""
        return self.components.get(component_type)

    def has_component(self, component_type: type) -> bool:
        """Check if entity has component."""
        return component_type in self.components

    @property
    def position(self) -> Position:
        """Position component (always present)."""
        return self.components[Position]

    @property
    def render(self) -> Render:
        """Render component (always present)."""
        return self.components[Render]

    def pos(self) -> tuple[int, int]:
        """Current (x, y)."""
        return self.position.to_tuple()

    def set_pos(self, x: int, y: int) -> None:
        """Place entity at (x, y)."""
        self.position.set(x, y)

    def distance_to(self, other: "Entity") -> float:
        """Distance to another entity."""
        return self.position.distance_to(other.position)

    def __repr__(self) -> str:
        return f"Entity({self.id}, {self.name!r}, pos={self.pos()}, blocks={self.blocks}, alive={self.alive})"


class EntityManager:
    """Append-only arena of entities indexed by slot."""

    def __init__(self) -> None:
        """Initialize entity manager."""
        self.entities: list[Entity] = []

    def create_entity(
        self,
        name: str,
        x: int,
        y: int,
        glyph: str,
        color: tuple[int, int, int],
        blocks: bool = False,
    ) -> Entity:
        """Create new entity in the next free slot."""
        entity = Entity(len(self.entities), name, x, y, glyph, color, blocks)
        self.entities.append(entity)
        return entity

    def get_entity(self, entity_id: int) -> Entity:
        """Get entity by slot id."""
        return self.entities[entity_id]

    @property
    def player(self) -> Entity:
        """The player entity."""
        return self.entities[PLAYER]

    def get_entities_with(self, *component_types: type) -> list[Entity]:
        """Get all entities with specified components."""
        return [
            entity
            for entity in self.entities
            if all(entity.has_component(ct) for ct in component_types)
        ]

    def __iter__(self) -> Iterator[Entity]:
        return iter(self.entities)

    def __len__(self) -> int:
        return len(self.entities)
