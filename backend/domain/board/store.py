"""
Board Domain - Entity Store.

The authoritative, in-memory collection of one kind of tracked entity.
All mutations are synchronous and all-or-nothing.
"""

from __future__ import annotations
from datetime import datetime
from typing import Any, Callable, Dict, Generic, List, Mapping, Type, TypeVar

from domain.shared.base_entity import utcnow
from domain.shared.exceptions import EntityAlreadyExistsException, EntityNotFoundException

from .entities import TrackedEntity

E = TypeVar('E', bound=TrackedEntity)


class EntityStore(Generic[E]):
    """
    Holds tracked entities of one kind keyed by id.

    Ids are sequential decimal strings allocated by the store and never reused.
    """

    def __init__(
        self,
        entity_class: Type[E],
        clock: Callable[[], datetime] = utcnow
    ):
        self.entity_class = entity_class
        self.clock = clock
        self._entities: Dict[str, E] = {}
        self._next_id = 1

    @property
    def status_machine(self):
        return self.entity_class.status_machine

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, entity_id: object) -> bool:
        return str(entity_id) in self._entities

    def _peek_id(self) -> str:
        while str(self._next_id) in self._entities:
            self._next_id += 1
        return str(self._next_id)

    def create(self, fields: Mapping[str, Any]) -> E:
        """Validate ``fields`` and store a new entity stamped with the current time."""
        entity_id = self._peek_id()
        entity = self.entity_class.from_fields(fields, entity_id=entity_id, now=self.clock())
        self._entities[entity_id] = entity
        self._next_id += 1
        return entity

    def add(self, entity: E) -> E:
        """Store an already built entity, keeping its id."""
        if not isinstance(entity, self.entity_class):
            raise TypeError(f"Expected {self.entity_class.__name__}, got {type(entity).__name__}")
        if entity.id in self._entities:
            raise EntityAlreadyExistsException(self.entity_class.entity_type, entity.id)
        self._entities[entity.id] = entity
        if entity.id.isdecimal():
            self._next_id = max(self._next_id, int(entity.id) + 1)
        return entity

    def get(self, entity_id: str) -> E:
        try:
            return self._entities[str(entity_id)]
        except KeyError:
            raise EntityNotFoundException(self.entity_class.entity_type, entity_id) from None

    def transition(self, entity_id: str, new_status: Any) -> E:
        """Move an entity to ``new_status``; the entity is untouched on failure."""
        entity = self.get(entity_id)
        entity.change_status(new_status, now=self.clock())
        return entity

    def list(self) -> List[E]:
        """Snapshot of all entities, in no guaranteed order."""
        return list(self._entities.values())
