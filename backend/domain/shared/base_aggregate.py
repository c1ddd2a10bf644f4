"""
Base Aggregate Root class.

Every board entity is its own aggregate: the store hands out and mutates
whole entities, never parts of them.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from .base_entity import VersionedEntity
from .events import DomainEvent


@dataclass(eq=False)
class AggregateRoot(VersionedEntity):
    """
    Versioned entity that records what happened to it.

    Events pile up on the aggregate until a tracker drains them after the
    mutation succeeded. A rejected mutation records nothing.
    """

    _domain_events: List[DomainEvent] = field(default_factory=list, repr=False, kw_only=True)

    def add_domain_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def clear_domain_events(self) -> List[DomainEvent]:
        """Drain pending events, oldest first."""
        drained, self._domain_events = self._domain_events, []
        return drained

    @property
    def domain_events(self) -> List[DomainEvent]:
        """Pending events (a copy)."""
        return list(self._domain_events)
