"""
Board Domain - Tracked Entity.

Base aggregate for anything shown on a status board.
"""

from __future__ import annotations
from abc import abstractmethod
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, ClassVar, Mapping, Optional

from domain.shared.base_aggregate import AggregateRoot
from domain.shared.events import DomainEvent
from domain.shared.exceptions import ValidationException

from .status_machine import StatusMachine


@dataclass(eq=False)
class TrackedEntity(AggregateRoot):
    """
    An aggregate with a status drawn from its kind's status machine.

    Subclasses declare ``status_machine`` and ``entity_type``. A missing
    status falls back to the machine's creation status.
    """

    status_machine: ClassVar[StatusMachine]
    entity_type: ClassVar[str]

    status: Optional[Enum] = None

    def __post_init__(self):
        super().__post_init__()
        if self.status is None:
            self.status = self.status_machine.creation_status
        self.status = self.status_machine.parse(self.status)

    @property
    def timestamp(self) -> datetime:
        """Recency key used to order members of a board group."""
        return self.updated_at

    @property
    def available_transitions(self):
        return self.status_machine.allowed_targets(self.status)

    def change_status(self, new_status: Any, now: Optional[datetime] = None) -> None:
        """
        Move to ``new_status``.

        Validation happens before anything is touched, so a rejected
        transition leaves the entity exactly as it was.
        """
        target = self.status_machine.parse(new_status)
        self.status_machine.check_transition(self.entity_type, self.status, target, entity_id=self.id)

        old_status = self.status
        self.status = target
        self.increment_version(now)
        self.add_domain_event(self._status_changed_event(old_status))

    @abstractmethod
    def _status_changed_event(self, old_status: Enum) -> DomainEvent:
        """Event recorded after a successful transition."""

    @classmethod
    @abstractmethod
    def from_fields(
        cls,
        fields: Mapping[str, Any],
        *,
        entity_id: str,
        now: datetime
    ) -> "TrackedEntity":
        """Create a validated entity from collaborator-supplied fields."""


def required_text(fields: Mapping[str, Any], name: str) -> str:
    """Fetch a non-blank string field or raise ValidationException."""
    value = fields.get(name)
    if value is None:
        raise ValidationException(f"'{name}' is required", field=name)
    if not isinstance(value, str) or not value.strip():
        raise ValidationException(f"'{name}' cannot be empty", field=name, value=value)
    return value.strip()
