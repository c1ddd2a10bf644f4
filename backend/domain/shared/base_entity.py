"""
Base Entity class for all domain entities.

Entities have identity and lifecycle.
Two entities are equal if they have the same ID.
"""

from __future__ import annotations
from abc import ABC
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional
from uuid import uuid4


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(eq=False)
class Entity(ABC):
    """
    Base class for all domain entities.

    Entities are objects that have a distinct identity that runs through time
    and different representations. They are defined by their identity, not their attributes.
    """

    id: str = field(default_factory=lambda: uuid4().hex, kw_only=True)
    created_at: datetime = field(default_factory=utcnow, kw_only=True)
    updated_at: datetime = field(default=None, kw_only=True)

    def __post_init__(self):
        if self.updated_at is None:
            self.updated_at = self.created_at

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entity):
            return False
        return type(self) is type(other) and self.id == other.id

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.id))

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} id={self.id}>"


@dataclass(eq=False)
class VersionedEntity(Entity):
    """
    Entity that counts its mutations.

    Every mutation bumps ``version`` and refreshes ``updated_at``.
    ``updated_at`` never moves backwards, even if the clock does.
    """

    version: int = field(default=1, kw_only=True)

    def increment_version(self, now: Optional[datetime] = None) -> None:
        """Increment version and refresh the update time."""
        self.version += 1
        self.updated_at = max(now or utcnow(), self.updated_at)
