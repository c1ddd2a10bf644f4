"""
Domain Events.

Domain events are records of significant business occurrences on the boards.
Trackers drain them from aggregates after each mutation.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

from .base_entity import utcnow


@dataclass(frozen=True)
class DomainEvent:
    """
    Base class for all domain events.

    Domain events are immutable records of something that happened in the domain.
    """

    event_id: UUID = field(default_factory=uuid4, kw_only=True)
    occurred_at: datetime = field(default_factory=utcnow, kw_only=True)

    @property
    def event_type(self) -> str:
        """Get the event type name."""
        return self.__class__.__name__


# =============================================================================
# ORDER EVENTS
# =============================================================================

@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    """Event raised when a new order is placed on the board."""

    order_id: str
    label: str


@dataclass(frozen=True)
class OrderStatusChanged(DomainEvent):
    """Event raised when an order moves along the preparation pipeline."""

    order_id: str
    old_status: str
    new_status: str


# =============================================================================
# SUPPLY EVENTS
# =============================================================================

@dataclass(frozen=True)
class ProductCreated(DomainEvent):
    """Event raised when a product is added to the supply board."""

    product_id: str
    name: str
    status: str
    price: str  # Serialized Money


@dataclass(frozen=True)
class ProductStatusChanged(DomainEvent):
    """Event raised when a product's stock status is corrected."""

    product_id: str
    old_status: str
    new_status: str
