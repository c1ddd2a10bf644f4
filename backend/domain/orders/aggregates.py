"""
Orders Domain - Aggregates.

Order is the aggregate root of the order board.
"""

from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, Set

from domain.board.entities import TrackedEntity, required_text
from domain.board.status_machine import pipeline_machine
from domain.shared.events import OrderCreated, OrderStatusChanged
from domain.shared.exceptions import ValidationException
from domain.shared.value_objects import OrderStatus


# Valid status transitions
VALID_STATUS_TRANSITIONS: Dict[OrderStatus, Set[OrderStatus]] = {
    OrderStatus.NEW: {OrderStatus.PREPARING},
    OrderStatus.PREPARING: {OrderStatus.READY},
    OrderStatus.READY: set(),  # No transitions from ready
}

ORDER_STATUS_MACHINE = pipeline_machine(
    OrderStatus,
    VALID_STATUS_TRANSITIONS,
    initial_status=OrderStatus.NEW,
)


@dataclass(eq=False)
class Order(TrackedEntity):
    """
    An order on its way from the counter to the pass.

    Orders only move forward: new -> preparing -> ready.
    Within a stage they are listed by placement time, newest first.
    """

    status_machine = ORDER_STATUS_MACHINE
    entity_type = "Order"

    label: str = ""

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.label, str) or not self.label.strip():
            raise ValidationException("Order label is required", "label", self.label)

    @property
    def timestamp(self) -> datetime:
        return self.created_at

    def _status_changed_event(self, old_status: OrderStatus) -> OrderStatusChanged:
        return OrderStatusChanged(
            order_id=self.id,
            old_status=old_status.value,
            new_status=self.status.value,
        )

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any], *, entity_id: str, now: datetime) -> Order:
        """New orders always start in the first pipeline stage."""
        order = cls(
            id=entity_id,
            created_at=now,
            label=required_text(fields, 'label'),
            status=cls.status_machine.initial_status,
        )
        order.add_domain_event(OrderCreated(order_id=order.id, label=order.label))
        return order
