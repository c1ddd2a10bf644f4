"""
Board Trackers.

Mutation API of the boards: every mutation goes through the entity store and
every view is projected fresh from it, so the view can never lag behind.
"""

from __future__ import annotations
import logging
import random
import string
from datetime import datetime
from typing import Any, Callable, Dict, Generic, Mapping, Optional, Tuple, Type, TypeVar

from domain.board.entities import TrackedEntity
from domain.board.projection import Group, project
from domain.board.store import EntityStore
from domain.shared.base_entity import utcnow
from domain.shared.exceptions import ValidationException
from domain.shared.value_objects import OrderStatus
from domain.orders.aggregates import Order
from domain.supply.aggregates import Product

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=TrackedEntity)


class StatusTracker(Generic[E]):
    """
    One board: a store, its status machine and the projector.

    Methods return only after the store is updated; ``current_view`` called
    right after any of them reflects the change.
    """

    entity_class: Type[E]

    def __init__(
        self,
        store: Optional[EntityStore[E]] = None,
        clock: Callable[[], datetime] = utcnow
    ):
        if store is None:
            store = EntityStore(self.entity_class, clock=clock)
        self.store = store

    @property
    def status_machine(self):
        return self.store.status_machine

    def create_entity(self, fields: Mapping[str, Any]) -> E:
        entity = self.store.create(fields)
        self._publish(entity)
        return entity

    def set_status(self, entity_id: str, new_status: Any) -> E:
        entity = self.store.transition(entity_id, new_status)
        self._publish(entity)
        return entity

    def current_view(self) -> Tuple[Group, ...]:
        return project(self.store.list(), self.status_machine.statuses)

    def available_transitions(self, entity_id: str) -> Tuple[Any, ...]:
        """Statuses a board may offer as buttons for this entity."""
        return self.store.get(entity_id).available_transitions

    def _publish(self, entity: E) -> None:
        for event in entity.clear_domain_events():
            logger.info(f"{event.event_type}: {self._describe(event)}")

    @staticmethod
    def _describe(event) -> str:
        payload = {
            key: value for key, value in vars(event).items()
            if key not in ('event_id', 'occurred_at')
        }
        return ", ".join(f"{key}={value}" for key, value in payload.items())


class OrderTracker(StatusTracker[Order]):
    """Order board: new -> preparing -> ready."""

    entity_class = Order

    def __init__(
        self,
        store: Optional[EntityStore[Order]] = None,
        clock: Callable[[], datetime] = utcnow,
        label_prefix: str = "#order",
        rng: Optional[random.Random] = None
    ):
        super().__init__(store, clock)
        self.label_prefix = label_prefix
        self._rng = rng or random.Random()

    def create_order(self, label: str) -> Order:
        return self.create_entity({'label': label})

    def generate_mock_order(self) -> Order:
        """Place an order with a random code, e.g. ``#orderE78C``."""
        code = ''.join(self._rng.choices(string.ascii_uppercase + string.digits, k=4))
        return self.create_order(f"{self.label_prefix}{code}")

    def accept(self, order_id: str) -> Order:
        """Kitchen takes the order (接受訂單)."""
        return self.set_status(order_id, OrderStatus.PREPARING)

    def complete(self, order_id: str) -> Order:
        """Order is prepared (完成準備)."""
        return self.set_status(order_id, OrderStatus.READY)


class SupplyTracker(StatusTracker[Product]):
    """Supply board: stock levels corrected freely by the operator."""

    entity_class = Product

    def __init__(
        self,
        store: Optional[EntityStore[Product]] = None,
        clock: Callable[[], datetime] = utcnow,
        currency: str = "TWD"
    ):
        super().__init__(store, clock)
        self.currency = currency

    def create_entity(self, fields: Mapping[str, Any]) -> Product:
        fields = dict(fields)
        fields.setdefault('currency', self.currency)
        return super().create_entity(fields)

    def add_product(self, name: str, price: Any, status: Any = None) -> Product:
        return self.create_entity({'name': name, 'price': price, 'status': status})


ORDER_KINDS = ('order', 'orders')
SUPPLY_KINDS = ('product', 'products', 'supply')


class BoardService:
    """
    Entry point for the presentation layer: routes intents by board kind.

    Kinds: ``order`` (alias ``orders``) and ``product`` (aliases
    ``products``, ``supply``).
    """

    def __init__(
        self,
        orders: Optional[OrderTracker] = None,
        supply: Optional[SupplyTracker] = None
    ):
        self.orders = orders or OrderTracker()
        self.supply = supply or SupplyTracker()
        self._trackers: Dict[str, StatusTracker] = {}
        for kind in ORDER_KINDS:
            self._trackers[kind] = self.orders
        for kind in SUPPLY_KINDS:
            self._trackers[kind] = self.supply

    def tracker(self, kind: str) -> StatusTracker:
        try:
            return self._trackers[(kind or '').strip().lower()]
        except KeyError:
            raise ValidationException(f"Unknown board '{kind}'", field="kind", value=kind) from None

    def create_entity(self, kind: str, fields: Mapping[str, Any]) -> TrackedEntity:
        return self.tracker(kind).create_entity(fields)

    def set_status(self, kind: str, entity_id: str, new_status: Any) -> TrackedEntity:
        return self.tracker(kind).set_status(entity_id, new_status)

    def current_view(self, kind: str) -> Tuple[Group, ...]:
        return self.tracker(kind).current_view()
