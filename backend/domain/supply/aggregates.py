"""
Supply Domain - Aggregates.

Product is the aggregate root of the supply board.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Mapping

from domain.board.entities import TrackedEntity, required_text
from domain.board.status_machine import free_form_machine
from domain.shared.events import ProductCreated, ProductStatusChanged
from domain.shared.exceptions import ValidationException
from domain.shared.value_objects import Money, StockStatus


# Board display order; transitions between these are unrestricted.
STOCK_STATUS_ORDER = (
    StockStatus.LOW_STOCK,
    StockStatus.SCARCE,
    StockStatus.OUT_OF_STOCK,
    StockStatus.SUFFICIENT,
)

PRODUCT_STATUS_MACHINE = free_form_machine(
    StockStatus,
    STOCK_STATUS_ORDER,
    default_status=StockStatus.SUFFICIENT,
)


def parse_price(value: Any, currency: str = "TWD") -> Money:
    """Turn a collaborator-supplied price into Money or raise ValidationException."""
    if isinstance(value, Money):
        return value
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationException("'price' is required", field="price")
    try:
        return Money(value, currency)
    except ValueError as exc:
        raise ValidationException(str(exc), field="price", value=value) from exc


@dataclass(eq=False)
class Product(TrackedEntity):
    """
    A product whose stock level is tracked on the supply board.

    Operators may correct the stock level freely, so any status can follow
    any other. Within a status, products are listed by last status change.
    """

    status_machine = PRODUCT_STATUS_MACHINE
    entity_type = "Product"

    name: str = ""
    price: Money = field(default_factory=lambda: Money(Decimal('0')))

    def __post_init__(self):
        super().__post_init__()
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationException("Product name is required", "name", self.name)
        self.price = parse_price(self.price)

    def _status_changed_event(self, old_status: StockStatus) -> ProductStatusChanged:
        return ProductStatusChanged(
            product_id=self.id,
            old_status=old_status.value,
            new_status=self.status.value,
        )

    @classmethod
    def from_fields(cls, fields: Mapping[str, Any], *, entity_id: str, now: datetime) -> Product:
        """
        Build a product from form fields.

        ``status`` is optional and defaults to sufficient stock;
        ``currency`` is optional and defaults to TWD.
        """
        name = required_text(fields, 'name')
        price = parse_price(fields.get('price'), fields.get('currency') or "TWD")
        status = fields.get('status')
        product = cls(
            id=entity_id,
            created_at=now,
            name=name,
            price=price,
            status=cls.status_machine.creation_status if status is None else status,
        )
        product.add_domain_event(ProductCreated(
            product_id=product.id,
            name=product.name,
            status=product.status.value,
            price=str(product.price),
        ))
        return product
