"""
Demo Data.

The boards as the shop floor first sees them: one order per stage and a
handful of products.
"""

from __future__ import annotations
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from domain.shared.base_entity import utcnow
from domain.shared.value_objects import Money, OrderStatus, StockStatus
from domain.orders.aggregates import Order
from domain.supply.aggregates import Product

from .trackers import BoardService


# (label, status, age in seconds)
DEMO_ORDERS = [
    ("#orderE78C", OrderStatus.NEW, 30),
    ("#order62A6", OrderStatus.PREPARING, 20),
    ("#order588D", OrderStatus.READY, 10),
]

# (name, status, age in seconds, price)
DEMO_PRODUCTS = [
    ("蘋果派", StockStatus.SUFFICIENT, 30, Decimal('120')),
    ("藍莓慕斯", StockStatus.SCARCE, 20, Decimal('150')),
    ("巧克力蛋糕", StockStatus.OUT_OF_STOCK, 10, Decimal('170')),
    ("草莓蛋糕", StockStatus.SCARCE, 40, Decimal('200')),
]


def seed_demo_data(service: BoardService, now: Optional[datetime] = None) -> BoardService:
    """Load the demo boards into ``service``; ids are "1", "2", ... per board."""
    now = now or utcnow()

    for position, (label, status, age) in enumerate(DEMO_ORDERS, start=1):
        stamp = now - timedelta(seconds=age)
        service.orders.store.add(Order(id=str(position), created_at=stamp, label=label, status=status))

    currency = service.supply.currency
    for position, (name, status, age, price) in enumerate(DEMO_PRODUCTS, start=1):
        stamp = now - timedelta(seconds=age)
        service.supply.store.add(Product(
            id=str(position),
            created_at=stamp,
            name=name,
            price=Money(price, currency),
            status=status,
        ))

    return service
