"""
Shared fixtures for the board tests.
"""

import random
from datetime import datetime, timedelta, timezone

import pytest

from application.services import BoardService, OrderTracker, SupplyTracker
from domain.board.store import EntityStore
from domain.orders.aggregates import Order
from domain.supply.aggregates import Product


class FakeClock:
    """Deterministic clock: each call returns the next tick."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.now = start or datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        current = self.now
        self.now += self.step
        return current

    def rewind(self, delta):
        self.now -= delta


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def order_store(clock):
    return EntityStore(Order, clock=clock)


@pytest.fixture
def product_store(clock):
    return EntityStore(Product, clock=clock)


@pytest.fixture
def order_tracker(clock):
    return OrderTracker(clock=clock, rng=random.Random(7))


@pytest.fixture
def supply_tracker(clock):
    return SupplyTracker(clock=clock)


@pytest.fixture
def service(order_tracker, supply_tracker):
    return BoardService(orders=order_tracker, supply=supply_tracker)
