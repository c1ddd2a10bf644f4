from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from domain.orders.aggregates import Order
from domain.shared.events import OrderCreated, OrderStatusChanged, ProductCreated, ProductStatusChanged
from domain.shared.exceptions import StatusTransitionException, ValidationException
from domain.shared.value_objects import Money, OrderStatus, StockStatus
from domain.supply.aggregates import Product, parse_price

T0 = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class TestMoney:

    @pytest.mark.parametrize("raw, expected", [
        (10, Decimal('10')),
        ("12.5", Decimal('12.5')),
        (0, Decimal('0')),
        (Decimal('3.10'), Decimal('3.10')),
    ])
    def test_accepts_numbers(self, raw, expected):
        assert Money(raw).amount == expected

    @pytest.mark.parametrize("raw", ["abc", "", "NaN", "Infinity", True, None])
    def test_rejects_non_numeric(self, raw):
        with pytest.raises(ValueError):
            Money(raw)

    def test_rejects_negative(self):
        with pytest.raises(ValueError):
            Money(Decimal('-1'))

    def test_str(self):
        assert str(Money(Decimal('120'))) == "120.00 TWD"


class TestParsePrice:

    @pytest.mark.parametrize("raw", [None, "", "   ", "ten", -5, "-0.01"])
    def test_invalid_prices(self, raw):
        with pytest.raises(ValidationException) as exc_info:
            parse_price(raw)
        assert exc_info.value.details["field"] == "price"

    def test_currency_passed_through(self):
        assert parse_price("99", "JPY") == Money(Decimal('99'), "JPY")


class TestOrder:

    def test_from_fields_starts_new(self):
        order = Order.from_fields({'label': ' #orderAB12 '}, entity_id="1", now=T0)
        assert order.id == "1"
        assert order.label == "#orderAB12"
        assert order.status == OrderStatus.NEW
        assert order.timestamp == T0
        assert order.version == 1

    def test_from_fields_ignores_requested_status(self):
        order = Order.from_fields({'label': 'x', 'status': 'ready'}, entity_id="1", now=T0)
        assert order.status == OrderStatus.NEW

    @pytest.mark.parametrize("fields", [{}, {'label': ''}, {'label': '   '}, {'label': 42}])
    def test_label_required(self, fields):
        with pytest.raises(ValidationException) as exc_info:
            Order.from_fields(fields, entity_id="1", now=T0)
        assert exc_info.value.details["field"] == "label"

    def test_created_event(self):
        order = Order.from_fields({'label': '#a'}, entity_id="1", now=T0)
        events = order.clear_domain_events()
        assert events == [OrderCreated(order_id="1", label="#a", event_id=events[0].event_id,
                                       occurred_at=events[0].occurred_at)]
        assert order.domain_events == []

    def test_change_status_keeps_placement_time(self):
        order = Order.from_fields({'label': '#a'}, entity_id="1", now=T0)
        later = T0 + timedelta(minutes=5)
        order.change_status(OrderStatus.PREPARING, now=later)
        assert order.status == OrderStatus.PREPARING
        assert order.timestamp == T0
        assert order.updated_at == later
        assert order.version == 2
        event = order.clear_domain_events()[-1]
        assert isinstance(event, OrderStatusChanged)
        assert (event.old_status, event.new_status) == ("new", "preparing")

    def test_rejected_change_leaves_order_untouched(self):
        order = Order.from_fields({'label': '#a'}, entity_id="1", now=T0)
        order.clear_domain_events()
        with pytest.raises(StatusTransitionException):
            order.change_status(OrderStatus.READY, now=T0 + timedelta(minutes=1))
        assert order.status == OrderStatus.NEW
        assert order.updated_at == T0
        assert order.version == 1
        assert order.domain_events == []

    def test_identity_equality(self):
        a = Order(id="1", label="#a")
        b = Order(id="1", label="#b")
        assert a == b
        assert hash(a) == hash(b)
        assert a != Product(id="1", name="pie")


class TestProduct:

    def test_from_fields_with_status(self):
        product = Product.from_fields(
            {'name': '蘋果派', 'price': '120', 'status': '稀少'}, entity_id="1", now=T0
        )
        assert product.status == StockStatus.SCARCE
        assert product.price == Money(Decimal('120'))
        assert product.timestamp == T0
        assert isinstance(product.clear_domain_events()[0], ProductCreated)

    def test_from_fields_defaults_to_sufficient(self):
        product = Product.from_fields({'name': 'pie', 'price': 10}, entity_id="1", now=T0)
        assert product.status == StockStatus.SUFFICIENT

    @pytest.mark.parametrize("fields, field", [
        ({'name': '', 'price': 10}, 'name'),
        ({'price': 10}, 'name'),
        ({'name': 'pie'}, 'price'),
        ({'name': 'pie', 'price': 'ten'}, 'price'),
        ({'name': 'pie', 'price': -1}, 'price'),
        ({'name': 'pie', 'price': 10, 'currency': 840}, 'price'),
        ({'name': 'pie', 'price': 10, 'currency': 'TW'}, 'price'),
        ({'name': 'pie', 'price': 10, 'status': 'plenty'}, 'status'),
    ])
    def test_invalid_fields(self, fields, field):
        with pytest.raises(ValidationException) as exc_info:
            Product.from_fields(fields, entity_id="1", now=T0)
        assert exc_info.value.details["field"] == field

    def test_same_status_refreshes_timestamp(self):
        product = Product.from_fields({'name': 'pie', 'price': 10}, entity_id="1", now=T0)
        later = T0 + timedelta(seconds=30)
        product.change_status(StockStatus.SUFFICIENT, now=later)
        assert product.status == StockStatus.SUFFICIENT
        assert product.timestamp == later
        assert product.version == 2

    def test_timestamp_never_moves_backwards(self):
        product = Product.from_fields({'name': 'pie', 'price': 10}, entity_id="1", now=T0)
        product.change_status(StockStatus.SCARCE, now=T0 - timedelta(hours=1))
        assert product.timestamp == T0

    def test_status_changed_event(self):
        product = Product.from_fields({'name': 'pie', 'price': 10}, entity_id="1", now=T0)
        product.change_status("缺貨", now=T0)
        event = product.clear_domain_events()[-1]
        assert isinstance(event, ProductStatusChanged)
        assert (event.old_status, event.new_status) == ("sufficient", "out_of_stock")
