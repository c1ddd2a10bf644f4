import pytest

from domain.board.status_machine import FreeFormPolicy, PipelinePolicy, StatusMachine
from domain.orders.aggregates import ORDER_STATUS_MACHINE
from domain.shared.exceptions import StatusTransitionException, ValidationException
from domain.shared.value_objects import OrderStatus, StockStatus
from domain.supply.aggregates import PRODUCT_STATUS_MACHINE


class TestOrderMachine:

    def test_display_order(self):
        assert ORDER_STATUS_MACHINE.statuses == (
            OrderStatus.NEW, OrderStatus.PREPARING, OrderStatus.READY
        )

    def test_initial_status_is_new(self):
        assert ORDER_STATUS_MACHINE.initial_status == OrderStatus.NEW
        assert ORDER_STATUS_MACHINE.creation_status == OrderStatus.NEW

    @pytest.mark.parametrize("current, target", [
        (OrderStatus.NEW, OrderStatus.PREPARING),
        (OrderStatus.PREPARING, OrderStatus.READY),
    ])
    def test_forward_steps_allowed(self, current, target):
        assert ORDER_STATUS_MACHINE.can_transition(current, target)

    @pytest.mark.parametrize("current, target", [
        (OrderStatus.NEW, OrderStatus.READY),
        (OrderStatus.NEW, OrderStatus.NEW),
        (OrderStatus.PREPARING, OrderStatus.NEW),
        (OrderStatus.READY, OrderStatus.NEW),
        (OrderStatus.READY, OrderStatus.PREPARING),
        (OrderStatus.READY, OrderStatus.READY),
    ])
    def test_other_moves_rejected(self, current, target):
        assert not ORDER_STATUS_MACHINE.can_transition(current, target)
        with pytest.raises(StatusTransitionException) as exc_info:
            ORDER_STATUS_MACHINE.check_transition("Order", current, target, entity_id="9")
        details = exc_info.value.details
        assert details["current_status"] == current.value
        assert details["target_status"] == target.value
        assert details["entity_id"] == "9"

    def test_ready_is_terminal(self):
        assert ORDER_STATUS_MACHINE.allowed_targets(OrderStatus.READY) == ()
        assert OrderStatus.READY.is_terminal

    def test_allowed_targets_is_single_successor(self):
        assert ORDER_STATUS_MACHINE.allowed_targets(OrderStatus.NEW) == (OrderStatus.PREPARING,)
        assert ORDER_STATUS_MACHINE.allowed_targets(OrderStatus.PREPARING) == (OrderStatus.READY,)


class TestProductMachine:

    def test_display_order(self):
        assert PRODUCT_STATUS_MACHINE.statuses == (
            StockStatus.LOW_STOCK,
            StockStatus.SCARCE,
            StockStatus.OUT_OF_STOCK,
            StockStatus.SUFFICIENT,
        )

    def test_no_fixed_initial_status(self):
        assert PRODUCT_STATUS_MACHINE.initial_status is None
        assert PRODUCT_STATUS_MACHINE.creation_status == StockStatus.SUFFICIENT

    def test_every_pair_allowed(self):
        for current in StockStatus:
            for target in StockStatus:
                assert PRODUCT_STATUS_MACHINE.can_transition(current, target)

    def test_allowed_targets_exclude_current(self):
        targets = PRODUCT_STATUS_MACHINE.allowed_targets(StockStatus.SCARCE)
        assert StockStatus.SCARCE not in targets
        assert set(targets) == set(StockStatus) - {StockStatus.SCARCE}


class TestParse:

    @pytest.mark.parametrize("raw", [
        OrderStatus.PREPARING, "preparing", "PREPARING", "Preparing", "準備中", "  preparing ",
    ])
    def test_order_status_spellings(self, raw):
        assert ORDER_STATUS_MACHINE.parse(raw) is OrderStatus.PREPARING

    @pytest.mark.parametrize("raw, expected", [
        ("剩食", StockStatus.LOW_STOCK),
        ("稀少", StockStatus.SCARCE),
        ("缺貨", StockStatus.OUT_OF_STOCK),
        ("充足", StockStatus.SUFFICIENT),
        ("out_of_stock", StockStatus.OUT_OF_STOCK),
    ])
    def test_stock_labels(self, raw, expected):
        assert PRODUCT_STATUS_MACHINE.parse(raw) is expected

    @pytest.mark.parametrize("raw", ["cooking", "", None, 3, OrderStatus.NEW])
    def test_undeclared_rejected(self, raw):
        with pytest.raises(ValidationException) as exc_info:
            PRODUCT_STATUS_MACHINE.parse(raw)
        assert exc_info.value.details["field"] == "status"


class TestMachineConstruction:

    def test_display_order_must_cover_enum(self):
        with pytest.raises(ValueError):
            StatusMachine(
                status_type=OrderStatus,
                statuses=(OrderStatus.NEW, OrderStatus.READY),
                policy=FreeFormPolicy(OrderStatus),
            )

    def test_display_order_rejects_duplicates(self):
        with pytest.raises(ValueError):
            StatusMachine(
                status_type=OrderStatus,
                statuses=(OrderStatus.NEW, OrderStatus.PREPARING, OrderStatus.READY, OrderStatus.NEW),
                policy=FreeFormPolicy(OrderStatus),
            )

    def test_policies_stay_distinct(self):
        assert isinstance(ORDER_STATUS_MACHINE.policy, PipelinePolicy)
        assert isinstance(PRODUCT_STATUS_MACHINE.policy, FreeFormPolicy)
