"""Tests для Order aggregate.

Order - aggregate root: state machine, items, total, pending events.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from clean_ddd.domain.ordering import (
    CustomerId,
    EmptyOrderError,
    InvalidOrderStateError,
    Order,
    OrderCancelled,
    OrderConfirmed,
    OrderCreated,
    OrderDelivered,
    OrderId,
    OrderItemAdded,
    OrderItemNotFoundError,
    OrderItemRemoved,
    OrderShipped,
    OrderStatus,
    ProductId,
    ShippingAddressRequiredError,
    ShippingAddressSet,
)
from clean_ddd.domain.shared import (
    CurrencyMismatchError,
    InvalidQuantityError,
    InvalidStateTransition,
    Money,
    ValidationError,
)


def usd(amount: str) -> Money:
    return Money(Decimal(amount), "USD")


def shipped(order: Order) -> Order:
    order.ship("TRK-1")
    order.clear_pending_events()
    return order


class TestOrderCreation:
    def test_create_starts_in_draft_with_created_event(self):
        order = Order.create(OrderId("o-1"), CustomerId("c-1"), "usd")

        assert order.status == OrderStatus.DRAFT
        assert order.lines == ()
        assert order.currency == "USD"
        assert order.version == 0

        events = order.pending_events()
        assert len(events) == 1
        assert isinstance(events[0], OrderCreated)
        assert events[0].aggregate_id == "o-1"
        assert events[0].customer_id == "c-1"

    def test_reconstitute_has_no_pending_events(self):
        order = Order.reconstitute(
            id=OrderId("o-1"),
            customer_id=CustomerId("c-1"),
            currency="USD",
            status=OrderStatus.CONFIRMED,
            items=[],
            shipping_address=None,
            tracking_number=None,
            cancellation_reason=None,
            created_at=datetime.now(timezone.utc),
            version=3,
        )

        assert order.pending_events() == ()
        assert order.status == OrderStatus.CONFIRMED
        assert order.version == 3


class TestOrderItems:
    def test_add_item_appends_line(self, draft_order):
        draft_order.add_item(ProductId("p-1"), usd("10"), 2)

        assert draft_order.item_count == 1
        line = draft_order.lines[0]
        assert line.product_id == ProductId("p-1")
        assert line.quantity.value == 2

        (event,) = draft_order.pending_events()
        assert isinstance(event, OrderItemAdded)
        assert event.quantity == 2
        assert event.line_quantity == 2

    def test_add_same_product_merges_quantity(self, draft_order):
        """Test: 2 + 3 того самого product → один рядок з quantity 5."""
        draft_order.add_item(ProductId("p-1"), usd("10"), 2)
        draft_order.add_item(ProductId("p-1"), usd("10"), 3)

        assert draft_order.item_count == 1
        assert draft_order.lines[0].quantity.value == 5

        events = draft_order.pending_events()
        assert len(events) == 2
        assert events[-1].quantity == 3
        assert events[-1].line_quantity == 5

    @pytest.mark.parametrize("quantity", [0, -3])
    def test_add_item_with_non_positive_quantity_rejected(self, draft_order, quantity):
        with pytest.raises(InvalidQuantityError):
            draft_order.add_item(ProductId("p-1"), usd("10"), quantity)

        assert draft_order.lines == ()
        assert draft_order.pending_events() == ()

    def test_add_item_rejects_non_money_price(self, draft_order):
        with pytest.raises(ValidationError):
            draft_order.add_item(ProductId("p-1"), Decimal("10"), 1)  # type: ignore[arg-type]

    def test_add_item_allowed_after_confirm(self, confirmed_order):
        confirmed_order.add_item(ProductId("p-2"), usd("1"), 1)

        assert confirmed_order.item_count == 2

    @pytest.mark.parametrize("finish", ["ship", "deliver", "cancel"])
    def test_add_item_rejected_in_closed_states(self, confirmed_order, finish):
        if finish == "cancel":
            confirmed_order.cancel("customer request")
        else:
            shipped(confirmed_order)
            if finish == "deliver":
                confirmed_order.deliver()
        confirmed_order.clear_pending_events()
        lines_before = confirmed_order.lines

        with pytest.raises(InvalidOrderStateError):
            confirmed_order.add_item(ProductId("p-2"), usd("1"), 1)

        assert confirmed_order.lines == lines_before
        assert confirmed_order.pending_events() == ()

    def test_remove_item(self, draft_order):
        draft_order.add_item(ProductId("p-1"), usd("10"), 2)
        draft_order.clear_pending_events()

        draft_order.remove_item(ProductId("p-1"))

        assert draft_order.lines == ()
        (event,) = draft_order.pending_events()
        assert isinstance(event, OrderItemRemoved)
        assert event.quantity == 2

    def test_remove_missing_item_rejected(self, draft_order):
        with pytest.raises(OrderItemNotFoundError):
            draft_order.remove_item(ProductId("missing"))

        assert draft_order.pending_events() == ()

    def test_remove_item_rejected_after_ship(self, confirmed_order):
        shipped(confirmed_order)

        with pytest.raises(InvalidOrderStateError):
            confirmed_order.remove_item(ProductId("p-1"))

    def test_lines_are_snapshots(self, draft_order):
        draft_order.add_item(ProductId("p-1"), usd("10"), 2)
        snapshot = draft_order.lines

        draft_order.add_item(ProductId("p-1"), usd("10"), 1)

        assert snapshot[0].quantity.value == 2
        assert draft_order.lines[0].quantity.value == 3


class TestOrderTotal:
    def test_total_is_sum_of_lines(self, draft_order):
        draft_order.add_item(ProductId("p-1"), usd("10"), 3)
        draft_order.add_item(ProductId("p-2"), usd("7.50"), 2)

        assert draft_order.total == usd("45")

    def test_total_of_empty_order_is_zero(self, draft_order):
        assert draft_order.total == Money.zero("USD")

    def test_mixed_currencies_fail_on_total(self, draft_order, address):
        draft_order.add_item(ProductId("p-1"), usd("10"), 1)
        draft_order.add_item(ProductId("p-2"), Money(Decimal("5"), "EUR"), 1)
        draft_order.set_shipping_address(address)
        draft_order.clear_pending_events()

        with pytest.raises(CurrencyMismatchError):
            draft_order.confirm()

        assert draft_order.status == OrderStatus.DRAFT
        assert draft_order.pending_events() == ()


class TestOrderConfirm:
    def test_confirm_emits_total(self, draft_order, address):
        draft_order.add_item(ProductId("p-1"), usd("10"), 3)
        draft_order.add_item(ProductId("p-2"), usd("7.50"), 2)
        draft_order.set_shipping_address(address)
        draft_order.clear_pending_events()

        draft_order.confirm()

        assert draft_order.status == OrderStatus.CONFIRMED
        (event,) = draft_order.pending_events()
        assert isinstance(event, OrderConfirmed)
        assert event.total == usd("45")
        assert event.item_count == 2

    def test_confirm_empty_order_rejected_without_changes(self, draft_order, address):
        draft_order.set_shipping_address(address)
        events_before = draft_order.pending_events()

        with pytest.raises(EmptyOrderError):
            draft_order.confirm()

        assert draft_order.status == OrderStatus.DRAFT
        assert draft_order.pending_events() == events_before

    def test_confirm_without_address_rejected(self, draft_order):
        draft_order.add_item(ProductId("p-1"), usd("10"), 1)

        with pytest.raises(ShippingAddressRequiredError):
            draft_order.confirm()

        assert draft_order.status == OrderStatus.DRAFT

    def test_confirm_twice_rejected(self, confirmed_order):
        with pytest.raises(InvalidOrderStateError):
            confirmed_order.confirm()

    def test_shipping_address_only_in_draft(self, confirmed_order, address):
        with pytest.raises(InvalidOrderStateError):
            confirmed_order.set_shipping_address(address)

    def test_set_shipping_address_event(self, draft_order, address):
        draft_order.set_shipping_address(address)

        assert draft_order.shipping_address == address
        (event,) = draft_order.pending_events()
        assert isinstance(event, ShippingAddressSet)
        assert event.address.country == "UA"


class TestOrderFulfilment:
    def test_ship(self, confirmed_order):
        confirmed_order.ship("  TRK-42 ")

        assert confirmed_order.status == OrderStatus.SHIPPED
        assert confirmed_order.tracking_number == "TRK-42"
        (event,) = confirmed_order.pending_events()
        assert isinstance(event, OrderShipped)
        assert event.tracking_number == "TRK-42"

    def test_ship_draft_rejected(self, draft_order):
        with pytest.raises(InvalidOrderStateError):
            draft_order.ship("TRK-1")

    def test_ship_requires_tracking_number(self, confirmed_order):
        with pytest.raises(ValidationError):
            confirmed_order.ship("  ")

        assert confirmed_order.status == OrderStatus.CONFIRMED

    def test_deliver(self, confirmed_order):
        shipped(confirmed_order)

        confirmed_order.deliver()

        assert confirmed_order.status == OrderStatus.DELIVERED
        assert confirmed_order.is_terminal
        (event,) = confirmed_order.pending_events()
        assert isinstance(event, OrderDelivered)

    def test_deliver_before_ship_rejected(self, confirmed_order):
        with pytest.raises(InvalidOrderStateError):
            confirmed_order.deliver()


class TestOrderCancel:
    def test_cancel_draft(self, draft_order):
        draft_order.cancel("changed mind")

        assert draft_order.status == OrderStatus.CANCELLED
        assert draft_order.cancellation_reason == "changed mind"
        (event,) = draft_order.pending_events()
        assert isinstance(event, OrderCancelled)
        assert event.previous_status == "draft"

    def test_cancel_confirmed(self, confirmed_order):
        confirmed_order.cancel("out of stock")

        assert confirmed_order.status == OrderStatus.CANCELLED
        assert confirmed_order.pending_events()[0].previous_status == "confirmed"

    @pytest.mark.parametrize("deliver", [False, True])
    def test_cancel_after_ship_rejected_without_changes(self, confirmed_order, deliver):
        shipped(confirmed_order)
        if deliver:
            confirmed_order.deliver()
            confirmed_order.clear_pending_events()
        status_before = confirmed_order.status

        with pytest.raises(InvalidOrderStateError):
            confirmed_order.cancel("too late")

        assert confirmed_order.status == status_before
        assert confirmed_order.cancellation_reason is None
        assert confirmed_order.pending_events() == ()

    def test_cancel_twice_rejected(self, draft_order):
        draft_order.cancel("first")

        with pytest.raises(InvalidStateTransition):
            draft_order.cancel("second")

        assert draft_order.cancellation_reason == "first"


class TestOrderPendingEvents:
    def test_pending_events_read_is_idempotent(self, draft_order):
        draft_order.add_item(ProductId("p-1"), usd("10"), 1)

        assert draft_order.pending_events() == draft_order.pending_events()
        assert len(draft_order.pending_events()) == 1

    def test_clear_pending_events(self, draft_order):
        draft_order.add_item(ProductId("p-1"), usd("10"), 1)

        draft_order.clear_pending_events()

        assert draft_order.pending_events() == ()

    def test_one_event_per_successful_mutation(self, address):
        order = Order.create(OrderId("o-9"), CustomerId("c-9"), "USD")
        order.add_item(ProductId("p-1"), usd("1"), 1)
        order.set_shipping_address(address)
        order.confirm()
        order.ship("TRK")
        order.deliver()

        kinds = [event.kind for event in order.pending_events()]
        assert kinds == [
            "order.created",
            "order.item_added",
            "order.shipping_address_set",
            "order.confirmed",
            "order.shipped",
            "order.delivered",
        ]
