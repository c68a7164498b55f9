"""Tests for event assembly."""

import pytest

from order_taking.application.event_assembly import create_billing_event, create_events
from order_taking.application.pricing import price_order
from order_taking.domain import (
    AcknowledgmentSent,
    BillableOrderPlaced,
    OrderAcknowledgmentSent,
    OrderPlaced,
    PricedOrder,
)


@pytest.fixture
def zero_total_order(make_validated_order, get_product_price) -> PricedOrder:
    """Priced order with nothing to bill."""
    return price_order(get_product_price, make_validated_order([])).unwrap()


@pytest.fixture
def billable_order(make_validated_order, get_product_price) -> PricedOrder:
    """Priced order totalling 80."""
    order = make_validated_order([("W1234", 2), ("W5678", 3)])
    return price_order(get_product_price, order).unwrap()


def _acknowledged(order: PricedOrder) -> OrderAcknowledgmentSent:
    return OrderAcknowledgmentSent(
        order_id=order.order_id,
        email_address=order.customer_info.email_address,
    )


class TestCreateBillingEvent:
    """Tests for create_billing_event."""

    def test_zero_total_is_not_billed(self, zero_total_order: PricedOrder) -> None:
        """An order totalling exactly zero is not billed."""
        assert create_billing_event(zero_total_order) is None

    def test_positive_total_is_billed(self, billable_order: PricedOrder) -> None:
        """A positive total is billed to the billing address."""
        event = create_billing_event(billable_order)

        assert event is not None
        assert event.amount_to_bill.amount == 80
        assert event.billing_address == billable_order.billing_address


class TestCreateEvents:
    """Tests for create_events."""

    def test_zero_total_with_acknowledgment(self, zero_total_order: PricedOrder) -> None:
        """Zero total plus acknowledgment: placed then acknowledged."""
        events = create_events(zero_total_order, _acknowledged(zero_total_order))

        assert [type(e) for e in events] == [OrderPlaced, AcknowledgmentSent]
        assert events[0].order == zero_total_order

    def test_billable_without_acknowledgment(self, billable_order: PricedOrder) -> None:
        """Positive total and no acknowledgment: placed then billable."""
        events = create_events(billable_order, None)

        assert [type(e) for e in events] == [OrderPlaced, BillableOrderPlaced]

    def test_all_three_in_fixed_order(self, billable_order: PricedOrder) -> None:
        """Acknowledgment comes before billing."""
        events = create_events(billable_order, _acknowledged(billable_order))

        assert [e.event_type for e in events] == [
            "order.placed",
            "order.acknowledgment_sent",
            "order.billable_placed",
        ]

    def test_only_order_placed(self, zero_total_order: PricedOrder) -> None:
        """Nothing billed and nothing sent: just the order."""
        assert [type(e) for e in create_events(zero_total_order, None)] == [OrderPlaced]
