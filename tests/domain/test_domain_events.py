"""Tests for domain events."""

import pytest

from order_taking.domain import (
    AcknowledgmentSent,
    BillableOrderPlaced,
    BillingAmount,
    EmailAddress,
    GizmoCode,
    KilogramQuantity,
    OrderId,
    OrderLineId,
    OrderPlaced,
    Price,
    PricedOrder,
    PricedOrderLine,
    UnitQuantity,
    WidgetCode,
)


@pytest.fixture
def priced_order(make_validated_order) -> PricedOrder:
    """Priced order with one widget line and one gizmo line."""
    validated = make_validated_order([])
    return PricedOrder(
        order_id=validated.order_id,
        customer_info=validated.customer_info,
        shipping_address=validated.shipping_address,
        billing_address=validated.billing_address,
        lines=(
            PricedOrderLine(
                order_line_id=OrderLineId("L1"),
                product_code=WidgetCode("W1234"),
                quantity=UnitQuantity(2),
                line_price=Price(20),
            ),
            PricedOrderLine(
                order_line_id=OrderLineId("L2"),
                product_code=GizmoCode("G123"),
                quantity=KilogramQuantity(1.5),
                line_price=Price(5),
            ),
        ),
        amount_to_bill=BillingAmount(25),
    )


class TestPricedOrder:
    """Tests for the PricedOrder total invariant."""

    def test_total_must_match_lines(self, priced_order: PricedOrder) -> None:
        """A total that disagrees with the lines is rejected."""
        with pytest.raises(ValueError):
            PricedOrder(
                order_id=priced_order.order_id,
                customer_info=priced_order.customer_info,
                shipping_address=priced_order.shipping_address,
                billing_address=priced_order.billing_address,
                lines=priced_order.lines,
                amount_to_bill=BillingAmount(99),
            )


class TestEventSerialization:
    """Tests for event to_dict."""

    def test_order_placed_payload(self, priced_order: PricedOrder) -> None:
        """OrderPlaced carries the whole priced order."""
        data = OrderPlaced(order=priced_order).to_dict()

        assert data["event_type"] == "order.placed"
        payload = data["payload"]
        assert payload["order_id"] == "ORD-001"
        assert payload["amount_to_bill"] == 25
        assert payload["customer_info"]["email_address"] == "ada@example.com"
        assert payload["lines"][0]["product_code"] == {"kind": "widget", "code": "W1234"}
        assert payload["lines"][1]["quantity"] == {"kind": "kilogram", "value": 1.5}
        assert payload["shipping_address"]["zip_code"] == "12345"
        assert payload["shipping_address"]["address_line2"] is None

    def test_billable_order_placed_payload(self, priced_order: PricedOrder) -> None:
        """BillableOrderPlaced carries id, billing address and amount."""
        event = BillableOrderPlaced(
            order_id=priced_order.order_id,
            billing_address=priced_order.billing_address,
            amount_to_bill=priced_order.amount_to_bill,
        )
        data = event.to_dict()

        assert data["event_type"] == "order.billable_placed"
        assert data["payload"]["amount_to_bill"] == 25
        assert data["payload"]["billing_address"]["city"] == "Springfield"

    def test_acknowledgment_sent_payload(self) -> None:
        """AcknowledgmentSent carries id and recipient."""
        event = AcknowledgmentSent(
            order_id=OrderId("ORD-9"),
            email_address=EmailAddress("a@b.c"),
        )
        data = event.to_dict()

        assert data["event_type"] == "order.acknowledgment_sent"
        assert data["payload"] == {"order_id": "ORD-9", "email_address": "a@b.c"}
        assert data["event_id"]
        assert data["occurred_at"]

    def test_events_are_immutable(self) -> None:
        """Events cannot be changed after creation."""
        event = AcknowledgmentSent(order_id=OrderId("O"), email_address=EmailAddress("e"))
        with pytest.raises(AttributeError):
            event.order_id = OrderId("other")  # type: ignore
