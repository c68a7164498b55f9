"""Event assembly: what a placed order tells the rest of the system."""

from order_taking.domain.events import (
    AcknowledgmentSent,
    BillableOrderPlaced,
    OrderPlaced,
    PlaceOrderEvent,
)
from order_taking.domain.order import OrderAcknowledgmentSent, PricedOrder


def create_billing_event(order: PricedOrder) -> BillableOrderPlaced | None:
    """Create a billing event if there is anything to bill."""
    if not order.amount_to_bill.is_billable():
        return None
    return BillableOrderPlaced(
        order_id=order.order_id,
        billing_address=order.billing_address,
        amount_to_bill=order.amount_to_bill,
    )


def create_events(
    order: PricedOrder,
    acknowledgment_sent: OrderAcknowledgmentSent | None,
) -> list[PlaceOrderEvent]:
    """Build the events for a placed order.

    Order is fixed: OrderPlaced, then AcknowledgmentSent (if any), then
    BillableOrderPlaced (if any).

    Args:
        order: The priced order.
        acknowledgment_sent: Record from the acknowledgment stage, if sent.

    Returns:
        List of events.
    """
    events: list[PlaceOrderEvent] = [OrderPlaced(order=order)]
    if acknowledgment_sent is not None:
        events.append(
            AcknowledgmentSent(
                order_id=acknowledgment_sent.order_id,
                email_address=acknowledgment_sent.email_address,
            )
        )
    billing_event = create_billing_event(order)
    if billing_event is not None:
        events.append(billing_event)
    return events
