"""Domain events produced by the place-order workflow.

Events are created once, at the end of a successful run, and handed to
the caller. They are immutable and never persisted by this package.
"""

from dataclasses import dataclass
from typing import Any, ClassVar

from order_taking.domain.base import DomainEvent
from order_taking.domain.order import PricedOrder
from order_taking.domain.value_objects import (
    Address,
    BillingAmount,
    EmailAddress,
    GizmoCode,
    KilogramQuantity,
    OrderId,
    OrderQuantity,
    ProductCode,
    UnitQuantity,
    WidgetCode,
)


# ============================================================================
# Serialization Helpers
# ============================================================================


def _address_to_dict(address: Address) -> dict[str, Any]:
    def optional(line: Any) -> str | None:
        return str(line) if line is not None else None

    return {
        "address_line1": str(address.address_line1),
        "address_line2": optional(address.address_line2),
        "address_line3": optional(address.address_line3),
        "address_line4": optional(address.address_line4),
        "city": str(address.city),
        "zip_code": str(address.zip_code),
    }


def _product_code_to_dict(code: ProductCode) -> dict[str, Any]:
    match code:
        case WidgetCode():
            return {"kind": "widget", "code": code.value}
        case GizmoCode():
            return {"kind": "gizmo", "code": code.value}


def _quantity_to_dict(quantity: OrderQuantity) -> dict[str, Any]:
    match quantity:
        case UnitQuantity():
            return {"kind": "unit", "value": quantity.value}
        case KilogramQuantity():
            return {"kind": "kilogram", "value": quantity.value}


def _priced_order_to_dict(order: PricedOrder) -> dict[str, Any]:
    customer = order.customer_info
    return {
        "order_id": str(order.order_id),
        "customer_info": {
            "first_name": str(customer.name.first_name),
            "last_name": str(customer.name.last_name),
            "email_address": str(customer.email_address),
        },
        "shipping_address": _address_to_dict(order.shipping_address),
        "billing_address": _address_to_dict(order.billing_address),
        "lines": [
            {
                "order_line_id": str(line.order_line_id),
                "product_code": _product_code_to_dict(line.product_code),
                "quantity": _quantity_to_dict(line.quantity),
                "line_price": line.line_price.amount,
            }
            for line in order.lines
        ],
        "amount_to_bill": order.amount_to_bill.amount,
    }


# ============================================================================
# Place Order Events
# ============================================================================


@dataclass(frozen=True)
class OrderPlaced(DomainEvent):
    """Event raised for every successfully placed order."""

    event_type: ClassVar[str] = "order.placed"

    order: PricedOrder

    def _payload(self) -> dict[str, Any]:
        """Get event-specific payload."""
        return _priced_order_to_dict(self.order)


@dataclass(frozen=True)
class BillableOrderPlaced(DomainEvent):
    """Event raised when a placed order has something to bill."""

    event_type: ClassVar[str] = "order.billable_placed"

    order_id: OrderId
    billing_address: Address
    amount_to_bill: BillingAmount

    def _payload(self) -> dict[str, Any]:
        """Get event-specific payload."""
        return {
            "order_id": str(self.order_id),
            "billing_address": _address_to_dict(self.billing_address),
            "amount_to_bill": self.amount_to_bill.amount,
        }


@dataclass(frozen=True)
class AcknowledgmentSent(DomainEvent):
    """Event raised when the customer acknowledgment was sent."""

    event_type: ClassVar[str] = "order.acknowledgment_sent"

    order_id: OrderId
    email_address: EmailAddress

    def _payload(self) -> dict[str, Any]:
        """Get event-specific payload."""
        return {
            "order_id": str(self.order_id),
            "email_address": str(self.email_address),
        }


PlaceOrderEvent = OrderPlaced | BillableOrderPlaced | AcknowledgmentSent

