"""API schemas for the order-taking API.

Pydantic models for request/response validation and serialization.
Request models are deliberately loose: field rules are enforced by the
domain factories so that every problem is reported in one response.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from order_taking.domain.events import PlaceOrderEvent
from order_taking.domain.order import (
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
)


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Place Order Schemas
# ============================================================================


class CustomerInfoSchema(BaseModel):
    """Customer details as submitted."""

    first_name: str = Field(default="", description="Customer first name")
    last_name: str = Field(default="", description="Customer last name")
    email_address: str = Field(default="", description="Customer email")


class OrderLineSchema(BaseModel):
    """Order line as submitted."""

    order_line_id: str = Field(..., description="Client-assigned line ID")
    product_code: str = Field(..., description="Widget (W...) or gizmo (G...) code")
    quantity: float = Field(..., description="Units for widgets, kilograms for gizmos")


class PlaceOrderRequest(BaseModel):
    """Request to place an order."""

    order_id: str = Field(..., description="Client-assigned order ID")
    customer_info: CustomerInfoSchema
    shipping_address: str = Field(..., description="Free-text shipping address")
    billing_address: str = Field(..., description="Free-text billing address")
    lines: list[OrderLineSchema] = Field(default_factory=list)

    def to_domain(self) -> UnvalidatedOrder:
        """Convert to the workflow's untrusted input type."""
        return UnvalidatedOrder(
            order_id=self.order_id,
            customer_info=UnvalidatedCustomerInfo(
                first_name=self.customer_info.first_name,
                last_name=self.customer_info.last_name,
                email_address=self.customer_info.email_address,
            ),
            shipping_address=self.shipping_address,
            billing_address=self.billing_address,
            lines=tuple(
                UnvalidatedOrderLine(
                    order_line_id=line.order_line_id,
                    product_code=line.product_code,
                    quantity=line.quantity,
                )
                for line in self.lines
            ),
        )


class EventSchema(BaseModel):
    """Serialized domain event."""

    event_id: str
    event_type: str
    occurred_at: datetime
    payload: dict[str, Any]

    @classmethod
    def from_event(cls, event: PlaceOrderEvent) -> "EventSchema":
        return cls(**event.to_dict())


class PlaceOrderResponse(BaseModel):
    """Events produced by a placed order."""

    order_id: str
    events: list[EventSchema]
