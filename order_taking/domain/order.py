"""Order types for each stage of the place-order workflow.

Data flows strictly forward:
    UnvalidatedOrder -> ValidatedOrder -> PricedOrder -> events

Each stage builds a new immutable structure; nothing is updated in place.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from order_taking.domain.value_objects import (
    Address,
    BillingAmount,
    CustomerInfo,
    EmailAddress,
    OrderId,
    OrderLineId,
    OrderQuantity,
    Price,
    ProductCode,
)


# ============================================================================
# Unvalidated Input
# ============================================================================


@dataclass(frozen=True)
class UnvalidatedCustomerInfo:
    """Raw customer information as received."""

    first_name: str
    last_name: str
    email_address: str


UnvalidatedAddress = str


@dataclass(frozen=True)
class UnvalidatedOrderLine:
    """Raw order line as received."""

    order_line_id: str
    product_code: str
    quantity: float


@dataclass(frozen=True)
class UnvalidatedOrder:
    """Untrusted order. Nothing here has been checked."""

    order_id: str
    customer_info: UnvalidatedCustomerInfo
    shipping_address: UnvalidatedAddress
    billing_address: UnvalidatedAddress
    lines: tuple[UnvalidatedOrderLine, ...] = ()


@dataclass(frozen=True)
class PlaceOrderCommand:
    """Request to place an order.

    Attributes:
        data: The order to place.
        user_id: Who submitted the order.
        timestamp: When the order was submitted.
        request_id: Correlation ID of the request that carried the order.
    """

    data: UnvalidatedOrder
    user_id: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    request_id: str | None = None


@dataclass(frozen=True)
class CheckedAddress:
    """Address as resolved by the address-checking service. Not yet validated."""

    address_line1: str
    city: str
    zip_code: str
    address_line2: str | None = None
    address_line3: str | None = None
    address_line4: str | None = None


# ============================================================================
# Validated Order
# ============================================================================


@dataclass(frozen=True)
class ValidatedOrderLine:
    """Order line whose quantity matches its product code's unit."""

    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity


@dataclass(frozen=True)
class ValidatedOrder:
    """Order with every field validated."""

    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    lines: tuple[ValidatedOrderLine, ...]


# ============================================================================
# Priced Order
# ============================================================================


@dataclass(frozen=True)
class PricedOrderLine:
    """Validated order line with its computed price."""

    order_line_id: OrderLineId
    product_code: ProductCode
    quantity: OrderQuantity
    line_price: Price


@dataclass(frozen=True)
class PricedOrder:
    """Validated order with line prices and the amount to bill.

    The amount to bill always equals the sum of the line prices.
    """

    order_id: OrderId
    customer_info: CustomerInfo
    shipping_address: Address
    billing_address: Address
    lines: tuple[PricedOrderLine, ...]
    amount_to_bill: BillingAmount

    def __post_init__(self) -> None:
        total = sum(line.line_price.amount for line in self.lines)
        if total != self.amount_to_bill.amount:
            raise ValueError(
                f"Amount to bill {self.amount_to_bill.amount} does not match "
                f"sum of line prices {total}"
            )


# ============================================================================
# Acknowledgment
# ============================================================================


@dataclass(frozen=True)
class HtmlString:
    """Rendered letter content."""

    value: str


@dataclass(frozen=True)
class OrderAcknowledgment:
    """Letter to send to the customer."""

    email_address: EmailAddress
    letter: HtmlString


class SendResult(str, Enum):
    """Outcome of sending an acknowledgment."""

    SENT = "sent"
    NOT_SENT = "not_sent"


@dataclass(frozen=True)
class OrderAcknowledgmentSent:
    """Record that an acknowledgment went out."""

    order_id: OrderId
    email_address: EmailAddress
