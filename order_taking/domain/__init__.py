"""Domain layer - value objects, order stages, domain events, errors.

This module exports the core domain building blocks:

- **Value Objects**: Validated, immutable values (String50, ZipCode, Price, typed IDs)
- **Order Types**: One type per workflow stage (UnvalidatedOrder, ValidatedOrder, PricedOrder)
- **Domain Events**: What a placed order produces (OrderPlaced, BillableOrderPlaced, AcknowledgmentSent)
- **Errors**: Error values returned inside ``Failure`` (Validation, Pricing, RemoteService)
- **sequence**: Accumulating traversal over independent results

Example usage:
    from order_taking.domain import String50, UnitQuantity

    String50.create("Alice", field_name="first_name")  # <Success: ...>
    UnitQuantity.create(0)  # <Failure: ValidationError(...)>
"""

# Base classes
from order_taking.domain.base import DomainEvent, ValueObject

# Errors
from order_taking.domain.errors import (
    PlaceOrderError,
    Pricing,
    PricingError,
    RemoteService,
    RemoteServiceError,
    ServiceInfo,
    Validation,
    ValidationError,
)

# Domain Events
from order_taking.domain.events import (
    AcknowledgmentSent,
    BillableOrderPlaced,
    OrderPlaced,
    PlaceOrderEvent,
)

# Order Types
from order_taking.domain.order import (
    CheckedAddress,
    HtmlString,
    OrderAcknowledgment,
    OrderAcknowledgmentSent,
    PlaceOrderCommand,
    PricedOrder,
    PricedOrderLine,
    SendResult,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
)

# Result combinators
from order_taking.domain.result import prepend, sequence

# Value Objects
from order_taking.domain.value_objects import (
    Address,
    BillingAmount,
    CustomerInfo,
    EmailAddress,
    GizmoCode,
    KilogramQuantity,
    OrderId,
    OrderLineId,
    OrderQuantity,
    PersonName,
    Price,
    ProductCode,
    String50,
    UnitQuantity,
    WidgetCode,
    ZipCode,
    create_product_code,
    to_float,
)

__all__ = [
    # Base
    "DomainEvent",
    "ValueObject",
    # Errors
    "PlaceOrderError",
    "Pricing",
    "PricingError",
    "RemoteService",
    "RemoteServiceError",
    "ServiceInfo",
    "Validation",
    "ValidationError",
    # Events
    "AcknowledgmentSent",
    "BillableOrderPlaced",
    "OrderPlaced",
    "PlaceOrderEvent",
    # Order Types
    "CheckedAddress",
    "HtmlString",
    "OrderAcknowledgment",
    "OrderAcknowledgmentSent",
    "PlaceOrderCommand",
    "PricedOrder",
    "PricedOrderLine",
    "SendResult",
    "UnvalidatedAddress",
    "UnvalidatedCustomerInfo",
    "UnvalidatedOrder",
    "UnvalidatedOrderLine",
    "ValidatedOrder",
    "ValidatedOrderLine",
    # Result combinators
    "prepend",
    "sequence",
    # Value Objects
    "Address",
    "BillingAmount",
    "CustomerInfo",
    "EmailAddress",
    "GizmoCode",
    "KilogramQuantity",
    "OrderId",
    "OrderLineId",
    "OrderQuantity",
    "PersonName",
    "Price",
    "ProductCode",
    "String50",
    "UnitQuantity",
    "WidgetCode",
    "ZipCode",
    "create_product_code",
    "to_float",
]
