"""Shared fixtures for workflow tests."""

from collections.abc import Callable
from unittest.mock import Mock

import pytest
from returns.result import Success

from order_taking.application.place_order import PlaceOrderWorkflow
from order_taking.domain import (
    Address,
    CheckedAddress,
    CustomerInfo,
    EmailAddress,
    HtmlString,
    OrderId,
    OrderLineId,
    PersonName,
    Price,
    SendResult,
    String50,
    UnitQuantity,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
    WidgetCode,
    ZipCode,
)

PRICES = {
    "W1234": 10,
    "W5678": 20,
    "G123": 5,
}


@pytest.fixture
def checked_address() -> CheckedAddress:
    """Address as the address service resolves it."""
    return CheckedAddress(
        address_line1="1 Main St",
        city="Springfield",
        zip_code="12345",
    )


@pytest.fixture
def make_order() -> Callable[..., UnvalidatedOrder]:
    """Factory for untrusted orders with sensible defaults."""

    def _make(
        lines: list[tuple[str, str, float]] | None = None,
        order_id: str = "ORD-001",
        first_name: str = "Ada",
        last_name: str = "Lovelace",
        email_address: str = "ada@example.com",
    ) -> UnvalidatedOrder:
        raw_lines = lines if lines is not None else [("L1", "W1234", 2), ("L2", "G123", 1.5)]
        return UnvalidatedOrder(
            order_id=order_id,
            customer_info=UnvalidatedCustomerInfo(
                first_name=first_name,
                last_name=last_name,
                email_address=email_address,
            ),
            shipping_address="1 Main St, Springfield, 12345",
            billing_address="1 Main St, Springfield, 12345",
            lines=tuple(
                UnvalidatedOrderLine(order_line_id=line_id, product_code=code, quantity=qty)
                for line_id, code, qty in raw_lines
            ),
        )

    return _make


@pytest.fixture
def address() -> Address:
    """A validated address."""
    return Address(
        address_line1=String50("1 Main St"),
        city=String50("Springfield"),
        zip_code=ZipCode("12345"),
    )


@pytest.fixture
def make_validated_order(address: Address) -> Callable[..., ValidatedOrder]:
    """Factory for validated widget orders from (code, units) pairs."""

    def _make(lines: list[tuple[str, int]]) -> ValidatedOrder:
        return ValidatedOrder(
            order_id=OrderId("ORD-001"),
            customer_info=CustomerInfo(
                name=PersonName(first_name=String50("Ada"), last_name=String50("Lovelace")),
                email_address=EmailAddress("ada@example.com"),
            ),
            shipping_address=address,
            billing_address=address,
            lines=tuple(
                ValidatedOrderLine(
                    order_line_id=OrderLineId(f"L{index}"),
                    product_code=WidgetCode(code),
                    quantity=UnitQuantity(units),
                )
                for index, (code, units) in enumerate(lines, start=1)
            ),
        )

    return _make


@pytest.fixture
def check_product_code_exists() -> Mock:
    """Catalog check that knows the codes in PRICES."""
    return Mock(side_effect=lambda code: code.value in PRICES)


@pytest.fixture
def check_address_exists(checked_address: CheckedAddress) -> Mock:
    """Address check that resolves every address."""
    return Mock(return_value=Success(checked_address))


@pytest.fixture
def get_product_price() -> Mock:
    """Price lookup backed by PRICES."""
    return Mock(side_effect=lambda code: Price(PRICES[code.value]))


@pytest.fixture
def create_letter() -> Mock:
    """Letter renderer."""
    return Mock(return_value=HtmlString("<p>Thanks for your order</p>"))


@pytest.fixture
def send_acknowledgment() -> Mock:
    """Sender that always succeeds."""
    return Mock(return_value=SendResult.SENT)


@pytest.fixture
def workflow(
    check_product_code_exists: Mock,
    check_address_exists: Mock,
    get_product_price: Mock,
    create_letter: Mock,
    send_acknowledgment: Mock,
) -> PlaceOrderWorkflow:
    """Workflow wired with mock collaborators."""
    return PlaceOrderWorkflow(
        check_product_code_exists=check_product_code_exists,
        check_address_exists=check_address_exists,
        get_product_price=get_product_price,
        create_acknowledgment_letter=create_letter,
        send_acknowledgment=send_acknowledgment,
    )
