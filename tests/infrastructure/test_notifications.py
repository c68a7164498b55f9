"""Tests for acknowledgment rendering and sending."""

from order_taking.application.pricing import price_order
from order_taking.domain import EmailAddress, HtmlString, OrderAcknowledgment, SendResult
from order_taking.infrastructure.notifications import (
    LoggingAcknowledgmentSender,
    render_acknowledgment_letter,
)


def test_letter_lists_order(make_validated_order, get_product_price) -> None:
    """The letter names the customer, lines and total."""
    order = price_order(get_product_price, make_validated_order([("W1234", 2)])).unwrap()

    letter = render_acknowledgment_letter(order).value

    assert "Ada Lovelace" in letter
    assert "ORD-001" in letter
    assert "W1234" in letter
    assert "Amount to bill: 20" in letter


def test_sender_reports_sent() -> None:
    """The logging sender always succeeds."""
    sender = LoggingAcknowledgmentSender("orders@example.com")
    acknowledgment = OrderAcknowledgment(
        email_address=EmailAddress("ada@example.com"),
        letter=HtmlString("<p>hi</p>"),
    )

    assert sender(acknowledgment) is SendResult.SENT
