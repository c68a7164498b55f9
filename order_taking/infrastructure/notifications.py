"""Acknowledgment letter rendering and sending."""

from html import escape

import structlog

from order_taking.domain.order import HtmlString, OrderAcknowledgment, PricedOrder, SendResult

logger = structlog.get_logger()


def render_acknowledgment_letter(order: PricedOrder) -> HtmlString:
    """Render the acknowledgment letter for a priced order.

    Args:
        order: The priced order.

    Returns:
        HTML letter listing each line and the amount to bill.
    """
    rows = "".join(
        "<tr>"
        f"<td>{escape(str(line.order_line_id))}</td>"
        f"<td>{escape(str(line.product_code))}</td>"
        f"<td>{line.quantity.value}</td>"
        f"<td>{line.line_price.amount}</td>"
        "</tr>"
        for line in order.lines
    )
    name = escape(str(order.customer_info.name))
    return HtmlString(
        f"<p>Dear {name},</p>"
        f"<p>We have received your order {escape(str(order.order_id))}.</p>"
        f"<table>{rows}</table>"
        f"<p>Amount to bill: {order.amount_to_bill.amount}</p>"
        f"<p>Shipping to: {escape(order.shipping_address.format_single_line())}</p>"
    )


class LoggingAcknowledgmentSender:
    """Sender that records outgoing acknowledgments in the log.

    Stands in for a mail gateway; every letter counts as sent.
    """

    def __init__(self, sender: str) -> None:
        self.sender = sender

    def __call__(self, acknowledgment: OrderAcknowledgment) -> SendResult:
        logger.info(
            "Acknowledgment sent",
            sender=self.sender,
            recipient=str(acknowledgment.email_address),
            letter_length=len(acknowledgment.letter.value),
        )
        return SendResult.SENT
