"""Acknowledgment stage.

Renders the acknowledgment letter and tries to send it. A letter that
was not sent is a normal outcome, not an error: the stage just returns
no record.
"""

import structlog

from order_taking.application.ports import CreateAcknowledgmentLetter, SendAcknowledgment
from order_taking.domain.order import (
    OrderAcknowledgment,
    OrderAcknowledgmentSent,
    PricedOrder,
    SendResult,
)

logger = structlog.get_logger()


def acknowledge_order(
    create_letter: CreateAcknowledgmentLetter,
    send_acknowledgment: SendAcknowledgment,
    order: PricedOrder,
) -> OrderAcknowledgmentSent | None:
    """Render and send the order acknowledgment.

    Args:
        create_letter: Letter renderer.
        send_acknowledgment: Letter sender.
        order: The priced order.

    Returns:
        A sent record if the sender reported SENT, otherwise None. A
        renderer or sender that raises also gives None.
    """
    email_address = order.customer_info.email_address
    try:
        letter = create_letter(order)
    except Exception as exc:
        logger.warning(
            "Acknowledgment letter could not be rendered",
            order_id=str(order.order_id),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return None

    acknowledgment = OrderAcknowledgment(email_address=email_address, letter=letter)

    try:
        send_result = send_acknowledgment(acknowledgment)
    except Exception as exc:
        logger.warning(
            "Acknowledgment sender raised",
            order_id=str(order.order_id),
            error=str(exc),
            error_type=type(exc).__name__,
        )
        send_result = SendResult.NOT_SENT

    if send_result is not SendResult.SENT:
        logger.info("Acknowledgment not sent", order_id=str(order.order_id))
        return None

    return OrderAcknowledgmentSent(order_id=order.order_id, email_address=email_address)
