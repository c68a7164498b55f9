"""Pricing stage.

Prices each validated line (unit price x quantity) and totals the order.
"""

import math

import structlog
from returns.pipeline import is_successful
from returns.result import Failure, Result

from order_taking.application.ports import GetProductPrice, service_exception_adapter
from order_taking.domain.errors import Pricing, PricingError, ServiceInfo
from order_taking.domain.order import (
    PricedOrder,
    PricedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
)
from order_taking.domain.result import sequence
from order_taking.domain.value_objects import BillingAmount, to_float

logger = structlog.get_logger()

DEFAULT_PRICING_SERVICE = ServiceInfo(name="ProductPricing", endpoint="in-process")


def price_order_line(
    get_product_price: GetProductPrice,
    line: ValidatedOrderLine,
) -> Result[PricedOrderLine, PricingError]:
    """Price a single order line.

    The quantity is truncated to an integer multiplier for both unit and
    kilogram quantities.

    Args:
        get_product_price: Unit price lookup.
        line: Validated order line.

    Returns:
        Success with the priced line, or Failure with a PricingError.
    """
    lookup = service_exception_adapter(DEFAULT_PRICING_SERVICE, get_product_price)
    quantity = to_float(line.quantity)
    if not math.isfinite(quantity):
        return Failure(PricingError(f"Cannot price line {line.order_line_id}: quantity {quantity}"))
    multiplier = int(quantity)

    return (
        lookup(line.product_code)
        .alt(
            lambda error: PricingError(
                f"Price lookup failed for {line.product_code}: {error.cause}"
            )
        )
        .bind(
            lambda price: price.multiply(multiplier).alt(
                lambda error: PricingError(
                    f"Invalid price for line {line.order_line_id}: {error.description}"
                )
            )
        )
        .map(
            lambda line_price: PricedOrderLine(
                order_line_id=line.order_line_id,
                product_code=line.product_code,
                quantity=line.quantity,
                line_price=line_price,
            )
        )
    )


def price_order(
    get_product_price: GetProductPrice,
    order: ValidatedOrder,
) -> Result[PricedOrder, PricingError]:
    """Price every line and compute the amount to bill.

    Args:
        get_product_price: Unit price lookup.
        order: Validated order.

    Returns:
        Success with the PricedOrder, or Failure with the first PricingError.
    """
    priced_lines = sequence(price_order_line(get_product_price, line) for line in order.lines)

    def build(lines: tuple[PricedOrderLine, ...]) -> Result[PricedOrder, PricingError]:
        amount_to_bill = BillingAmount.sum_prices(line.line_price for line in lines)
        return amount_to_bill.alt(lambda error: PricingError(error.description)).map(
            lambda amount: PricedOrder(
                order_id=order.order_id,
                customer_info=order.customer_info,
                shipping_address=order.shipping_address,
                billing_address=order.billing_address,
                lines=lines,
                amount_to_bill=amount,
            )
        )

    result = priced_lines.alt(lambda errors: errors[0]).bind(build)
    if not is_successful(result):
        logger.warning(
            "Order pricing failed",
            order_id=str(order.order_id),
            error=result.failure().message,
        )
    return result


def price_order_adapted(
    get_product_price: GetProductPrice,
    order: ValidatedOrder,
) -> Result[PricedOrder, Pricing]:
    """Price an order, tagging failures as workflow ``Pricing`` errors."""
    return price_order(get_product_price, order).alt(Pricing)
