"""Tests for the pricing stage."""

from unittest.mock import Mock

from returns.pipeline import is_successful

from order_taking.application.pricing import price_order, price_order_adapted
from order_taking.domain import (
    GizmoCode,
    KilogramQuantity,
    OrderLineId,
    Price,
    Pricing,
    ValidatedOrder,
    ValidatedOrderLine,
)


class TestPriceOrder:
    """Tests for price_order."""

    def test_line_prices_and_total(self, make_validated_order, get_product_price) -> None:
        """Line price is unit price times quantity; total is their sum."""
        order = make_validated_order([("W1234", 2), ("W5678", 3)])

        priced = price_order(get_product_price, order).unwrap()

        assert [line.line_price for line in priced.lines] == [Price(20), Price(60)]
        assert priced.amount_to_bill.amount == 80

    def test_keeps_validated_fields(self, make_validated_order, get_product_price) -> None:
        """Pricing copies the validated order's fields unchanged."""
        order = make_validated_order([("W1234", 1)])

        priced = price_order(get_product_price, order).unwrap()

        assert priced.order_id == order.order_id
        assert priced.customer_info == order.customer_info
        assert priced.lines[0].quantity == order.lines[0].quantity

    def test_empty_order_totals_zero(self, make_validated_order, get_product_price) -> None:
        """No lines, nothing to bill."""
        priced = price_order(get_product_price, make_validated_order([])).unwrap()
        assert priced.amount_to_bill.amount == 0

    def test_weight_is_truncated(self, make_validated_order) -> None:
        """Kilogram quantities are truncated to a whole multiplier."""
        base = make_validated_order([])
        order = ValidatedOrder(
            order_id=base.order_id,
            customer_info=base.customer_info,
            shipping_address=base.shipping_address,
            billing_address=base.billing_address,
            lines=(
                ValidatedOrderLine(
                    order_line_id=OrderLineId("L1"),
                    product_code=GizmoCode("G123"),
                    quantity=KilogramQuantity(2.9),
                ),
            ),
        )

        priced = price_order(Mock(return_value=Price(100)), order).unwrap()

        assert priced.lines[0].line_price == Price(200)

    def test_negative_weight_is_pricing_error(self, make_validated_order) -> None:
        """A negative line price cannot be billed."""
        base = make_validated_order([])
        order = ValidatedOrder(
            order_id=base.order_id,
            customer_info=base.customer_info,
            shipping_address=base.shipping_address,
            billing_address=base.billing_address,
            lines=(
                ValidatedOrderLine(
                    order_line_id=OrderLineId("L1"),
                    product_code=GizmoCode("G123"),
                    quantity=KilogramQuantity(-3.0),
                ),
            ),
        )

        result = price_order(Mock(return_value=Price(100)), order)

        assert not is_successful(result)
        assert "L1" in result.failure().message

    def test_lookup_exception_is_pricing_error(self, make_validated_order) -> None:
        """A failing price lookup becomes a Pricing workflow error."""
        order = make_validated_order([("W1234", 1)])
        get_product_price = Mock(side_effect=KeyError("W1234"))

        error = price_order_adapted(get_product_price, order).failure()

        assert isinstance(error, Pricing)
        assert error.error_code == "PRICING_ERROR"
        assert "W1234" in error.message
