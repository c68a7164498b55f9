"""Order validation stage.

Turns an ``UnvalidatedOrder`` into a ``ValidatedOrder``.

Stages short-circuit: a failed address lookup stops validation before
any order line is looked at. Within the lines, errors accumulate: every
offending line is reported in one ``Validation`` error.
"""

from collections.abc import Callable, Iterable

from returns.result import Failure, Result, Success

from order_taking.application.ports import (
    CheckAddressExists,
    CheckProductCodeExists,
    service_exception_adapter,
)
from order_taking.domain.errors import (
    PlaceOrderError,
    RemoteService,
    RemoteServiceError,
    ServiceInfo,
    Validation,
    ValidationError,
)
from order_taking.domain.order import (
    CheckedAddress,
    UnvalidatedAddress,
    UnvalidatedCustomerInfo,
    UnvalidatedOrder,
    UnvalidatedOrderLine,
    ValidatedOrder,
    ValidatedOrderLine,
)
from order_taking.domain.result import sequence
from order_taking.domain.value_objects import (
    Address,
    CustomerInfo,
    EmailAddress,
    GizmoCode,
    KilogramQuantity,
    OrderId,
    OrderLineId,
    OrderQuantity,
    PersonName,
    ProductCode,
    String50,
    UnitQuantity,
    WidgetCode,
    ZipCode,
    create_product_code,
)

DEFAULT_ADDRESS_SERVICE = ServiceInfo(
    name="AddressCheckingService",
    endpoint="https://address-checking.service/api",
)
DEFAULT_CATALOG_SERVICE = ServiceInfo(name="ProductCatalog", endpoint="in-process")

CheckCode = Callable[[ProductCode], Result[bool, RemoteServiceError]]
CheckAddress = Callable[[UnvalidatedAddress], Result[CheckedAddress, RemoteServiceError]]
LineError = ValidationError | RemoteServiceError


def _as_validation(error: ValidationError) -> PlaceOrderError:
    return Validation((error,))


# ============================================================================
# Customer and Address
# ============================================================================


def to_customer_info(
    customer: UnvalidatedCustomerInfo,
) -> Result[CustomerInfo, ValidationError]:
    """Validate customer name and email."""
    return Result.do(
        CustomerInfo(
            name=PersonName(first_name=first_name, last_name=last_name),
            email_address=email_address,
        )
        for first_name in String50.create(customer.first_name, "customer_info.first_name")
        for last_name in String50.create(customer.last_name, "customer_info.last_name")
        for email_address in EmailAddress.create(
            customer.email_address, "customer_info.email_address"
        )
    )


def to_address(checked: CheckedAddress, field_name: str) -> Result[Address, ValidationError]:
    """Validate the fields of a resolved address.

    Args:
        checked: Address as returned by the address-checking service.
        field_name: Prefix for reported field names.

    Returns:
        Success with the Address, or Failure naming the first bad field.
    """
    return Result.do(
        Address(
            address_line1=line1,
            address_line2=line2,
            address_line3=line3,
            address_line4=line4,
            city=city,
            zip_code=zip_code,
        )
        for line1 in String50.create(checked.address_line1, f"{field_name}.address_line1")
        for line2 in String50.create_option(checked.address_line2, f"{field_name}.address_line2")
        for line3 in String50.create_option(checked.address_line3, f"{field_name}.address_line3")
        for line4 in String50.create_option(checked.address_line4, f"{field_name}.address_line4")
        for city in String50.create(checked.city, f"{field_name}.city")
        for zip_code in ZipCode.create(checked.zip_code, f"{field_name}.zip_code")
    )


def resolve_address(
    check_address: CheckAddress,
    address: UnvalidatedAddress,
    field_name: str,
) -> Result[Address, PlaceOrderError]:
    """Resolve a raw address with the collaborator, then validate it.

    A collaborator failure is a ``RemoteService`` error; a bad resolved
    field is a ``Validation`` error.
    """
    return (
        check_address(address)
        .alt(RemoteService)
        .bind(lambda checked: to_address(checked, field_name).alt(_as_validation))
    )


# ============================================================================
# Order Lines
# ============================================================================


def to_product_code(
    check_code: CheckCode, product_code: str, field_name: str
) -> Result[ProductCode, LineError]:
    """Parse a product code and confirm it is in the catalog."""

    def must_exist(code: ProductCode) -> Result[ProductCode, LineError]:
        return check_code(code).bind(
            lambda exists: Success(code)
            if exists
            else Failure(ValidationError(field_name, f"Invalid product code: {product_code!r}"))
        )

    return create_product_code(product_code, field_name).bind(must_exist)


def to_order_quantity(
    product_code: ProductCode, quantity: float, field_name: str
) -> Result[OrderQuantity, ValidationError]:
    """Build the quantity variant required by the product code.

    Widgets are counted in whole units; gizmos are weighed in kilograms.
    """
    match product_code:
        case WidgetCode():
            if isinstance(quantity, bool) or not isinstance(quantity, (int, float)):
                return Failure(ValidationError(field_name, "Unit quantity must be a whole number"))
            if isinstance(quantity, float):
                if not quantity.is_integer():
                    return Failure(
                        ValidationError(field_name, "Unit quantity must be a whole number")
                    )
                quantity = int(quantity)
            return UnitQuantity.create(quantity, field_name)
        case GizmoCode():
            return KilogramQuantity.create(quantity, field_name)


def to_validated_order_line(
    check_code: CheckCode, line: UnvalidatedOrderLine, field_name: str
) -> Result[ValidatedOrderLine, LineError]:
    """Validate a single order line, stopping at its first bad field."""
    return Result.do(
        ValidatedOrderLine(
            order_line_id=order_line_id,
            product_code=product_code,
            quantity=quantity,
        )
        for order_line_id in OrderLineId.create(
            line.order_line_id, f"{field_name}.order_line_id"
        )
        for product_code in to_product_code(
            check_code, line.product_code, f"{field_name}.product_code"
        )
        for quantity in to_order_quantity(product_code, line.quantity, f"{field_name}.quantity")
    )


def _line_errors_to_place_order_error(errors: tuple[LineError, ...]) -> PlaceOrderError:
    # A failed collaborator outranks field errors.
    for error in errors:
        if isinstance(error, RemoteServiceError):
            return RemoteService(error)
    return Validation(tuple(e for e in errors if isinstance(e, ValidationError)))


def validate_lines(
    check_code: CheckCode, lines: Iterable[UnvalidatedOrderLine]
) -> Result[tuple[ValidatedOrderLine, ...], PlaceOrderError]:
    """Validate every line, collecting the errors of all bad lines."""
    return sequence(
        to_validated_order_line(check_code, line, f"lines[{index}]")
        for index, line in enumerate(lines)
    ).alt(_line_errors_to_place_order_error)


# ============================================================================
# Validate Order
# ============================================================================


def validate_order(
    check_product_code_exists: CheckProductCodeExists,
    check_address_exists: CheckAddressExists,
    order: UnvalidatedOrder,
    *,
    address_service: ServiceInfo = DEFAULT_ADDRESS_SERVICE,
    catalog_service: ServiceInfo = DEFAULT_CATALOG_SERVICE,
) -> Result[ValidatedOrder, PlaceOrderError]:
    """Validate an untrusted order.

    Steps run in order and stop at the first failing step:
    order id and customer info, shipping address, billing address, lines.

    Args:
        check_product_code_exists: Catalog lookup.
        check_address_exists: Address resolution.
        order: The untrusted order.
        address_service: Reported when address resolution fails.
        catalog_service: Reported when the catalog lookup fails.

    Returns:
        Success with the ValidatedOrder, or Failure with a PlaceOrderError.
    """
    check_address = service_exception_adapter(address_service, check_address_exists)
    check_code = service_exception_adapter(catalog_service, check_product_code_exists)

    result: Result[ValidatedOrder, PlaceOrderError] = Result.do(
        ValidatedOrder(
            order_id=order_id,
            customer_info=customer_info,
            shipping_address=shipping_address,
            billing_address=billing_address,
            lines=lines,
        )
        for order_id in OrderId.create(order.order_id).alt(_as_validation)
        for customer_info in to_customer_info(order.customer_info).alt(_as_validation)
        for shipping_address in resolve_address(
            check_address, order.shipping_address, "shipping_address"
        )
        for billing_address in resolve_address(
            check_address, order.billing_address, "billing_address"
        )
        for lines in validate_lines(check_code, order.lines)
    )
    return result
