"""Place-order workflow.

Composes the stages in order:
    validate -> price -> acknowledge -> create events

Validation and pricing failures stop the run and come back as a single
``PlaceOrderError``. The acknowledgment stage never fails the run.
"""

import structlog
from returns.pipeline import is_successful
from returns.result import Result

from order_taking.application.acknowledgment import acknowledge_order
from order_taking.application.event_assembly import create_events
from order_taking.application.ports import (
    CheckAddressExists,
    CheckProductCodeExists,
    CreateAcknowledgmentLetter,
    GetProductPrice,
    SendAcknowledgment,
)
from order_taking.application.pricing import price_order_adapted
from order_taking.application.validation import (
    DEFAULT_ADDRESS_SERVICE,
    DEFAULT_CATALOG_SERVICE,
    validate_order,
)
from order_taking.domain.errors import PlaceOrderError, ServiceInfo
from order_taking.domain.events import PlaceOrderEvent
from order_taking.domain.order import PlaceOrderCommand, PricedOrder, UnvalidatedOrder

logger = structlog.get_logger()


class PlaceOrderWorkflow:
    """Runs an untrusted order through the whole place-order pipeline.

    Collaborators are supplied once, at construction. Each call works on
    its own immutable values, so one instance can serve concurrent calls.
    """

    def __init__(
        self,
        check_product_code_exists: CheckProductCodeExists,
        check_address_exists: CheckAddressExists,
        get_product_price: GetProductPrice,
        create_acknowledgment_letter: CreateAcknowledgmentLetter,
        send_acknowledgment: SendAcknowledgment,
        address_service: ServiceInfo = DEFAULT_ADDRESS_SERVICE,
        catalog_service: ServiceInfo = DEFAULT_CATALOG_SERVICE,
    ) -> None:
        """Initialize the workflow.

        Args:
            check_product_code_exists: Catalog membership check.
            check_address_exists: Address resolution.
            get_product_price: Unit price lookup.
            create_acknowledgment_letter: Letter renderer.
            send_acknowledgment: Letter sender.
            address_service: Identifies the address service in errors.
            catalog_service: Identifies the catalog in errors.
        """
        self._check_product_code_exists = check_product_code_exists
        self._check_address_exists = check_address_exists
        self._get_product_price = get_product_price
        self._create_acknowledgment_letter = create_acknowledgment_letter
        self._send_acknowledgment = send_acknowledgment
        self._address_service = address_service
        self._catalog_service = catalog_service

    @property
    def address_service(self) -> ServiceInfo:
        """The address service named in remote errors."""
        return self._address_service

    def place_order(
        self, order: UnvalidatedOrder
    ) -> Result[list[PlaceOrderEvent], PlaceOrderError]:
        """Place an order.

        Args:
            order: The untrusted order.

        Returns:
            Success with the events, or Failure with exactly one
            PlaceOrderError.
        """
        log = logger.bind(order_id=order.order_id, line_count=len(order.lines))

        result = (
            validate_order(
                self._check_product_code_exists,
                self._check_address_exists,
                order,
                address_service=self._address_service,
                catalog_service=self._catalog_service,
            )
            .bind(lambda validated: price_order_adapted(self._get_product_price, validated))
            .map(self._acknowledge_and_create_events)
        )

        if is_successful(result):
            events = result.unwrap()
            log.info(
                "Order placed",
                event_types=[event.event_type for event in events],
            )
        else:
            error = result.failure()
            log.warning(
                "Order rejected",
                error_code=error.error_code,
                error=error.message,
            )
        return result

    def handle(
        self, command: PlaceOrderCommand
    ) -> Result[list[PlaceOrderEvent], PlaceOrderError]:
        """Place the order carried by a command.

        The submitter, submission time and request ID are bound to the log
        context for the duration of the run.

        Args:
            command: Order plus who submitted it and when.

        Returns:
            Same as ``place_order``.
        """
        context = {
            "user_id": command.user_id,
            "submitted_at": command.timestamp.isoformat(),
        }
        if command.request_id is not None:
            context["request_id"] = command.request_id
        with structlog.contextvars.bound_contextvars(**context):
            return self.place_order(command.data)

    def __call__(
        self, order: UnvalidatedOrder
    ) -> Result[list[PlaceOrderEvent], PlaceOrderError]:
        return self.place_order(order)

    def _acknowledge_and_create_events(self, order: PricedOrder) -> list[PlaceOrderEvent]:
        acknowledgment_sent = acknowledge_order(
            self._create_acknowledgment_letter,
            self._send_acknowledgment,
            order,
        )
        logger.debug(
            "Order priced",
            order_id=str(order.order_id),
            amount_to_bill=order.amount_to_bill.amount,
            acknowledged=acknowledgment_sent is not None,
        )
        return create_events(order, acknowledgment_sent)


# Global workflow instance
_place_order_workflow: PlaceOrderWorkflow | None = None


def get_place_order_workflow() -> PlaceOrderWorkflow:
    """Get the place-order workflow wired with infrastructure adapters.

    Uses the HTTP address-checking service when ``address_service_url``
    is configured, otherwise the offline checker.

    Returns:
        PlaceOrderWorkflow instance.
    """
    global _place_order_workflow
    if _place_order_workflow is None:
        from order_taking.infrastructure.address_client import (
            AddressCheckingClient,
            StaticAddressChecker,
        )
        from order_taking.infrastructure.catalog import get_product_catalog
        from order_taking.infrastructure.config import settings
        from order_taking.infrastructure.notifications import (
            LoggingAcknowledgmentSender,
            render_acknowledgment_letter,
        )

        catalog = get_product_catalog()
        if settings.address_service_url:
            address_service = ServiceInfo(
                name=settings.address_service_name,
                endpoint=settings.address_service_url,
            )
            address_checker: AddressCheckingClient | StaticAddressChecker = (
                AddressCheckingClient(
                    address_service,
                    timeout=settings.address_service_timeout_seconds,
                )
            )
        else:
            address_service = ServiceInfo(name=settings.address_service_name, endpoint="offline")
            address_checker = StaticAddressChecker(address_service)

        _place_order_workflow = PlaceOrderWorkflow(
            check_product_code_exists=catalog.check_product_code_exists,
            check_address_exists=address_checker.check_address_exists,
            get_product_price=catalog.get_product_price,
            create_acknowledgment_letter=render_acknowledgment_letter,
            send_acknowledgment=LoggingAcknowledgmentSender(settings.acknowledgment_sender),
            address_service=address_service,
        )
        logger.info(
            "Place-order workflow configured",
            address_service=address_service.name,
            address_endpoint=address_service.endpoint,
        )
    return _place_order_workflow
