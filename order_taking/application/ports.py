"""Collaborator contracts for the place-order workflow.

The workflow only knows these narrow call signatures. Implementations
live in the infrastructure layer (or in tests).
"""

from collections.abc import Callable
from typing import Any, Protocol, TypeVar

import structlog
from returns.result import Failure, Result, Success

from order_taking.domain.errors import RemoteServiceError, ServiceInfo
from order_taking.domain.order import (
    CheckedAddress,
    HtmlString,
    OrderAcknowledgment,
    PricedOrder,
    SendResult,
    UnvalidatedAddress,
)
from order_taking.domain.value_objects import Price, ProductCode

logger = structlog.get_logger()

A = TypeVar("A")
T = TypeVar("T")


# ============================================================================
# Ports
# ============================================================================


class CheckProductCodeExists(Protocol):
    """Is this product code in the catalog?"""

    def __call__(self, product_code: ProductCode) -> bool: ...


class CheckAddressExists(Protocol):
    """Resolve a raw address, or report why the service could not."""

    def __call__(
        self, address: UnvalidatedAddress
    ) -> Result[CheckedAddress, RemoteServiceError]: ...


class GetProductPrice(Protocol):
    """Unit price of a product."""

    def __call__(self, product_code: ProductCode) -> Price: ...


class CreateAcknowledgmentLetter(Protocol):
    """Render the acknowledgment letter for a priced order."""

    def __call__(self, order: PricedOrder) -> HtmlString: ...


class SendAcknowledgment(Protocol):
    """Send an acknowledgment letter to the customer."""

    def __call__(self, acknowledgment: OrderAcknowledgment) -> SendResult: ...


# ============================================================================
# Adapters
# ============================================================================


def service_exception_adapter(
    service_info: ServiceInfo,
    service_fn: Callable[[A], T | Result[T, RemoteServiceError]],
) -> Callable[[A], Result[T, RemoteServiceError]]:
    """Wrap a collaborator so that exceptions come back as RemoteServiceError.

    The wrapped function may return a plain value or a Result; either way
    the adapter returns a Result.

    Args:
        service_info: Identifies the collaborator in reported errors.
        service_fn: The collaborator call.

    Returns:
        Function with the same argument returning a Result.
    """

    def adapted(arg: A) -> Result[T, RemoteServiceError]:
        try:
            outcome: Any = service_fn(arg)
        except Exception as exc:
            logger.warning(
                "Collaborator call failed",
                service=service_info.name,
                endpoint=service_info.endpoint,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            cause = str(exc) or type(exc).__name__
            return Failure(RemoteServiceError(service=service_info, cause=cause))
        if isinstance(outcome, Result):
            return outcome
        return Success(outcome)

    return adapted
