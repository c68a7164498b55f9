"""Domain errors.

Errors are values, not exceptions: factories and workflow stages return
them inside a ``Failure``. The workflow boundary reports exactly one
``PlaceOrderError`` variant per failed run.
"""

from dataclasses import dataclass
from typing import Any, ClassVar


# ============================================================================
# Stage Errors
# ============================================================================


@dataclass(frozen=True)
class ValidationError:
    """A single field that failed validation.

    Attributes:
        field_name: Name or path of the offending input field.
        description: Human-readable reason.
    """

    field_name: str
    description: str

    def to_dict(self) -> dict[str, Any]:
        """Convert to error detail dictionary."""
        return {"field": self.field_name, "message": self.description}


@dataclass(frozen=True)
class PricingError:
    """Raised by the pricing stage when an order cannot be priced."""

    message: str


@dataclass(frozen=True)
class ServiceInfo:
    """Identifies an external collaborator.

    Attributes:
        name: Service name (e.g., "AddressCheckingService").
        endpoint: Where the service lives.
    """

    name: str
    endpoint: str


@dataclass(frozen=True)
class RemoteServiceError:
    """A collaborator call failed.

    Attributes:
        service: The failing collaborator.
        cause: Description of the underlying failure.
    """

    service: ServiceInfo
    cause: str

    def __str__(self) -> str:
        return f"{self.service.name} ({self.service.endpoint}): {self.cause}"


# ============================================================================
# Workflow Boundary Errors
# ============================================================================


@dataclass(frozen=True)
class Validation:
    """One or more order fields failed validation."""

    errors: tuple[ValidationError, ...]

    error_code: ClassVar[str] = "VALIDATION_ERROR"

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Validation error requires at least one field error")

    @property
    def message(self) -> str:
        return f"Order failed validation with {len(self.errors)} error(s)"

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "details": [error.to_dict() for error in self.errors],
        }


@dataclass(frozen=True)
class Pricing:
    """The order could not be priced."""

    error: PricingError

    error_code: ClassVar[str] = "PRICING_ERROR"

    @property
    def message(self) -> str:
        return self.error.message

    def to_dict(self) -> dict[str, Any]:
        return {"message": self.message, "details": []}


@dataclass(frozen=True)
class RemoteService:
    """A collaborator needed to place the order failed."""

    error: RemoteServiceError

    error_code: ClassVar[str] = "REMOTE_SERVICE_ERROR"

    @property
    def message(self) -> str:
        return str(self.error)

    def to_dict(self) -> dict[str, Any]:
        return {
            "message": self.message,
            "details": [
                {"field": "service", "message": self.error.service.name},
            ],
        }


PlaceOrderError = Validation | Pricing | RemoteService
