"""Address-checking collaborators.

``AddressCheckingClient`` calls a remote address-checking service over
HTTP. ``StaticAddressChecker`` resolves comma-separated addresses
locally and is used when no service URL is configured.
"""

from typing import Any

import httpx
import structlog
from returns.result import Failure, Result, Success

from order_taking.domain.errors import RemoteServiceError, ServiceInfo
from order_taking.domain.order import CheckedAddress, UnvalidatedAddress

logger = structlog.get_logger()


def _checked_address_from_json(data: dict[str, Any]) -> CheckedAddress:
    return CheckedAddress(
        address_line1=data["address_line1"],
        address_line2=data.get("address_line2"),
        address_line3=data.get("address_line3"),
        address_line4=data.get("address_line4"),
        city=data["city"],
        zip_code=data["zip_code"],
    )


class AddressCheckingClient:
    """HTTP client for the address-checking service.

    Posts the raw address to ``{base_url}/addresses/check`` and expects
    the resolved address fields back as JSON.
    """

    def __init__(
        self,
        service: ServiceInfo,
        timeout: float = 5.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            service: Service name and base URL.
            timeout: Request timeout in seconds.
            transport: Optional transport (used in tests).
        """
        self.service = service
        self._client = httpx.Client(
            base_url=service.endpoint,
            timeout=timeout,
            transport=transport,
        )

    def check_address_exists(
        self, address: UnvalidatedAddress
    ) -> Result[CheckedAddress, RemoteServiceError]:
        """Resolve a raw address.

        Args:
            address: Free-text address.

        Returns:
            Success with the resolved address, or Failure describing why
            the service could not resolve it.
        """
        try:
            response = self._client.post("/addresses/check", json={"address": address})
            response.raise_for_status()
            return Success(_checked_address_from_json(response.json()))
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Address service returned error",
                service=self.service.name,
                status_code=e.response.status_code,
            )
            return Failure(
                RemoteServiceError(
                    service=self.service,
                    cause=f"HTTP {e.response.status_code}",
                )
            )
        except httpx.HTTPError as e:
            logger.warning(
                "Address service unreachable",
                service=self.service.name,
                error=str(e),
                error_type=type(e).__name__,
            )
            cause = str(e) or type(e).__name__
            return Failure(RemoteServiceError(service=self.service, cause=cause))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(
                "Address service returned malformed response",
                service=self.service.name,
                error=str(e),
            )
            return Failure(
                RemoteServiceError(service=self.service, cause=f"Malformed response: {e}")
            )

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()


class StaticAddressChecker:
    """Resolves "line1[, line2[, line3[, line4]]], city, zip" addresses locally."""

    MIN_PARTS = 3
    MAX_PARTS = 6

    def __init__(self, service: ServiceInfo) -> None:
        self.service = service

    def check_address_exists(
        self, address: UnvalidatedAddress
    ) -> Result[CheckedAddress, RemoteServiceError]:
        parts = [part.strip() for part in address.split(",")]
        if not self.MIN_PARTS <= len(parts) <= self.MAX_PARTS:
            return Failure(
                RemoteServiceError(
                    service=self.service,
                    cause=f"Could not resolve address: {address!r}",
                )
            )
        *lines, city, zip_code = parts
        extra_lines = lines[1:] + [None] * (3 - len(lines[1:]))
        return Success(
            CheckedAddress(
                address_line1=lines[0],
                address_line2=extra_lines[0],
                address_line3=extra_lines[1],
                address_line4=extra_lines[2],
                city=city,
                zip_code=zip_code,
            )
        )
