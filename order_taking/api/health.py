"""Health check endpoints.

``/health`` only says the process is up. ``/ready`` says whether orders
can be placed: the catalog has products and the workflow is wired.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel

from order_taking.application.place_order import PlaceOrderWorkflow, get_place_order_workflow
from order_taking.infrastructure.catalog import ProductCatalog, get_product_catalog
from order_taking.infrastructure.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response schema."""

    status: str
    product_count: int
    address_service: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Check service health."""
    return HealthResponse(
        status="healthy",
        service="order-taking",
        version=settings.api_version,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ReadinessResponse}},
)
def readiness_check(
    response: Response,
    catalog: Annotated[ProductCatalog, Depends(get_product_catalog)],
    workflow: Annotated[PlaceOrderWorkflow, Depends(get_place_order_workflow)],
) -> ReadinessResponse:
    """Check whether the service can place orders.

    An empty catalog means every order line would be rejected, so the
    service reports itself not ready.

    Returns:
        Readiness status with the catalog size and address service in use.
    """
    ready = catalog.product_count > 0
    if not ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(
        status="ready" if ready else "not_ready",
        product_count=catalog.product_count,
        address_service=f"{workflow.address_service.name} ({workflow.address_service.endpoint})",
    )
