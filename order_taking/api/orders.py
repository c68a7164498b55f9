"""Order API endpoints.

Provides:
- POST /orders - run the place-order workflow
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, status
from returns.pipeline import is_successful

from order_taking.api.schemas import (
    ErrorResponse,
    EventSchema,
    PlaceOrderRequest,
    PlaceOrderResponse,
)
from order_taking.application.place_order import (
    PlaceOrderWorkflow,
    get_place_order_workflow,
)
from order_taking.domain.errors import PlaceOrderError, Pricing, RemoteService, Validation
from order_taking.domain.order import PlaceOrderCommand

router = APIRouter(prefix="/orders", tags=["Orders"])


def error_status(error: PlaceOrderError) -> int:
    """Map a workflow error to an HTTP status code."""
    match error:
        case Validation() | Pricing():
            return status.HTTP_422_UNPROCESSABLE_ENTITY
        case RemoteService():
            return status.HTTP_502_BAD_GATEWAY


@router.post(
    "",
    response_model=PlaceOrderResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        422: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
    summary="Place an order",
    description="Validate, price and acknowledge an order, returning the resulting events.",
)
def place_order(
    order: PlaceOrderRequest,
    request: Request,
    workflow: Annotated[PlaceOrderWorkflow, Depends(get_place_order_workflow)],
    user_id: str = "anonymous",
) -> PlaceOrderResponse:
    """Place an order.

    Args:
        order: The order as submitted.
        request: The HTTP request, for its correlation ID.
        workflow: Place-order workflow.
        user_id: Who is placing the order.

    Returns:
        The events produced by the order.

    Raises:
        HTTPException: If the workflow rejects the order.
    """
    command = PlaceOrderCommand(
        data=order.to_domain(),
        user_id=user_id,
        request_id=getattr(request.state, "request_id", None),
    )
    result = workflow.handle(command)

    if not is_successful(result):
        error = result.failure()
        raise HTTPException(
            status_code=error_status(error),
            detail={"error_code": error.error_code, **error.to_dict()},
        )

    return PlaceOrderResponse(
        order_id=order.order_id,
        events=[EventSchema.from_event(event) for event in result.unwrap()],
    )
