"""Request ID middleware.

Every request gets an ID, taken from ``X-Request-ID`` or generated. The
orders endpoint copies it into the ``PlaceOrderCommand`` so workflow
logs carry it.
"""

import time
from collections.abc import Awaitable, Callable
from uuid import uuid4

import structlog
from fastapi import FastAPI, Request, Response

logger = structlog.get_logger()

REQUEST_ID_HEADER = "X-Request-ID"


async def assign_request_id(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    """Store the request ID on ``request.state`` and echo it in the response."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid4())
    request.state.request_id = request_id

    start_time = time.perf_counter()
    response = await call_next(request)
    logger.info(
        "Request completed",
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )

    response.headers[REQUEST_ID_HEADER] = request_id
    return response


def setup_middleware(app: FastAPI) -> None:
    """Register custom middleware on the application."""
    app.middleware("http")(assign_request_id)
