"""Order-taking API main application module.

This module initializes the FastAPI application and configures
logging, middleware, routers, and exception handlers.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse

from order_taking.api.health import router as health_router
from order_taking.api.middleware import setup_middleware
from order_taking.api.orders import router as orders_router
from order_taking.application.place_order import get_place_order_workflow
from order_taking.infrastructure.config import settings
from order_taking.infrastructure.logging_config import configure_logging

configure_logging(settings)

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup.
    """
    logger.info(
        "Starting order-taking API",
        version=settings.api_version,
        debug=settings.debug,
    )
    get_place_order_workflow()

    yield

    logger.info("Shutting down order-taking API")


app = FastAPI(
    title="Order-Taking API",
    description="Validate, price and acknowledge incoming orders",
    version=settings.api_version,
    lifespan=lifespan,
)

setup_middleware(app)

app.include_router(health_router, tags=["Health"])
app.include_router(orders_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    detail = exc.detail
    if isinstance(detail, dict):
        error_code = detail.get("error_code", "ERROR")
        message = detail.get("message", str(detail))
        details = detail.get("details", [])
    else:
        error_code = "ERROR"
        message = str(detail)
        details = []

    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error_code": error_code,
            "message": message,
            "details": details,
            "request_id": request_id,
        },
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle uncaught exceptions with consistent format."""
    request_id = getattr(request.state, "request_id", None)

    logger.exception(
        "Unhandled exception in handler",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )

    return JSONResponse(
        status_code=500,
        content={
            "error_code": "INTERNAL_ERROR",
            "message": "An internal error occurred",
            "details": [],
            "request_id": request_id,
        },
    )
