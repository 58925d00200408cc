"""Inventory API main application module.

This module initializes the FastAPI application and configures
core middleware, routers, exception handlers and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.health import router as health_router
from app.api.middleware import (
    RequestIdMiddleware,
    internal_error_response,
    setup_middleware,
)
from app.api.products import (
    LOW_STOCK_HEADER,
    TOTAL_COUNT_HEADER,
    TOTAL_PAGES_HEADER,
)
from app.api.products import router as products_router
from app.domain.exceptions import ProductIdMismatchError, ProductNotFoundError
from app.infrastructure.config import settings
from app.infrastructure.database import create_tables
from app.infrastructure.logging import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown events.

    Args:
        app: The FastAPI application instance.

    Yields:
        None after startup, cleanup happens after yield.
    """
    # Startup
    configure_logging(settings.log_level, json_output=not settings.debug)
    logger.info(
        "Starting Inventory API",
        version=settings.api_version,
        debug=settings.debug,
    )

    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("Database tables ready")

    yield

    # Shutdown
    logger.info("Shutting down Inventory API")


app = FastAPI(
    title="Inventory API",
    description="Product inventory management with soft deletion",
    version=settings.api_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware (must be added before custom middleware)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
    expose_headers=[
        TOTAL_COUNT_HEADER,
        TOTAL_PAGES_HEADER,
        LOW_STOCK_HEADER,
        "Location",
        RequestIdMiddleware.HEADER_NAME,
    ],
)

# Setup custom middleware (request ID)
setup_middleware(app)

# Include routers
app.include_router(health_router, tags=["Health"])
app.include_router(products_router)


# ============================================================================
# Custom Exception Handlers
# ============================================================================


def _request_id(request: Request) -> str | None:
    return getattr(request.state, "request_id", None)


@app.exception_handler(ProductNotFoundError)
async def product_not_found_handler(
    request: Request, exc: ProductNotFoundError
) -> Response:
    """Answer 404 with an empty body."""
    logger.info("Product not found", path=request.url.path, **exc.details)
    return Response(status_code=status.HTTP_404_NOT_FOUND)


@app.exception_handler(ProductIdMismatchError)
async def product_id_mismatch_handler(
    request: Request, exc: ProductIdMismatchError
) -> JSONResponse:
    """Answer 400 when path and body IDs disagree."""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error_code": "ID_MISMATCH",
            "message": exc.message,
            "details": [{"field": "id", "message": exc.message}],
            "request_id": _request_id(request),
        },
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer 400 with one detail entry per invalid field."""
    details = [
        {
            "field": ".".join(str(part) for part in error["loc"][1:]) or None,
            "message": error["msg"],
        }
        for error in exc.errors()
    ]

    logger.info(
        "Request validation failed",
        path=request.url.path,
        method=request.method,
        error_count=len(details),
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error_code": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": details,
            "request_id": _request_id(request),
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Handle HTTP exceptions with consistent format."""
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
            "request_id": _request_id(request),
        },
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle exceptions raised outside the request ID middleware."""
    logger.exception(
        "Unhandled exception outside request handling",
        path=request.url.path,
        method=request.method,
        error=str(exc),
    )
    return internal_error_response(_request_id(request))
