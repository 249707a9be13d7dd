"""FastAPI application entry point."""

from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, Response
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from queueboard import __version__
from queueboard.api.v1 import health, queue
from queueboard.config import settings
from queueboard.logging import bind_request_context, setup_logging

# Configure logging before anything else
setup_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup/shutdown events."""
    logger.info(
        "Starting queueboard API",
        debug=settings.debug,
        ledger=settings.ledger_backend,
        sheet=settings.sheet_name,
        scope=settings.queue_scope,
        timezone=settings.timezone,
        serialize_issuance=settings.serialize_issuance,
    )

    yield

    logger.info("Shutting down queueboard API")


app = FastAPI(
    title="queueboard API",
    description="Walk-up queue ticketing backed by a spreadsheet ledger",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.backend_cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
    """Bind request id, method and path to every log event of this request."""
    request_id = bind_request_context(request.method, request.url.path, request.headers.get("x-request-id"))
    response = await call_next(request)
    response.headers["X-Request-ID"] = request_id
    return response


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    """Queue actions answer malformed bodies with the same 400 as unknown actions."""
    if request.method == "POST" and request.url.path == f"{settings.api_prefix}/queue":
        logger.warning("Rejected queue action body", error_types=[e["type"] for e in exc.errors()])
        return JSONResponse(status_code=400, content={"error": "Invalid action"})
    return await request_validation_exception_handler(request, exc)


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected failures and return the same error body as handled ones."""
    logger.exception("Unhandled error", path=request.url.path, method=request.method)
    return JSONResponse(status_code=500, content={"error": str(exc) or type(exc).__name__})


# API routes
app.include_router(health.router, prefix=settings.api_prefix, tags=["health"])
app.include_router(queue.router, prefix=settings.api_prefix, tags=["queue"])
