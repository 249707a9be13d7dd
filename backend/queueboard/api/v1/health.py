"""Liveness endpoint for the display and load balancer."""

from fastapi import APIRouter
from pydantic import BaseModel

from queueboard import __version__
from queueboard.config import settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Process is up; reports which ledger and scope it serves.

    Does not touch the ledger, so a Sheets outage still reports healthy.
    """

    status: str
    version: str
    ledger: str
    scope: str


@router.get("/health", response_model=HealthResponse, operation_id="healthCheck")
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        ledger=settings.ledger_backend,
        scope=settings.queue_scope,
    )
