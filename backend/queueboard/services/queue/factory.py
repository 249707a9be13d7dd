"""Construction of the queue service from application settings."""

import asyncio
from collections.abc import Callable
from datetime import datetime
from functools import lru_cache

from queueboard.config import settings
from queueboard.models.enums import QueueScope
from queueboard.services.ledger import GoogleSheetsLedger, InMemoryLedger, LedgerStore
from queueboard.services.queue.queue_service import QueueService
from queueboard.services.queue.scope import TicketScope
from queueboard.utils.datetime_utils import QUEUE_TIMEZONE


@lru_cache
def get_ledger() -> LedgerStore:
    """Process-wide ledger selected by LEDGER_BACKEND."""
    if settings.ledger_backend == "memory":
        return InMemoryLedger(sheet_name=settings.sheet_name)
    return GoogleSheetsLedger.from_settings()


@lru_cache
def get_issue_lock() -> asyncio.Lock | None:
    """Process-wide issuance lock, or None when SERIALIZE_ISSUANCE is off."""
    return asyncio.Lock() if settings.serialize_issuance else None


def create_queue_service(
    ledger: LedgerStore,
    *,
    issue_lock: asyncio.Lock | None = None,
    clock: Callable[[], datetime] | None = None,
) -> QueueService:
    """Build a QueueService using the configured scope, numbering and sheet."""
    scope = TicketScope(scope=QueueScope(settings.queue_scope), tz=QUEUE_TIMEZONE)
    if clock is not None:
        scope.clock = clock
    return QueueService(
        ledger,
        sheet_name=settings.sheet_name,
        scope=scope,
        ticket_prefix=settings.ticket_prefix,
        ticket_digits=settings.ticket_digits,
        header_rows=settings.ledger_header_rows,
        issue_lock=issue_lock,
    )
