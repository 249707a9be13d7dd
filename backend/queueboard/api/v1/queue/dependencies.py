"""FastAPI dependencies for service injection."""

import asyncio
from typing import Annotated

from fastapi import Depends

from queueboard.services.ledger import LedgerStore
from queueboard.services.queue import QueueService
from queueboard.services.queue.factory import create_queue_service, get_issue_lock, get_ledger


async def get_queue_service(
    ledger: Annotated[LedgerStore, Depends(get_ledger)],
    issue_lock: Annotated[asyncio.Lock | None, Depends(get_issue_lock)],
) -> QueueService:
    """Get a QueueService bound to the process-wide ledger and issuance lock."""
    return create_queue_service(ledger, issue_lock=issue_lock)


# Type aliases for cleaner endpoint signatures
QueueServiceDep = Annotated[QueueService, Depends(get_queue_service)]
