"""Shared fixtures: in-memory ledger, frozen clock, service and API client."""

import asyncio
import os
from collections.abc import AsyncIterator
from datetime import datetime, timedelta
from zoneinfo import ZoneInfo

import pytest

# Settings are read at import time; configure before importing the package.
os.environ["LEDGER_BACKEND"] = "memory"
os.environ["QUEUE_SCOPE"] = "today"
os.environ["TIMEZONE"] = "Asia/Seoul"
os.environ["SHEET_NAME"] = "Queue"
os.environ["SERIALIZE_ISSUANCE"] = "true"

from httpx import ASGITransport, AsyncClient  # noqa: E402

from queueboard.models.enums import QueueScope  # noqa: E402
from queueboard.services.ledger import InMemoryLedger  # noqa: E402
from queueboard.services.queue import QueueService, TicketScope  # noqa: E402

SEOUL = ZoneInfo("Asia/Seoul")


class FrozenClock:
    """Callable clock that only moves when told to."""

    def __init__(self, now: datetime):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        self.now = self.now + timedelta(**kwargs)


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2026, 10, 19, 9, 30, tzinfo=SEOUL))


@pytest.fixture
def ledger() -> InMemoryLedger:
    return InMemoryLedger(sheet_name="Queue")


def make_service(
    ledger: InMemoryLedger,
    clock: FrozenClock,
    *,
    scope: QueueScope = QueueScope.TODAY,
    serialize: bool = True,
    header_rows: int = 0,
) -> QueueService:
    return QueueService(
        ledger,
        sheet_name="Queue",
        scope=TicketScope(scope=scope, tz=SEOUL, clock=clock),
        header_rows=header_rows,
        issue_lock=asyncio.Lock() if serialize else None,
    )


@pytest.fixture
def service(ledger: InMemoryLedger, clock: FrozenClock) -> QueueService:
    return make_service(ledger, clock)


@pytest.fixture
async def client(service: QueueService) -> AsyncIterator[AsyncClient]:
    from queueboard.api.v1.queue.dependencies import get_queue_service
    from queueboard.main import app

    app.dependency_overrides[get_queue_service] = lambda: service
    try:
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
