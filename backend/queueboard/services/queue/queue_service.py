"""Queue service: ticket numbering, listing and serving-pointer advance.

Every operation reads the ledger fresh and applies the same TicketScope,
so listing, issuing and advancing always see the same rows.

Concurrency: issuing is a read-last-row-then-append sequence with no
store-side transaction. When an ``issue_lock`` is supplied the sequence is
single-writer within this process; other processes or manual edits to the
sheet can still race and produce duplicate ids.
"""

import asyncio
import contextlib
from dataclasses import dataclass

import structlog

from queueboard.models.enums import Outcome
from queueboard.models.ticket import ID_COLUMN, LEDGER_WIDTH, STATUS_COLUMN, TicketRow
from queueboard.services.ledger.base import LedgerStore
from queueboard.services.queue.exceptions import TicketNotFound
from queueboard.services.queue.numbering import next_ticket_id
from queueboard.services.queue.scope import TicketScope
from queueboard.utils.a1 import column_range
from queueboard.utils.datetime_utils import format_ledger_timestamp

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Board:
    """Snapshot for the polling display."""

    current: TicketRow | None
    upcoming: list[TicketRow]
    total: int


class QueueService:
    """Service for queue ledger operations."""

    def __init__(
        self,
        ledger: LedgerStore,
        *,
        sheet_name: str = "Queue",
        scope: TicketScope | None = None,
        ticket_prefix: str = "A",
        ticket_digits: int = 3,
        header_rows: int = 0,
        issue_lock: asyncio.Lock | None = None,
    ):
        self.ledger = ledger
        self.sheet_name = sheet_name
        self.scope = scope or TicketScope()
        self.ticket_prefix = ticket_prefix
        self.ticket_digits = ticket_digits
        self.header_rows = header_rows
        self.issue_lock = issue_lock

    @property
    def ledger_range(self) -> str:
        return column_range(self.sheet_name, ID_COLUMN, LEDGER_WIDTH)

    async def _read_rows(self) -> list[TicketRow]:
        """All ledger rows (after header rows) with their sheet row numbers."""
        cells = await self.ledger.read_range(self.ledger_range)
        return [
            TicketRow.from_cells(row, row_number=index)
            for index, row in enumerate(cells, start=1)
            if index > self.header_rows
        ]

    async def list_tickets(self) -> list[TicketRow]:
        """List in-scope tickets in ledger order."""
        return self.scope.select(await self._read_rows())

    def _locate(self, tickets: list[TicketRow], ticket_id: str) -> int:
        """Index of the first ticket with ``ticket_id`` in ledger order."""
        for index, ticket in enumerate(tickets):
            if ticket.id == ticket_id:
                return index
        raise TicketNotFound(ticket_id)

    async def issue_ticket(self) -> TicketRow:
        """Append the next ticket in scope with an empty status and return it."""
        lock = self.issue_lock if self.issue_lock is not None else contextlib.nullcontext()
        async with lock:
            tickets = await self.list_tickets()
            last_id = tickets[-1].id if tickets else None
            ticket = TicketRow(
                id=next_ticket_id(last_id, self.ticket_prefix, self.ticket_digits),
                issued_at=format_ledger_timestamp(self.scope.now()),
            )
            await self.ledger.append_rows(self.ledger_range, [ticket.to_cells()])

        logger.info("Issued ticket", ticket=ticket.id, previous=last_id, issued_at=ticket.issued_at)
        return ticket

    async def advance(self, current_id: str, outcome: Outcome) -> str:
        """Resolve ``current_id`` with ``outcome`` and return the next ticket id.

        A ticket missing from scope is a no-op returning ``current_id``. A
        ticket that already has an outcome is not overwritten. The pointer
        stays on the last ticket when there is no successor.
        """
        tickets = await self.list_tickets()
        try:
            index = self._locate(tickets, current_id)
        except TicketNotFound:
            logger.info("Ticket not in queue, pointer unchanged", ticket=current_id)
            return current_id

        ticket = tickets[index]
        if ticket.status.is_resolved:
            logger.warning(
                "Ticket already resolved, keeping status",
                ticket=ticket.id,
                status=ticket.status.value,
                requested=outcome.value,
            )
        else:
            await self.ledger.update_cell(ticket.row_number, STATUS_COLUMN, outcome.status.to_cell())
            logger.info("Resolved ticket", ticket=ticket.id, outcome=outcome.value, row=ticket.row_number)

        if index + 1 < len(tickets):
            return tickets[index + 1].id
        return current_id

    def _following(self, tickets: list[TicketRow], current_id: str, limit: int) -> list[TicketRow]:
        try:
            index = self._locate(tickets, current_id)
        except TicketNotFound:
            return []
        return tickets[index + 1 : index + 1 + max(limit, 0)]

    async def upcoming(self, current_id: str, limit: int = 3) -> list[TicketRow]:
        """Up to ``limit`` tickets after ``current_id``; empty if it is not in scope."""
        return self._following(await self.list_tickets(), current_id, limit)

    async def board(self, current_id: str | None = None, limit: int = 3) -> Board:
        """Serving pointer plus preview for the display.

        Without ``current_id`` the pointer is seeded with the first unresolved
        ticket, or the last ticket when all are resolved.
        """
        tickets = await self.list_tickets()
        current: TicketRow | None = None
        if current_id:
            with contextlib.suppress(TicketNotFound):
                current = tickets[self._locate(tickets, current_id)]
        elif tickets:
            current = next((t for t in tickets if not t.status.is_resolved), tickets[-1])

        upcoming = self._following(tickets, current.id, limit) if current else []
        return Board(current=current, upcoming=upcoming, total=len(tickets))
