"""Ledger scope selection shared by all queue operations."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime, tzinfo

from queueboard.models.enums import QueueScope
from queueboard.models.ticket import TicketRow
from queueboard.utils.datetime_utils import QUEUE_TIMEZONE, local_date, now_in


@dataclass
class TicketScope:
    """Filter applied to ledger rows before numbering, listing and advancing.

    TODAY keeps rows issued on the current calendar day in ``tz``; rows with a
    blank or unparseable timestamp are dropped. ALL keeps every row with an id.
    """

    scope: QueueScope = QueueScope.TODAY
    tz: tzinfo = QUEUE_TIMEZONE
    clock: Callable[[], datetime] = field(default=lambda: now_in(QUEUE_TIMEZONE))

    def now(self) -> datetime:
        """Current time in the scope's timezone."""
        current = self.clock()
        if current.tzinfo is None:
            return current.replace(tzinfo=self.tz)
        return current.astimezone(self.tz)

    def select(self, rows: Iterable[TicketRow]) -> list[TicketRow]:
        with_id = [row for row in rows if row.id]
        if self.scope is QueueScope.ALL:
            return with_id
        today = self.now().date()
        return [row for row in with_id if local_date(row.issued_at, self.tz) == today]
