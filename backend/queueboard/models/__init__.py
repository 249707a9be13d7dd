"""Domain models for the ticket ledger."""

from queueboard.models.enums import Outcome, QueueAction, QueueScope, TicketStatus
from queueboard.models.ticket import TicketRow

__all__ = [
    "Outcome",
    "QueueAction",
    "QueueScope",
    "TicketRow",
    "TicketStatus",
]
