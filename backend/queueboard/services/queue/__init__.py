"""Queue ledger services."""

from queueboard.services.queue.queue_service import Board, QueueService
from queueboard.services.queue.scope import TicketScope

__all__ = ["Board", "QueueService", "TicketScope"]
