"""API schemas for queue endpoints.

Field names follow the display client's camelCase JSON.
"""

from pydantic import BaseModel, ConfigDict, Field

from queueboard.models.enums import TicketStatus
from queueboard.models.ticket import TicketRow
from queueboard.services.queue import Board

# =============================================================================
# Request Schemas
# =============================================================================


class QueueActionRequest(BaseModel):
    """Body of POST /queue.

    ``action`` is kept as a plain string so unknown values are reported as
    400 InvalidAction instead of a 422 validation error.
    """

    model_config = ConfigDict(populate_by_name=True)

    action: str = ""
    current_queue: str | None = Field(default=None, alias="currentQueue")


# =============================================================================
# Response Schemas
# =============================================================================


class QueueItem(BaseModel):
    """One ticket row."""

    queue: str
    timestamp: str
    status: TicketStatus

    @classmethod
    def from_model(cls, ticket: TicketRow) -> "QueueItem":
        """Create response from TicketRow."""
        return cls(queue=ticket.id, timestamp=ticket.issued_at, status=ticket.status)


class QueueListResponse(BaseModel):
    """Response of GET /queue."""

    queues: list[QueueItem]


class NewQueueResponse(BaseModel):
    """Response of POST /queue with action New."""

    model_config = ConfigDict(populate_by_name=True)

    new_queue: str = Field(alias="newQueue")


class CurrentQueueResponse(BaseModel):
    """Response of POST /queue with action Attend or Absent."""

    model_config = ConfigDict(populate_by_name=True)

    current_queue: str = Field(alias="currentQueue")


class BoardResponse(BaseModel):
    """Response of GET /queue/board."""

    model_config = ConfigDict(populate_by_name=True)

    current_queue: str | None = Field(alias="currentQueue")
    upcoming: list[QueueItem]
    total: int

    @classmethod
    def from_model(cls, board: Board) -> "BoardResponse":
        """Create response from a Board snapshot."""
        return cls(
            current_queue=board.current.id if board.current else None,
            upcoming=[QueueItem.from_model(t) for t in board.upcoming],
            total=board.total,
        )


class ErrorResponse(BaseModel):
    """Error body for 400 and 500 responses."""

    error: str
