"""Queue API endpoints consumed by the display and the staff control."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse

from queueboard.api.v1.queue.dependencies import QueueServiceDep
from queueboard.api.v1.queue.schemas import (
    BoardResponse,
    CurrentQueueResponse,
    ErrorResponse,
    NewQueueResponse,
    QueueActionRequest,
    QueueItem,
    QueueListResponse,
)
from queueboard.config import settings
from queueboard.models.enums import QueueAction
from queueboard.services.exceptions import InvalidAction, ServiceError

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["queue"])

ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def error_response(status_code: int, error: Exception) -> JSONResponse:
    """Build the JSON error body used by every queue endpoint."""
    return JSONResponse(status_code=status_code, content={"error": str(error)})


def parse_action(request: QueueActionRequest) -> QueueAction:
    """Validate the action and its required ticket id."""
    try:
        action = QueueAction(request.action)
    except ValueError:
        raise InvalidAction("Invalid action") from None
    if action.outcome is not None and not request.current_queue:
        raise InvalidAction(f"currentQueue is required for action {action.value}")
    return action


@router.get(
    "/queue",
    response_model=QueueListResponse,
    responses=ERROR_RESPONSES,
    operation_id="listQueue",
)
async def list_queue(service: QueueServiceDep) -> QueueListResponse | JSONResponse:
    """List tickets in the current scope, in serving order."""
    try:
        tickets = await service.list_tickets()
    except ServiceError as e:
        logger.error("Failed to list queue", error=str(e))
        return error_response(e.status_code, e)

    return QueueListResponse(queues=[QueueItem.from_model(t) for t in tickets])


@router.post(
    "/queue",
    response_model=NewQueueResponse | CurrentQueueResponse,
    responses=ERROR_RESPONSES,
    operation_id="queueAction",
)
async def queue_action(
    request: QueueActionRequest,
    service: QueueServiceDep,
) -> NewQueueResponse | CurrentQueueResponse | JSONResponse:
    """Issue a new ticket (New) or resolve the current one and advance (Attend/Absent)."""
    try:
        action = parse_action(request)
    except InvalidAction as e:
        logger.warning("Rejected queue action", action=request.action, error=str(e))
        return error_response(e.status_code, e)

    try:
        if action is QueueAction.NEW:
            ticket = await service.issue_ticket()
            return NewQueueResponse(new_queue=ticket.id)

        assert action.outcome is not None and request.current_queue is not None
        next_id = await service.advance(request.current_queue, action.outcome)
        return CurrentQueueResponse(current_queue=next_id)
    except ServiceError as e:
        logger.error("Queue action failed", action=action.value, error=str(e))
        return error_response(e.status_code, e)


@router.get(
    "/queue/board",
    response_model=BoardResponse,
    responses=ERROR_RESPONSES,
    operation_id="getQueueBoard",
)
async def get_board(
    service: QueueServiceDep,
    current_queue: Annotated[str | None, Query(alias="currentQueue")] = None,
    limit: Annotated[int | None, Query(ge=0)] = None,
) -> BoardResponse | JSONResponse:
    """Serving pointer and preview of upcoming tickets for the display."""
    try:
        board = await service.board(current_queue, limit if limit is not None else settings.preview_size)
    except ServiceError as e:
        logger.error("Failed to build queue board", error=str(e))
        return error_response(e.status_code, e)

    return BoardResponse.from_model(board)
