"""Queue domain exceptions."""

from queueboard.services.exceptions import NotFoundError


class TicketNotFound(NotFoundError):
    """Ticket id is not present in the current scope."""

    pass
