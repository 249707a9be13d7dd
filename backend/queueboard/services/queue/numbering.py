"""Ticket id parsing and formatting."""

import re

_TRAILING_DIGITS = re.compile(r"(\d+)$")


def parse_ticket_number(ticket_id: str | None) -> int:
    """Numeric suffix of a ticket id ("A007" -> 7).

    Ids without trailing digits parse as 0 so numbering can always continue.
    """
    if not ticket_id:
        return 0
    match = _TRAILING_DIGITS.search(ticket_id.strip())
    return int(match.group(1)) if match else 0


def format_ticket_id(number: int, prefix: str = "A", digits: int = 3) -> str:
    """Format a ticket number (7 -> "A007"). Numbers wider than ``digits`` are not truncated."""
    return f"{prefix}{number:0{digits}d}"


def next_ticket_id(last_id: str | None, prefix: str = "A", digits: int = 3) -> str:
    """Id following ``last_id``, or the first id when there is none."""
    return format_ticket_id(parse_ticket_number(last_id) + 1, prefix, digits)
