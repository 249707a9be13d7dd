"""Enum definitions for ledger rows and queue actions."""

from enum import StrEnum


class TicketStatus(StrEnum):
    """Status column of a ticket row.

    Status flow:
        EMPTY -> ATTEND
        EMPTY -> ABSENT

    EMPTY is stored as a blank cell in the ledger.
    """

    EMPTY = "empty"
    ATTEND = "attend"
    ABSENT = "absent"

    @classmethod
    def from_cell(cls, value: str | None) -> "TicketStatus":
        """Parse a raw status cell. Blank or unknown values read as EMPTY."""
        normalized = (value or "").strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            return cls.EMPTY

    def to_cell(self) -> str:
        """Value written to the ledger's status column."""
        return "" if self is TicketStatus.EMPTY else self.value

    @property
    def is_resolved(self) -> bool:
        return self is not TicketStatus.EMPTY


class Outcome(StrEnum):
    """Terminal status applied to a ticket when the serving pointer moves past it."""

    ATTEND = "attend"
    ABSENT = "absent"

    @property
    def status(self) -> TicketStatus:
        return TicketStatus(self.value)


class QueueAction(StrEnum):
    """Action values accepted by POST /queue (case-sensitive, as sent by the display)."""

    NEW = "New"
    ATTEND = "Attend"
    ABSENT = "Absent"

    @property
    def outcome(self) -> Outcome | None:
        if self is QueueAction.ATTEND:
            return Outcome.ATTEND
        if self is QueueAction.ABSENT:
            return Outcome.ABSENT
        return None


class QueueScope(StrEnum):
    """Which ledger rows the queue operations see."""

    TODAY = "today"
    ALL = "all"
