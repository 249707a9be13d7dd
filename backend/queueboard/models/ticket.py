"""Ticket row model and ledger column layout."""

from dataclasses import dataclass

from queueboard.models.enums import TicketStatus

# Ledger columns (1-based, A = 1)
ID_COLUMN = 1
ISSUED_AT_COLUMN = 2
STATUS_COLUMN = 3
LEDGER_WIDTH = STATUS_COLUMN


@dataclass(frozen=True)
class TicketRow:
    """One issued ticket as stored in the ledger.

    row_number is the 1-based position of the row in the sheet. It addresses
    the status cell for in-place updates and is never exposed over HTTP.
    """

    id: str
    issued_at: str
    status: TicketStatus = TicketStatus.EMPTY
    row_number: int = 0

    @classmethod
    def from_cells(cls, cells: list[str], row_number: int) -> "TicketRow":
        """Build a row from raw ledger cells. Missing trailing cells are blank."""
        padded = [*cells, *([""] * (LEDGER_WIDTH - len(cells)))]
        return cls(
            id=str(padded[ID_COLUMN - 1]).strip(),
            issued_at=str(padded[ISSUED_AT_COLUMN - 1]).strip(),
            status=TicketStatus.from_cell(str(padded[STATUS_COLUMN - 1])),
            row_number=row_number,
        )

    def to_cells(self) -> list[str]:
        return [self.id, self.issued_at, self.status.to_cell()]
