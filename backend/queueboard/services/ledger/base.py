"""Ledger store interface."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LedgerStore(Protocol):
    """Ordered, append-friendly table of rows.

    Implementations raise StoreUnavailable for any failure to reach or use
    the backing store. Rows are returned in ledger order starting at row 1;
    trailing blank cells may be omitted.
    """

    async def read_range(self, sheet_range: str) -> list[list[str]]:
        """Read all rows in an A1 column range (e.g. ``Queue!A:C``)."""
        ...

    async def append_rows(self, sheet_range: str, rows: list[list[str]]) -> None:
        """Append rows after the last non-empty row of the range."""
        ...

    async def update_cell(self, row: int, column: int, value: str) -> None:
        """Overwrite a single cell (1-based row and column) of the ledger sheet."""
        ...
