"""In-memory ledger store for local development and tests."""

import structlog

from queueboard.services.exceptions import StoreUnavailable
from queueboard.utils.a1 import split_range

logger = structlog.get_logger(__name__)


class InMemoryLedger:
    """Ledger backed by a list of rows for a single sheet.

    Mirrors the Sheets values API closely enough for the queue service:
    reads return rows from row 1 with trailing blanks trimmed, appends go
    after the last non-empty row.
    """

    def __init__(self, sheet_name: str = "Queue", rows: list[list[str]] | None = None):
        self.sheet_name = sheet_name
        self.rows: list[list[str]] = [list(row) for row in rows or []]
        self.writes = 0

    def _check_sheet(self, sheet: str | None) -> None:
        if sheet is not None and sheet != self.sheet_name:
            raise StoreUnavailable(f"Unable to parse range: sheet {sheet!r} not found")

    def _last_used_row(self) -> int:
        for index in range(len(self.rows), 0, -1):
            if any(cell != "" for cell in self.rows[index - 1]):
                return index
        return 0

    async def read_range(self, sheet_range: str) -> list[list[str]]:
        sheet, first, last = split_range(sheet_range)
        self._check_sheet(sheet)
        result: list[list[str]] = []
        for row in self.rows[: self._last_used_row()]:
            cells = list(row[first - 1 : last])
            while cells and cells[-1] == "":
                cells.pop()
            result.append(cells)
        return result

    async def append_rows(self, sheet_range: str, rows: list[list[str]]) -> None:
        sheet, first, _ = split_range(sheet_range)
        self._check_sheet(sheet)
        del self.rows[self._last_used_row() :]
        for row in rows:
            self.rows.append([""] * (first - 1) + [str(cell) for cell in row])
        self.writes += 1
        logger.debug("Appended rows", sheet=self.sheet_name, count=len(rows))

    async def update_cell(self, row: int, column: int, value: str) -> None:
        if row < 1 or column < 1:
            raise StoreUnavailable(f"Invalid cell position: row={row}, column={column}")
        while len(self.rows) < row:
            self.rows.append([])
        cells = self.rows[row - 1]
        if len(cells) < column:
            cells.extend([""] * (column - len(cells)))
        cells[column - 1] = value
        self.writes += 1
        logger.debug("Updated cell", sheet=self.sheet_name, row=row, column=column)
