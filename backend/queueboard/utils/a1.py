"""Helpers for spreadsheet A1 notation."""

import re

_RANGE_RE = re.compile(r"^(?:(?P<sheet>'[^']+'|[^!]+)!)?(?P<start>[A-Z]+)\d*(?::(?P<end>[A-Z]+)\d*)?$")


def column_letter(column: int) -> str:
    """Convert a 1-based column index to letters (1 -> A, 27 -> AA)."""
    if column < 1:
        raise ValueError(f"Column index must be >= 1, got {column}")
    letters = ""
    while column:
        column, remainder = divmod(column - 1, 26)
        letters = chr(ord("A") + remainder) + letters
    return letters


def column_index(letters: str) -> int:
    """Convert column letters to a 1-based index (A -> 1, AA -> 27)."""
    index = 0
    for char in letters.upper():
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index


def quote_sheet(sheet: str) -> str:
    """Quote a sheet name for use in a range if it contains anything but word characters."""
    if re.fullmatch(r"\w+", sheet):
        return sheet
    return "'" + sheet.replace("'", "''") + "'"


def column_range(sheet: str, first: int, last: int) -> str:
    """Whole-column range, e.g. ``Queue!A:C``."""
    return f"{quote_sheet(sheet)}!{column_letter(first)}:{column_letter(last)}"


def cell_reference(sheet: str, row: int, column: int) -> str:
    """Single-cell reference, e.g. ``Queue!C5``."""
    if row < 1:
        raise ValueError(f"Row index must be >= 1, got {row}")
    return f"{quote_sheet(sheet)}!{column_letter(column)}{row}"


def split_range(sheet_range: str) -> tuple[str | None, int, int]:
    """Split a column range into (sheet, first_column, last_column).

    Row numbers in the range are ignored; only column spans are supported.
    """
    match = _RANGE_RE.match(sheet_range.strip())
    if not match:
        raise ValueError(f"Unsupported range: {sheet_range!r}")
    sheet = match.group("sheet")
    if sheet and sheet.startswith("'"):
        sheet = sheet[1:-1].replace("''", "'")
    first = column_index(match.group("start"))
    last = column_index(match.group("end") or match.group("start"))
    return sheet, first, last
