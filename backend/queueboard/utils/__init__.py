"""Utility functions and helpers."""

from queueboard.utils.a1 import cell_reference, column_letter, column_range
from queueboard.utils.datetime_utils import format_ledger_timestamp, local_date, parse_ledger_timestamp

__all__ = [
    "cell_reference",
    "column_letter",
    "column_range",
    "format_ledger_timestamp",
    "local_date",
    "parse_ledger_timestamp",
]
