"""Ledger store backends."""

from queueboard.services.ledger.base import LedgerStore
from queueboard.services.ledger.memory import InMemoryLedger
from queueboard.services.ledger.sheets import GoogleSheetsLedger

__all__ = ["GoogleSheetsLedger", "InMemoryLedger", "LedgerStore"]
