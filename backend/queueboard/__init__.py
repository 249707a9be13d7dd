"""Walk-up queue ticketing backend with a spreadsheet ledger."""

__version__ = "0.1.0"
