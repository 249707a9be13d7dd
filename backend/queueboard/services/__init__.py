"""Services module.

This module provides the service layer architecture:
- exceptions: Custom service exceptions
- ledger: Ledger store backends (Google Sheets, in-memory)
- queue: Ticket numbering, scope filtering and pointer advance
"""
