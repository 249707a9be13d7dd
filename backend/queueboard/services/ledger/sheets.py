"""Google Sheets ledger store (Sheets API v4, service-account auth)."""

import asyncio
import threading
from collections.abc import Callable
from typing import Any, TypeVar

import httplib2
import structlog
from google.auth.exceptions import GoogleAuthError
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import Error as GoogleApiClientError
from googleapiclient.errors import HttpError

from queueboard.config import settings
from queueboard.services.exceptions import StoreUnavailable
from queueboard.utils.a1 import cell_reference

logger = structlog.get_logger(__name__)

T = TypeVar("T")

TOKEN_URI = "https://oauth2.googleapis.com/token"


def _normalize_scopes(scopes: str | list[str]) -> list[str]:
    """Accepts a list, a space-separated string or a CSV string."""
    if isinstance(scopes, str):
        parts = [p.strip() for p in scopes.replace(",", " ").split()]
        return [p for p in parts if p]
    return list(scopes)


def _describe_error(error: Exception) -> str:
    if isinstance(error, HttpError):
        return f"Google Sheets API error {error.resp.status}: {error.reason}"
    return str(error) or type(error).__name__


class GoogleSheetsLedger:
    """Ledger stored in one sheet of a Google spreadsheet.

    The discovery client is built lazily on first use and reused. Calls are
    blocking, so they run in a worker thread; a lock serializes them because
    the underlying httplib2 transport is not thread-safe.
    """

    def __init__(
        self,
        spreadsheet_id: str,
        sheet_name: str,
        *,
        client_email: str,
        private_key: str,
        scopes: str | list[str],
        service: Any | None = None,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.sheet_name = sheet_name
        self._client_email = client_email
        self._private_key = private_key
        self._scopes = _normalize_scopes(scopes)
        self._service = service
        self._lock = threading.Lock()

    @classmethod
    def from_settings(cls) -> "GoogleSheetsLedger":
        """Create a ledger from GOOGLE_* environment settings."""
        return cls(
            spreadsheet_id=settings.google_sheet_id,
            sheet_name=settings.sheet_name,
            client_email=settings.google_service_account_email,
            private_key=settings.google_private_key_pem,
            scopes=settings.google_scopes,
        )

    def _credentials(self) -> service_account.Credentials:
        if not self._client_email or not self._private_key:
            raise StoreUnavailable(
                "Google service account is not configured "
                "(set GOOGLE_SERVICE_ACCOUNT_EMAIL and GOOGLE_PRIVATE_KEY)"
            )
        info = {
            "type": "service_account",
            "client_email": self._client_email,
            "private_key": self._private_key,
            "token_uri": TOKEN_URI,
        }
        try:
            return service_account.Credentials.from_service_account_info(info, scopes=self._scopes)
        except ValueError as e:
            raise StoreUnavailable(f"Invalid service account credentials: {e}") from e

    def _values(self) -> Any:
        """Return the spreadsheets().values() resource, building the client on first use."""
        if not self.spreadsheet_id:
            raise StoreUnavailable("GOOGLE_SHEET_ID is not configured")
        if self._service is None:
            self._service = build("sheets", "v4", credentials=self._credentials(), cache_discovery=False)
        return self._service.spreadsheets().values()

    def _call(self, operation: str, fn: Callable[[Any], T]) -> T:
        with self._lock:
            try:
                return fn(self._values())
            except (GoogleApiClientError, GoogleAuthError, httplib2.HttpLib2Error, OSError) as e:
                message = _describe_error(e)
                logger.error("Ledger request failed", operation=operation, error=message)
                raise StoreUnavailable(message) from e

    async def read_range(self, sheet_range: str) -> list[list[str]]:
        def _read(values: Any) -> list[list[str]]:
            result = values.get(spreadsheetId=self.spreadsheet_id, range=sheet_range).execute()
            rows: list[list[Any]] = result.get("values", [])
            return [[str(cell) for cell in row] for row in rows]

        rows = await asyncio.to_thread(self._call, "read_range", _read)
        logger.debug("Read ledger range", range=sheet_range, rows=len(rows))
        return rows

    async def append_rows(self, sheet_range: str, rows: list[list[str]]) -> None:
        def _append(values: Any) -> None:
            values.append(
                spreadsheetId=self.spreadsheet_id,
                range=sheet_range,
                valueInputOption="USER_ENTERED",
                insertDataOption="INSERT_ROWS",
                body={"values": rows},
            ).execute()

        await asyncio.to_thread(self._call, "append_rows", _append)
        logger.debug("Appended ledger rows", range=sheet_range, count=len(rows))

    async def update_cell(self, row: int, column: int, value: str) -> None:
        reference = cell_reference(self.sheet_name, row, column)

        def _update(values: Any) -> None:
            values.update(
                spreadsheetId=self.spreadsheet_id,
                range=reference,
                valueInputOption="RAW",
                body={"values": [[value]]},
            ).execute()

        await asyncio.to_thread(self._call, "update_cell", _update)
        logger.debug("Updated ledger cell", cell=reference)
