"""Ledger store backends."""

from unittest.mock import MagicMock

import httplib2
import pytest
from googleapiclient.errors import HttpError

from queueboard.services.exceptions import StoreUnavailable
from queueboard.services.ledger import GoogleSheetsLedger, InMemoryLedger, LedgerStore

pytestmark = pytest.mark.anyio


class TestInMemoryLedger:
    async def test_satisfies_protocol(self):
        assert isinstance(InMemoryLedger(), LedgerStore)

    async def test_read_trims_trailing_blanks_and_empty_tail(self):
        ledger = InMemoryLedger(rows=[["A001", "ts", ""], [], ["A002", "ts", "attend"], ["", "", ""]])

        assert await ledger.read_range("Queue!A:C") == [["A001", "ts"], [], ["A002", "ts", "attend"]]

    async def test_read_limits_columns(self):
        ledger = InMemoryLedger(rows=[["A001", "ts", "attend"]])

        assert await ledger.read_range("Queue!A:B") == [["A001", "ts"]]

    async def test_append_goes_after_last_used_row(self):
        ledger = InMemoryLedger(rows=[["A001", "ts", ""], ["", "", ""]])

        await ledger.append_rows("Queue!A:C", [["A002", "ts2", ""]])

        assert ledger.rows == [["A001", "ts", ""], ["A002", "ts2", ""]]
        assert ledger.writes == 1

    async def test_update_cell_extends_short_rows(self):
        ledger = InMemoryLedger(rows=[["A001", "ts"]])

        await ledger.update_cell(1, 3, "absent")

        assert ledger.rows == [["A001", "ts", "absent"]]

    async def test_unknown_sheet_is_unavailable(self):
        ledger = InMemoryLedger(sheet_name="Queue")

        with pytest.raises(StoreUnavailable):
            await ledger.read_range("Other!A:C")


@pytest.fixture
def sheets_service() -> MagicMock:
    return MagicMock()


@pytest.fixture
def sheets_ledger(sheets_service: MagicMock) -> GoogleSheetsLedger:
    return GoogleSheetsLedger(
        spreadsheet_id="sheet-123",
        sheet_name="Queue",
        client_email="queue@example.iam.gserviceaccount.com",
        private_key="unused",
        scopes="https://www.googleapis.com/auth/spreadsheets",
        service=sheets_service,
    )


def values_resource(service: MagicMock) -> MagicMock:
    return service.spreadsheets.return_value.values.return_value


class TestGoogleSheetsLedger:
    async def test_satisfies_protocol(self, sheets_ledger):
        assert isinstance(sheets_ledger, LedgerStore)

    async def test_read_range(self, sheets_ledger, sheets_service):
        values = values_resource(sheets_service)
        values.get.return_value.execute.return_value = {"values": [["A001", "ts"], ["A002", "ts", "attend"]]}

        rows = await sheets_ledger.read_range("Queue!A:C")

        assert rows == [["A001", "ts"], ["A002", "ts", "attend"]]
        values.get.assert_called_once_with(spreadsheetId="sheet-123", range="Queue!A:C")

    async def test_read_empty_sheet(self, sheets_ledger, sheets_service):
        values_resource(sheets_service).get.return_value.execute.return_value = {"range": "Queue!A1:C1000"}

        assert await sheets_ledger.read_range("Queue!A:C") == []

    async def test_append_rows_uses_user_entered_values(self, sheets_ledger, sheets_service):
        values = values_resource(sheets_service)

        await sheets_ledger.append_rows("Queue!A:C", [["A003", "ts", ""]])

        values.append.assert_called_once_with(
            spreadsheetId="sheet-123",
            range="Queue!A:C",
            valueInputOption="USER_ENTERED",
            insertDataOption="INSERT_ROWS",
            body={"values": [["A003", "ts", ""]]},
        )
        values.append.return_value.execute.assert_called_once()

    async def test_update_cell_writes_single_cell(self, sheets_ledger, sheets_service):
        values = values_resource(sheets_service)

        await sheets_ledger.update_cell(4, 3, "attend")

        values.update.assert_called_once_with(
            spreadsheetId="sheet-123",
            range="Queue!C4",
            valueInputOption="RAW",
            body={"values": [["attend"]]},
        )

    async def test_http_error_becomes_store_unavailable(self, sheets_ledger, sheets_service):
        error = HttpError(httplib2.Response({"status": 503}), b"backend unavailable")
        values_resource(sheets_service).get.return_value.execute.side_effect = error

        with pytest.raises(StoreUnavailable, match="503") as excinfo:
            await sheets_ledger.read_range("Queue!A:C")

        assert excinfo.value.__cause__ is error

    async def test_network_error_becomes_store_unavailable(self, sheets_ledger, sheets_service):
        values_resource(sheets_service).update.return_value.execute.side_effect = ConnectionResetError("reset")

        with pytest.raises(StoreUnavailable, match="reset"):
            await sheets_ledger.update_cell(2, 3, "absent")

    async def test_missing_credentials(self):
        ledger = GoogleSheetsLedger(
            spreadsheet_id="sheet-123",
            sheet_name="Queue",
            client_email="",
            private_key="",
            scopes=[],
        )

        with pytest.raises(StoreUnavailable, match="GOOGLE_SERVICE_ACCOUNT_EMAIL"):
            await ledger.read_range("Queue!A:C")

    async def test_missing_sheet_id(self, sheets_service):
        ledger = GoogleSheetsLedger(
            spreadsheet_id="",
            sheet_name="Queue",
            client_email="queue@example.iam.gserviceaccount.com",
            private_key="unused",
            scopes=[],
            service=sheets_service,
        )

        with pytest.raises(StoreUnavailable, match="GOOGLE_SHEET_ID"):
            await ledger.append_rows("Queue!A:C", [["A001", "ts", ""]])
