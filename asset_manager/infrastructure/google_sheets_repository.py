"""gspread-backed repository for range reads and writes on spreadsheet tabs."""

import threading
from decimal import Decimal
from enum import Enum
from typing import Any

import gspread
from google.oauth2.service_account import Credentials

from asset_manager.application.ports.sheets_repository import (
    SheetNotFoundError,
    SheetsConfigurationError,
    SheetsError,
    SheetsRepositoryPort,
)
from asset_manager.infrastructure.logging.logger import get_app_logger
from asset_manager.infrastructure.settings import SheetsSettings


SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]
USER_ENTERED = "USER_ENTERED"
NEW_TAB_ROWS = 1000
NEW_TAB_COLUMNS = 26

_MISSING_RANGE_MARKER = "Unable to parse range"


def serialize_cell(value: Any) -> Any:
    """Convert a Python value into something the Sheets API accepts."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    return value


def authorize_client(settings: SheetsSettings) -> gspread.Client:
    """Return a gspread client authorized with the service account."""
    credentials = Credentials.from_service_account_info(
        settings.load_credentials_info(),
        scopes=SCOPES,
    )
    return gspread.authorize(credentials)


class GspreadSheetsRepository(SheetsRepositoryPort):
    """Repository for Google Sheets access through gspread.

    The client and spreadsheet handle are opened lazily on first use and
    reused afterwards. Values are written with ``USER_ENTERED`` so the
    spreadsheet parses numbers and dates like typed input.
    """

    def __init__(
        self,
        settings: SheetsSettings,
        logger=None,
        client_factory=authorize_client,
    ) -> None:
        """Initialize the repository.

        Args:
            settings: Credentials, spreadsheet id and tab names.
            logger: Optional logger compatible with logging.Logger-like API.
            client_factory: Callable returning an authorized gspread client.
        """
        self._settings = settings
        self._logger = logger or get_app_logger()
        self._client_factory = client_factory
        self._spreadsheet = None
        self._lock = threading.Lock()

    def read_range(self, tab: str, a1_range: str) -> list[list[str]]:
        worksheet = self._worksheet(tab)
        try:
            return worksheet.get_values(a1_range)
        except gspread.exceptions.APIError as exc:
            raise self._translate(tab, exc) from exc

    def append_row(self, tab: str, a1_range: str, row: list[Any]) -> None:
        worksheet = self._worksheet(tab)
        try:
            worksheet.append_row(
                [serialize_cell(value) for value in row],
                value_input_option=USER_ENTERED,
                table_range=a1_range,
            )
        except gspread.exceptions.APIError as exc:
            raise self._translate(tab, exc) from exc
        self._logger.info(f"Appended row to {tab}!{a1_range}")

    def update_row(self, tab: str, a1_range: str, row: list[Any]) -> None:
        worksheet = self._worksheet(tab)
        try:
            worksheet.update(
                values=[[serialize_cell(value) for value in row]],
                range_name=a1_range,
                value_input_option=USER_ENTERED,
            )
        except gspread.exceptions.APIError as exc:
            raise self._translate(tab, exc) from exc
        self._logger.info(f"Updated {tab}!{a1_range}")

    def clear_range(self, tab: str, a1_range: str) -> None:
        worksheet = self._worksheet(tab)
        try:
            worksheet.batch_clear([a1_range])
        except gspread.exceptions.APIError as exc:
            raise self._translate(tab, exc) from exc
        self._logger.info(f"Cleared {tab}!{a1_range}")

    def list_tabs(self) -> list[str]:
        spreadsheet = self._open_spreadsheet()
        try:
            return [worksheet.title for worksheet in spreadsheet.worksheets()]
        except gspread.exceptions.APIError as exc:
            raise SheetsError(f"Failed to list tabs: {exc}") from exc

    def create_tab(self, name: str, header_row: list[str]) -> None:
        spreadsheet = self._open_spreadsheet()
        try:
            worksheet = spreadsheet.add_worksheet(
                title=name,
                rows=NEW_TAB_ROWS,
                cols=max(NEW_TAB_COLUMNS, len(header_row)),
            )
            worksheet.update(
                values=[list(header_row)],
                range_name="A1",
                value_input_option=USER_ENTERED,
            )
        except gspread.exceptions.APIError as exc:
            raise SheetsError(f"Failed to create tab '{name}': {exc}") from exc
        self._logger.info(f"Created tab {name} with {len(header_row)} columns")

    def _open_spreadsheet(self):
        if not self._settings.is_configured:
            raise SheetsConfigurationError(
                "Google Sheets credentials or SPREADSHEET_ID are not configured"
            )
        with self._lock:
            if self._spreadsheet is None:
                client = self._client_factory(self._settings)
                try:
                    self._spreadsheet = client.open_by_key(
                        self._settings.spreadsheet_id
                    )
                except gspread.SpreadsheetNotFound as exc:
                    raise SheetsConfigurationError(
                        "Spreadsheet not found or not shared with the "
                        "service account"
                    ) from exc
                self._logger.info("Opened spreadsheet")
            return self._spreadsheet

    def _worksheet(self, tab: str):
        spreadsheet = self._open_spreadsheet()
        try:
            return spreadsheet.worksheet(tab)
        except gspread.WorksheetNotFound as exc:
            raise SheetNotFoundError(tab) from exc

    @staticmethod
    def _translate(tab: str, exc: Exception) -> SheetsError:
        if _MISSING_RANGE_MARKER in str(exc):
            return SheetNotFoundError(tab)
        return SheetsError(f"Google Sheets request failed for '{tab}': {exc}")


__all__ = [
    "GspreadSheetsRepository",
    "SCOPES",
    "authorize_client",
    "serialize_cell",
]
