"""Application port for range-oriented spreadsheet access."""

from typing import Any, Protocol


class SheetsError(RuntimeError):
    """Base error raised by spreadsheet adapters."""


class SheetNotFoundError(SheetsError):
    """The requested tab does not exist in the spreadsheet."""

    def __init__(self, tab: str) -> None:
        super().__init__(f"Sheet not found: could not find tab named '{tab}'")
        self.tab = tab


class SheetsConfigurationError(SheetsError):
    """Credentials or the spreadsheet id are missing or malformed."""


class SheetsRepositoryPort(Protocol):
    """Port exposing A1-range reads and writes on named tabs.

    Ranges are given without the tab prefix, e.g. ``"A:G"`` or ``"A5:G5"``.
    """

    def read_range(self, tab: str, a1_range: str) -> list[list[str]]:
        """Return the rows of a range as strings; trailing blanks may be cut.

        Raises:
            SheetNotFoundError: If the tab does not exist.
        """

    def append_row(self, tab: str, a1_range: str, row: list[Any]) -> None:
        """Append a row after the last row of the table in the range."""

    def update_row(self, tab: str, a1_range: str, row: list[Any]) -> None:
        """Overwrite the cells of the range with the row values."""

    def clear_range(self, tab: str, a1_range: str) -> None:
        """Blank every cell in the range."""

    def list_tabs(self) -> list[str]:
        """Return the titles of all tabs."""

    def create_tab(self, name: str, header_row: list[str]) -> None:
        """Create a tab and write its header row."""


__all__ = [
    "SheetNotFoundError",
    "SheetsConfigurationError",
    "SheetsError",
    "SheetsRepositoryPort",
]
