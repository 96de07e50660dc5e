"""Shared fixtures: an in-memory spreadsheet behind the sheets port."""

import re
from decimal import Decimal
from enum import Enum
from unittest.mock import MagicMock

import pytest

from asset_manager.application.ports.sheets_repository import (
    SheetNotFoundError,
    SheetsConfigurationError,
)


_A1 = re.compile(r"^([A-Z]+)(\d*)(?::([A-Z]+)(\d*))?$")


def _column_index(letters: str) -> int:
    index = 0
    for char in letters:
        index = index * 26 + (ord(char) - ord("A") + 1)
    return index - 1


def _parse_range(a1_range: str) -> tuple[int, int, int | None, int | None]:
    match = _A1.match(a1_range)
    if not match:
        raise ValueError(f"Unsupported range: {a1_range}")
    start_col, start_row, end_col, end_row = match.groups()
    first = _column_index(start_col)
    last = _column_index(end_col) if end_col else first
    top = int(start_row) if start_row else None
    bottom = int(end_row) if end_row else top
    return first, last, top, bottom


def _to_text(value) -> str:
    if value is None:
        return ""
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Decimal):
        return str(value)
    return str(value)


class FakeSheetsRepository:
    """In-memory stand-in for the Google Sheets repository.

    Rows are stored as lists of strings keyed by tab name. Reads trim
    trailing blank cells and trailing blank rows like the Sheets API does.
    """

    def __init__(self, tabs=None, configured: bool = True) -> None:
        self.tabs: dict[str, list[list[str]]] = {
            name: [[_to_text(v) for v in row] for row in rows]
            for name, rows in (tabs or {}).items()
        }
        self.configured = configured
        self.calls: list[tuple] = []

    def _grid(self, tab: str) -> list[list[str]]:
        if not self.configured:
            raise SheetsConfigurationError("not configured")
        if tab not in self.tabs:
            raise SheetNotFoundError(tab)
        return self.tabs[tab]

    @staticmethod
    def _write(grid, row_number: int, first: int, values) -> None:
        while len(grid) < row_number:
            grid.append([])
        row = grid[row_number - 1]
        for offset, value in enumerate(values):
            column = first + offset
            while len(row) <= column:
                row.append("")
            row[column] = _to_text(value)

    def read_range(self, tab, a1_range):
        self.calls.append(("read_range", tab, a1_range))
        grid = self._grid(tab)
        first, last, top, bottom = _parse_range(a1_range)
        start = (top or 1) - 1
        stop = bottom if bottom is not None else len(grid)
        result = []
        for row in grid[start:stop]:
            values = list(row[first:last + 1])
            while values and values[-1] == "":
                values.pop()
            result.append(values)
        while result and not result[-1]:
            result.pop()
        return result

    def append_row(self, tab, a1_range, row):
        self.calls.append(("append_row", tab, a1_range, list(row)))
        grid = self._grid(tab)
        first, last, _, _ = _parse_range(a1_range)
        last_filled = 0
        for number, existing in enumerate(grid, start=1):
            if any(cell != "" for cell in existing[first:last + 1]):
                last_filled = number
        self._write(grid, last_filled + 1, first, row)

    def update_row(self, tab, a1_range, row):
        self.calls.append(("update_row", tab, a1_range, list(row)))
        grid = self._grid(tab)
        first, _, top, _ = _parse_range(a1_range)
        self._write(grid, top, first, row)

    def clear_range(self, tab, a1_range):
        self.calls.append(("clear_range", tab, a1_range))
        grid = self._grid(tab)
        first, last, top, bottom = _parse_range(a1_range)
        start = top or 1
        stop = bottom or len(grid)
        for number in range(start, stop + 1):
            if number > len(grid):
                break
            row = grid[number - 1]
            for column in range(first, min(last + 1, len(row))):
                row[column] = ""

    def list_tabs(self):
        self.calls.append(("list_tabs",))
        if not self.configured:
            raise SheetsConfigurationError("not configured")
        return list(self.tabs)

    def create_tab(self, name, header_row):
        self.calls.append(("create_tab", name, list(header_row)))
        if not self.configured:
            raise SheetsConfigurationError("not configured")
        self.tabs[name] = [[_to_text(v) for v in header_row]]

    def writes(self) -> list[tuple]:
        return [call for call in self.calls if call[0] != "read_range"]


@pytest.fixture
def sheets() -> FakeSheetsRepository:
    """Empty, configured in-memory spreadsheet."""
    return FakeSheetsRepository()


@pytest.fixture
def logger() -> MagicMock:
    """Logger double recording every call."""
    return MagicMock()


@pytest.fixture
def unconfigured_sheets() -> FakeSheetsRepository:
    """Spreadsheet whose credentials are missing."""
    return FakeSheetsRepository(configured=False)
