"""Personal finance dashboard backed by a Google Sheets spreadsheet."""

__version__ = "0.1.0"
