"""Application ports package."""

from .quote_profile import QuoteProfilePort
from .sheets_repository import (
    SheetNotFoundError,
    SheetsConfigurationError,
    SheetsError,
    SheetsRepositoryPort,
)

__all__ = [
    "QuoteProfilePort",
    "SheetNotFoundError",
    "SheetsConfigurationError",
    "SheetsError",
    "SheetsRepositoryPort",
]
