"""Composition root for wiring infrastructure adapters."""

from asset_manager.application.ports.quote_profile import QuoteProfilePort
from asset_manager.application.ports.sheets_repository import (
    SheetsRepositoryPort,
)
from asset_manager.domain.services.classification import SectorClassifier
from asset_manager.infrastructure.google_sheets_repository import (
    GspreadSheetsRepository,
)
from asset_manager.infrastructure.logging.logger import get_app_logger
from asset_manager.infrastructure.settings import SheetsSettings
from asset_manager.infrastructure.yfinance_quote_repository import (
    YFinanceQuoteProfileRepository,
)


def build_settings() -> SheetsSettings:
    """Return settings read from the environment."""
    return SheetsSettings.from_env()


def build_sheets_repository(
    settings: SheetsSettings | None = None,
) -> SheetsRepositoryPort:
    """Return the Google Sheets repository."""
    resolved = settings or build_settings()
    return GspreadSheetsRepository(resolved, logger=get_app_logger())


def build_quote_profile_repository(
    settings: SheetsSettings | None = None,
) -> QuoteProfilePort | None:
    """Return the remote quote lookup, or None when it is disabled."""
    resolved = settings or build_settings()
    if not resolved.quote_lookup_enabled:
        return None
    return YFinanceQuoteProfileRepository(logger=get_app_logger())


def build_sector_classifier(
    settings: SheetsSettings | None = None,
) -> SectorClassifier:
    """Return a classifier backed by the static map and quote lookups."""
    resolved = settings or build_settings()
    return SectorClassifier(
        logger=get_app_logger(),
        quote_lookup=build_quote_profile_repository(resolved),
        max_workers=resolved.quote_lookup_workers,
    )


__all__ = [
    "build_quote_profile_repository",
    "build_sector_classifier",
    "build_settings",
    "build_sheets_repository",
]
