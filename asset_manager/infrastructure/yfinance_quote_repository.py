"""Yahoo Finance lookups of ticker sector and quote type."""

import yfinance as yf

from asset_manager.application.ports.quote_profile import QuoteProfilePort
from asset_manager.domain.models import QuoteProfile
from asset_manager.infrastructure.logging.logger import get_app_logger


class YFinanceQuoteProfileRepository(QuoteProfilePort):
    """Fetch quote profiles through ``yfinance.Ticker``."""

    def __init__(self, logger=None, ticker_factory=yf.Ticker) -> None:
        self._logger = logger or get_app_logger()
        self._ticker_factory = ticker_factory

    def fetch_profile(self, ticker: str) -> QuoteProfile | None:
        """Return sector and quote type for a ticker.

        Args:
            ticker: Ticker symbol as listed on Yahoo Finance.

        Returns:
            QuoteProfile | None: The profile, or None when Yahoo returns
            nothing useful for the symbol.
        """
        info = self._ticker_factory(ticker).info or {}
        sector = str(info.get("sector") or "").strip()
        quote_type = str(info.get("quoteType") or "").strip()
        if not sector and not quote_type:
            self._logger.debug(f"Empty quote profile for {ticker}")
            return None
        return QuoteProfile(
            sector=sector or None,
            quote_type=quote_type or None,
        )


__all__ = ["YFinanceQuoteProfileRepository"]
