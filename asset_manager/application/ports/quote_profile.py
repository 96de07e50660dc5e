"""Application port for remote ticker profile lookups."""

from typing import Protocol

from asset_manager.domain.models import QuoteProfile


class QuoteProfilePort(Protocol):
    """Port returning sector/quote-type information for a ticker."""

    def fetch_profile(self, ticker: str) -> QuoteProfile | None:
        """Return the profile for a ticker, or None when unknown.

        Implementations may raise on network or rate-limit failures; callers
        treat any exception as "unknown".
        """


__all__ = ["QuoteProfilePort"]
