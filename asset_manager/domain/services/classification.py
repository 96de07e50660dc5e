"""Sector and asset-class classification for tickers."""

from collections.abc import Iterable, Mapping
from concurrent.futures import ThreadPoolExecutor
from logging import Logger

from asset_manager.domain.constants import (
    CRYPTO_SYMBOLS,
    DEFAULT_SECTOR_MAP,
    FALLBACK_SECTOR,
)
from asset_manager.domain.models import (
    ASSET_CLASS_CRYPTO,
    ASSET_CLASS_EQUITY,
    ASSET_CLASS_ETF,
    SectorClassification,
)


DEFAULT_MAX_WORKERS = 8


def resolve_asset_class(
    ticker: str,
    sector_map: Mapping[str, str] = DEFAULT_SECTOR_MAP,
) -> str:
    """Return a coarse asset class for a ticker.

    Args:
        ticker: Ticker symbol, any case.
        sector_map: Static symbol to sector lookup.

    Returns:
        str: ETF, Crypto or Equity.
    """
    symbol = ticker.strip().upper()
    sector = sector_map.get(symbol) or ""
    if "ETF" in sector:
        return ASSET_CLASS_ETF
    if "Crypto" in sector:
        return ASSET_CLASS_CRYPTO
    if symbol in CRYPTO_SYMBOLS:
        return ASSET_CLASS_CRYPTO
    # Rough guess for Vanguard funds.
    if len(symbol) == 3 and symbol.startswith("V"):
        return ASSET_CLASS_ETF
    return ASSET_CLASS_EQUITY


class SectorClassifier:
    """Resolve sector labels from a static map with a remote fallback.

    Lookup order is the static map, then the remote quote profile (its
    sector, or a label inferred from the quote type), then ``"Other"``.
    Remote failures are logged and never raised.
    """

    def __init__(
        self,
        logger: Logger,
        quote_lookup=None,
        sector_map: Mapping[str, str] | None = None,
        max_workers: int = DEFAULT_MAX_WORKERS,
    ) -> None:
        """Initialize the classifier.

        Args:
            logger: Logger used for degraded lookups.
            quote_lookup: Object exposing ``fetch_profile(ticker)`` returning
                a QuoteProfile or None. When omitted only the static map is
                used.
            sector_map: Symbol to sector map; defaults to DEFAULT_SECTOR_MAP.
            max_workers: Cap on concurrent remote lookups per batch.
        """
        self._logger = logger
        self._quote_lookup = quote_lookup
        self._sector_map = (
            DEFAULT_SECTOR_MAP if sector_map is None else sector_map
        )
        self._max_workers = max(1, max_workers)

    def classify(self, ticker: str) -> SectorClassification:
        """Return the sector and asset class for one ticker."""
        symbol = ticker.strip().upper()
        return SectorClassification(
            sector=self._resolve_sector(symbol),
            asset_class=resolve_asset_class(symbol, self._sector_map),
        )

    def classify_many(
        self,
        tickers: Iterable[str],
    ) -> dict[str, SectorClassification]:
        """Classify a batch of tickers with bounded concurrency.

        Each distinct ticker is resolved once; tickers missing from the
        static map are looked up remotely in parallel.

        Args:
            tickers: Ticker symbols, duplicates allowed.

        Returns:
            dict[str, SectorClassification]: Classification per upper-cased
            ticker.
        """
        symbols = list(dict.fromkeys(t.strip().upper() for t in tickers))
        results: dict[str, SectorClassification] = {}
        pending: list[str] = []
        for symbol in symbols:
            if symbol in self._sector_map or self._quote_lookup is None:
                results[symbol] = self.classify(symbol)
            else:
                pending.append(symbol)

        if pending:
            workers = min(self._max_workers, len(pending))
            with ThreadPoolExecutor(max_workers=workers) as executor:
                for symbol, classification in zip(
                    pending,
                    executor.map(self.classify, pending),
                ):
                    results[symbol] = classification
            self._logger.info(
                f"Resolved {len(pending)} sectors remotely "
                f"with {workers} workers"
            )
        return results

    def _resolve_sector(self, symbol: str) -> str:
        static = self._sector_map.get(symbol)
        if static:
            return static
        if self._quote_lookup is None:
            return FALLBACK_SECTOR
        try:
            profile = self._quote_lookup.fetch_profile(symbol)
        except Exception as exc:
            self._logger.warning(
                f"Sector lookup failed for {symbol}; using "
                f"{FALLBACK_SECTOR}: {exc}"
            )
            return FALLBACK_SECTOR
        if profile is None:
            self._logger.warning(
                f"No quote profile for {symbol}; using {FALLBACK_SECTOR}"
            )
            return FALLBACK_SECTOR
        if profile.sector:
            return profile.sector
        quote_type = (profile.quote_type or "").upper()
        if quote_type == "ETF":
            return "Index ETF"
        if quote_type == "CRYPTOCURRENCY":
            return "Crypto"
        self._logger.warning(
            f"Quote profile for {symbol} has no sector; using "
            f"{FALLBACK_SECTOR}"
        )
        return FALLBACK_SECTOR


__all__ = ["DEFAULT_MAX_WORKERS", "SectorClassifier", "resolve_asset_class"]
