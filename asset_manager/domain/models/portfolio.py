"""Domain models for the investment portfolio."""

from dataclasses import dataclass, field
from decimal import Decimal


ASSET_CLASS_EQUITY = "Equity"
ASSET_CLASS_ETF = "ETF"
ASSET_CLASS_CRYPTO = "Crypto"


@dataclass(frozen=True)
class QuoteProfile:
    """Instrument profile returned by a remote quote service."""

    sector: str | None = None
    quote_type: str | None = None


@dataclass(frozen=True)
class SectorClassification:
    """Sector label and asset class resolved for a ticker."""

    sector: str
    asset_class: str


@dataclass(frozen=True)
class Holding:
    """Currently held position in a single ticker.

    Attributes:
        ticker: Upper-cased symbol, unique within a snapshot.
        quantity: Units held.
        avg_cost: Cost basis per unit.
        current_price: Latest price per unit.
        current_value: Market value of the position.
        total_cost: Cost basis of the position.
        unrealized_pl: current_value minus total_cost.
        unrealized_pl_percent: unrealized_pl relative to total_cost.
        allocation: Share of net worth, in percent.
        sector: Sector label.
        asset_class: Equity, ETF or Crypto.
    """

    ticker: str
    quantity: Decimal
    avg_cost: Decimal
    current_price: Decimal
    current_value: Decimal
    total_cost: Decimal
    unrealized_pl: Decimal
    unrealized_pl_percent: Decimal
    allocation: Decimal
    sector: str
    asset_class: str


@dataclass(frozen=True)
class PortfolioSummary:
    """Aggregate view of the portfolio."""

    net_worth: Decimal
    total_cost: Decimal
    total_pl: Decimal
    total_pl_percent: Decimal
    cash_balance: Decimal
    holdings: list[Holding] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "PortfolioSummary":
        """Return a zeroed summary."""
        return cls(
            net_worth=Decimal("0"),
            total_cost=Decimal("0"),
            total_pl=Decimal("0"),
            total_pl_percent=Decimal("0"),
            cash_balance=Decimal("0"),
            holdings=[],
        )


__all__ = [
    "ASSET_CLASS_CRYPTO",
    "ASSET_CLASS_EQUITY",
    "ASSET_CLASS_ETF",
    "Holding",
    "PortfolioSummary",
    "QuoteProfile",
    "SectorClassification",
]
