"""Payloads and results for sheet mutations."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum


class TradeAction(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


@dataclass(frozen=True)
class TradeInput:
    """Trade submitted from the UI."""

    date: str
    ticker: str
    action: TradeAction
    quantity: Decimal
    price: Decimal
    fees: Decimal = Decimal("0")

    @property
    def amount(self) -> Decimal:
        return self.quantity * self.price


@dataclass(frozen=True)
class DepositInput:
    date: str
    amount: Decimal
    reason: str = ""


@dataclass(frozen=True)
class ConversionInput:
    date: str
    amount_myr: Decimal
    amount_usd: Decimal
    rate: Decimal


@dataclass(frozen=True)
class MutationResult:
    """Outcome of a write against the spreadsheet."""

    success: bool
    error: str | None = None

    @classmethod
    def ok(cls) -> "MutationResult":
        return cls(success=True)

    @classmethod
    def failed(cls, error: str) -> "MutationResult":
        return cls(success=False, error=error)


@dataclass(frozen=True)
class InitializeDatabaseResult(MutationResult):
    created_tabs: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class DatabaseStatus:
    """Whether credentials are set and the ledger tabs exist.

    Attributes:
        configured: Credentials and spreadsheet id are available.
        initialized: Every ledger tab exists.
        missing_tabs: Ledger tabs that still need to be created.
    """

    configured: bool
    initialized: bool
    missing_tabs: list[str] = field(default_factory=list)


__all__ = [
    "ConversionInput",
    "DatabaseStatus",
    "DepositInput",
    "InitializeDatabaseResult",
    "MutationResult",
    "TradeAction",
    "TradeInput",
]
