"""Domain models for deposits and currency conversions."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class Deposit:
    """Money moved into the brokerage funding pot."""

    date: str
    amount_myr: Decimal
    reason: str | None = None


@dataclass(frozen=True)
class Conversion:
    """MYR converted into USD."""

    date: str
    amount_myr: Decimal
    amount_usd: Decimal
    rate: Decimal


@dataclass(frozen=True)
class CashFlowSummary:
    """Funding totals with the deposit and conversion history.

    Attributes:
        total_deposited_myr: Sum of deposit amounts.
        total_converted_myr: Sum of MYR spent on conversions.
        total_converted_usd: Sum of USD received from conversions.
        avg_rate: Weighted average MYR per USD.
        deposits: Deposits, most recent first.
        conversions: Conversions, most recent first.
    """

    total_deposited_myr: Decimal
    total_converted_myr: Decimal
    total_converted_usd: Decimal
    avg_rate: Decimal
    deposits: list[Deposit] = field(default_factory=list)
    conversions: list[Conversion] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "CashFlowSummary":
        """Return a zeroed summary."""
        return cls(
            total_deposited_myr=Decimal("0"),
            total_converted_myr=Decimal("0"),
            total_converted_usd=Decimal("0"),
            avg_rate=Decimal("0"),
        )


__all__ = ["CashFlowSummary", "Conversion", "Deposit"]
