"""Aggregation of deposit and conversion rows from the cash flow tab."""

import re
from dataclasses import dataclass
from decimal import Decimal
from logging import Logger

from asset_manager.domain.models import CashFlowSummary, Conversion, Deposit
from asset_manager.domain.services.parsing import cell, parse_money, raw_cell


_HAS_DIGIT = re.compile(r"\d")


@dataclass(frozen=True)
class CashFlowLayout:
    """Zero-based column positions of the two column groups."""

    deposit_date_column: int = 0
    deposit_amount_column: int = 1
    deposit_reason_column: int = 2
    conversion_date_column: int = 4
    conversion_myr_column: int = 5
    conversion_usd_column: int = 6
    conversion_rate_column: int = 7
    header_rows: int = 1


DEFAULT_CASH_FLOW_LAYOUT = CashFlowLayout()


def compute_cash_flow_summary(
    rows: list[list[str]],
    *,
    logger: Logger,
    layout: CashFlowLayout = DEFAULT_CASH_FLOW_LAYOUT,
) -> CashFlowSummary:
    """Total deposits and conversions read from the cash flow tab.

    A row counts for a group only when its date cell contains a digit and
    its amount cells are filled, which skips header fragments and blank
    separators. Lists come back in reverse read order, i.e. most recent
    first for a tab that is only ever appended to.

    Args:
        rows: Raw rows of the cash flow tab, header included.
        logger: Logger used for progress messages.
        layout: Column layout of the tab.

    Returns:
        CashFlowSummary: Totals, weighted average rate and both histories.
    """
    deposits: list[Deposit] = []
    conversions: list[Conversion] = []

    for row in rows[layout.header_rows:]:
        deposit = _read_deposit(row, layout)
        if deposit is not None:
            deposits.append(deposit)
        conversion = _read_conversion(row, layout)
        if conversion is not None:
            conversions.append(conversion)

    total_deposited = sum((d.amount_myr for d in deposits), Decimal("0"))
    total_myr = sum((c.amount_myr for c in conversions), Decimal("0"))
    total_usd = sum((c.amount_usd for c in conversions), Decimal("0"))
    avg_rate = total_myr / total_usd if total_usd > 0 else Decimal("0")

    deposits.reverse()
    conversions.reverse()
    logger.info(
        f"Cash flow computed: deposits={len(deposits)}, "
        f"conversions={len(conversions)}, avg_rate={avg_rate}"
    )
    return CashFlowSummary(
        total_deposited_myr=total_deposited,
        total_converted_myr=total_myr,
        total_converted_usd=total_usd,
        avg_rate=avg_rate,
        deposits=deposits,
        conversions=conversions,
    )


def _read_deposit(row: list[str], layout: CashFlowLayout) -> Deposit | None:
    date_text = cell(row, layout.deposit_date_column)
    if not date_text or not cell(row, layout.deposit_amount_column):
        return None
    if not _HAS_DIGIT.search(date_text):
        return None
    reason = cell(row, layout.deposit_reason_column)
    return Deposit(
        date=date_text,
        amount_myr=parse_money(raw_cell(row, layout.deposit_amount_column)),
        reason=reason or None,
    )


def _read_conversion(
    row: list[str],
    layout: CashFlowLayout,
) -> Conversion | None:
    date_text = cell(row, layout.conversion_date_column)
    if not date_text:
        return None
    if not (
        cell(row, layout.conversion_myr_column)
        and cell(row, layout.conversion_usd_column)
    ):
        return None
    if not _HAS_DIGIT.search(date_text):
        return None
    return Conversion(
        date=date_text,
        amount_myr=parse_money(raw_cell(row, layout.conversion_myr_column)),
        amount_usd=parse_money(raw_cell(row, layout.conversion_usd_column)),
        rate=parse_money(raw_cell(row, layout.conversion_rate_column)),
    )


__all__ = [
    "CashFlowLayout",
    "DEFAULT_CASH_FLOW_LAYOUT",
    "compute_cash_flow_summary",
]
