"""Tests for the holdings aggregator."""

from decimal import Decimal
from unittest.mock import MagicMock

from asset_manager.domain.services.classification import SectorClassifier
from asset_manager.domain.services.portfolio import (
    PortfolioLayout,
    compute_portfolio_summary,
)


HEADER = ["#", "Symbol", "Qty", "Status", "Avg", "Price"]


def _row(ticker, qty, status, avg, price, label="", value=""):
    row = ["", ticker, qty, status, avg, price, "", "", "", "", "", label]
    row.append(value)
    return row


def _classifier() -> SectorClassifier:
    return SectorClassifier(MagicMock())


def test_active_rows_become_holdings_with_derived_figures() -> None:
    """Value, cost and P/L should come from quantity, cost and price."""
    rows = [
        HEADER,
        _row("aapl", "10", "Active", "$100", "$150"),
        _row("VOO", "2", "Active", "400", "500"),
        _row("TSLA", "5", "Closed", "200", "250"),
    ]

    summary = compute_portfolio_summary(
        rows,
        _classifier(),
        logger=MagicMock(),
    )

    assert [h.ticker for h in summary.holdings] == ["AAPL", "VOO"]
    aapl = summary.holdings[0]
    assert aapl.current_value == Decimal("1500")
    assert aapl.total_cost == Decimal("1000")
    assert aapl.unrealized_pl == Decimal("500")
    assert aapl.unrealized_pl_percent == Decimal("50")
    assert aapl.sector == "Technology"
    assert summary.holdings[1].asset_class == "ETF"
    assert summary.net_worth == Decimal("2500")
    assert summary.total_cost == Decimal("1800")
    assert summary.total_pl == Decimal("700")


def test_labelled_summary_cells_are_authoritative() -> None:
    """Net Asset and Total Invested labels should override derived totals."""
    rows = [
        HEADER,
        _row("AAPL", "10", "Active", "100", "150", "Total Invested", "$900"),
        _row("", "", "", "", "", "Net Asset", "$2,000"),
        _row("", "", "", "", "", "Total Cash", "$500"),
    ]

    summary = compute_portfolio_summary(
        rows,
        _classifier(),
        logger=MagicMock(),
    )

    assert summary.net_worth == Decimal("2000")
    assert summary.total_cost == Decimal("900")
    assert summary.total_pl == Decimal("1100")
    assert summary.cash_balance == Decimal("500")
    assert summary.holdings[0].allocation == Decimal("75")


def test_zero_labels_fall_back_to_derived_totals_with_cash() -> None:
    """A zero Net Asset should be replaced by holdings value plus cash."""
    rows = [
        HEADER,
        _row("AAPL", "1", "Active", "100", "100", "Net Asset", "0"),
        _row("", "", "", "", "", "Total Cash", "50"),
    ]

    summary = compute_portfolio_summary(
        rows,
        _classifier(),
        logger=MagicMock(),
    )

    assert summary.net_worth == Decimal("150")
    assert summary.total_pl_percent == Decimal("50")


def test_holdings_sorted_by_value_and_allocation_bounded() -> None:
    """Holdings come back by value descending and allocations stay in range."""
    rows = [
        HEADER,
        _row("MSFT", "1", "Active", "10", "10"),
        _row("NVDA", "3", "Active", "10", "10"),
        _row("AAPL", "2", "Active", "10", "10"),
    ]

    summary = compute_portfolio_summary(
        rows,
        _classifier(),
        logger=MagicMock(),
    )

    values = [h.current_value for h in summary.holdings]
    assert values == sorted(values, reverse=True)
    assert all(0 <= h.allocation <= 100 for h in summary.holdings)
    total = sum(h.allocation for h in summary.holdings)
    assert abs(total - Decimal("100")) < Decimal("0.0001")


def test_zero_cost_and_zero_net_worth_give_zero_percentages() -> None:
    """Percentages should be zero instead of dividing by zero."""
    rows = [HEADER, _row("AAPL", "0", "Active", "0", "0")]

    summary = compute_portfolio_summary(
        rows,
        _classifier(),
        logger=MagicMock(),
    )

    holding = summary.holdings[0]
    assert holding.unrealized_pl_percent == Decimal("0")
    assert holding.allocation == Decimal("0")
    assert summary.total_pl_percent == Decimal("0")


def test_header_sentinel_and_blank_tickers_are_skipped() -> None:
    """Rows whose ticker is a header word or empty should be ignored."""
    rows = [
        HEADER,
        _row("SYMBOL", "1", "Active", "1", "1"),
        _row("", "1", "Active", "1", "1"),
    ]

    summary = compute_portfolio_summary(
        rows,
        _classifier(),
        logger=MagicMock(),
    )

    assert summary.holdings == []
    assert summary.net_worth == Decimal("0")


def test_layout_can_use_sheet_values_and_fixed_cash_cell() -> None:
    """Configured value/P&L columns and a cash cell should be honoured."""
    layout = PortfolioLayout(
        current_value_column=6,
        unrealized_pl_column=7,
        cash_cell=(2, 1),
    )
    rows = [
        HEADER,
        ["", "AAPL", "10", "Active", "100", "150", "1,490", "480"],
        ["", "$75"],
    ]

    summary = compute_portfolio_summary(
        rows,
        _classifier(),
        logger=MagicMock(),
        layout=layout,
    )

    holding = summary.holdings[0]
    assert holding.current_value == Decimal("1490")
    assert holding.unrealized_pl == Decimal("480")
    assert summary.cash_balance == Decimal("75")
    assert summary.net_worth == Decimal("1565")
