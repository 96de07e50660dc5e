"""Holdings aggregation for the portfolio tab."""

from dataclasses import dataclass
from decimal import Decimal
from logging import Logger

from asset_manager.domain.models import Holding, PortfolioSummary
from asset_manager.domain.services.classification import SectorClassifier
from asset_manager.domain.services.parsing import cell, parse_money, raw_cell
from asset_manager.utils.decimal_utils import safe_percentage


LABEL_TOTAL_INVESTED = "Total Invested"
LABEL_NET_ASSET = "Net Asset"
LABEL_TOTAL_CASH = "Total Cash"


@dataclass(frozen=True)
class PortfolioLayout:
    """Zero-based column positions of the portfolio tab.

    Attributes:
        ticker_column: Ticker symbol.
        quantity_column: Units held.
        status_column: "Active" marks a held position.
        avg_cost_column: Average cost per unit.
        current_price_column: Latest price.
        current_value_column: Optional sheet-computed market value.
        unrealized_pl_column: Optional sheet-computed unrealized P/L.
        label_column: Summary-stat label ("Total Invested", "Net Asset"...).
        value_column: Summary-stat value next to the label.
        cash_cell: Optional fixed (row, column) holding uninvested cash;
            overrides a "Total Cash" label when set.
        header_rows: Leading rows to skip.
    """

    ticker_column: int = 1
    quantity_column: int = 2
    status_column: int = 3
    avg_cost_column: int = 4
    current_price_column: int = 5
    current_value_column: int | None = None
    unrealized_pl_column: int | None = None
    label_column: int = 11
    value_column: int = 12
    cash_cell: tuple[int, int] | None = None
    header_rows: int = 1
    active_status: str = "Active"
    header_sentinels: tuple[str, ...] = ("SYMBOL", "TICKER")


DEFAULT_PORTFOLIO_LAYOUT = PortfolioLayout()


@dataclass
class _HoldingFigures:
    ticker: str
    quantity: Decimal
    avg_cost: Decimal
    current_price: Decimal
    current_value: Decimal
    total_cost: Decimal
    unrealized_pl: Decimal


def compute_portfolio_summary(
    rows: list[list[str]],
    classifier: SectorClassifier,
    *,
    logger: Logger,
    layout: PortfolioLayout = DEFAULT_PORTFOLIO_LAYOUT,
) -> PortfolioSummary:
    """Build the portfolio summary from raw portfolio-tab rows.

    Labelled summary cells ("Total Invested", "Net Asset") are authoritative
    when present and non-zero; otherwise net worth and total cost are derived
    from the holdings. Total P/L is always ``net_worth - total_cost``.

    Args:
        rows: Raw rows of the portfolio tab, header included.
        classifier: Classifier used for sectors and asset classes.
        logger: Logger used for progress messages.
        layout: Column layout of the tab.

    Returns:
        PortfolioSummary: Holdings sorted by current value, descending.
    """
    net_worth = Decimal("0")
    total_cost = Decimal("0")
    cash_balance = Decimal("0")
    figures: list[_HoldingFigures] = []

    for row in rows[layout.header_rows:]:
        label = cell(row, layout.label_column)
        if label:
            value = parse_money(raw_cell(row, layout.value_column))
            if label == LABEL_TOTAL_INVESTED:
                total_cost = value
            elif label == LABEL_NET_ASSET:
                net_worth = value
            elif label == LABEL_TOTAL_CASH:
                cash_balance = value

        if cell(row, layout.status_column) != layout.active_status:
            continue
        ticker = cell(row, layout.ticker_column).upper()
        if not ticker or ticker in layout.header_sentinels:
            continue
        figures.append(_read_holding(row, ticker, layout))

    if layout.cash_cell is not None:
        row_index, column_index = layout.cash_cell
        if row_index < len(rows):
            cash_balance = parse_money(raw_cell(rows[row_index], column_index))

    classifications = classifier.classify_many(f.ticker for f in figures)

    if net_worth == 0:
        net_worth = (
            sum((f.current_value for f in figures), Decimal("0"))
            + cash_balance
        )
    if total_cost == 0:
        total_cost = sum((f.total_cost for f in figures), Decimal("0"))

    holdings = [
        Holding(
            ticker=f.ticker,
            quantity=f.quantity,
            avg_cost=f.avg_cost,
            current_price=f.current_price,
            current_value=f.current_value,
            total_cost=f.total_cost,
            unrealized_pl=f.unrealized_pl,
            unrealized_pl_percent=safe_percentage(
                f.unrealized_pl,
                f.total_cost,
            ),
            allocation=safe_percentage(f.current_value, net_worth),
            sector=classifications[f.ticker].sector,
            asset_class=classifications[f.ticker].asset_class,
        )
        for f in figures
    ]
    holdings.sort(key=lambda holding: holding.current_value, reverse=True)

    total_pl = net_worth - total_cost
    logger.info(
        f"Portfolio computed: holdings={len(holdings)}, "
        f"net_worth={net_worth}, total_cost={total_cost}"
    )
    return PortfolioSummary(
        net_worth=net_worth,
        total_cost=total_cost,
        total_pl=total_pl,
        total_pl_percent=safe_percentage(total_pl, total_cost),
        cash_balance=cash_balance,
        holdings=holdings,
    )


def _read_holding(
    row: list[str],
    ticker: str,
    layout: PortfolioLayout,
) -> _HoldingFigures:
    quantity = parse_money(raw_cell(row, layout.quantity_column))
    avg_cost = parse_money(raw_cell(row, layout.avg_cost_column))
    current_price = parse_money(raw_cell(row, layout.current_price_column))
    total_cost = quantity * avg_cost

    current_value = quantity * current_price
    if cell(row, layout.current_value_column):
        current_value = parse_money(raw_cell(row, layout.current_value_column))

    unrealized_pl = current_value - total_cost
    if cell(row, layout.unrealized_pl_column):
        unrealized_pl = parse_money(raw_cell(row, layout.unrealized_pl_column))

    return _HoldingFigures(
        ticker=ticker,
        quantity=quantity,
        avg_cost=avg_cost,
        current_price=current_price,
        current_value=current_value,
        total_cost=total_cost,
        unrealized_pl=unrealized_pl,
    )


__all__ = [
    "DEFAULT_PORTFOLIO_LAYOUT",
    "LABEL_NET_ASSET",
    "LABEL_TOTAL_CASH",
    "LABEL_TOTAL_INVESTED",
    "PortfolioLayout",
    "compute_portfolio_summary",
]
