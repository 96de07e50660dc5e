"""Domain services package."""

from .cash_flow import (
    DEFAULT_CASH_FLOW_LAYOUT,
    CashFlowLayout,
    compute_cash_flow_summary,
)
from .classification import SectorClassifier, resolve_asset_class
from .ledger import (
    compute_growth,
    compute_money_manager_data,
    empty_money_manager_data,
    parse_categories,
)
from .parsing import format_date, parse_date, parse_money
from .portfolio import (
    DEFAULT_PORTFOLIO_LAYOUT,
    PortfolioLayout,
    compute_portfolio_summary,
)

__all__ = [
    "CashFlowLayout",
    "DEFAULT_CASH_FLOW_LAYOUT",
    "DEFAULT_PORTFOLIO_LAYOUT",
    "PortfolioLayout",
    "SectorClassifier",
    "compute_cash_flow_summary",
    "compute_growth",
    "compute_money_manager_data",
    "compute_portfolio_summary",
    "empty_money_manager_data",
    "format_date",
    "parse_categories",
    "parse_date",
    "parse_money",
    "resolve_asset_class",
]
