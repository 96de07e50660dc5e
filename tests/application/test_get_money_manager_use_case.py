"""Tests for the GetMoneyManagerDataUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from asset_manager.application.use_cases.get_money_manager import (
    GetMoneyManagerDataUseCase,
)
from asset_manager.domain.constants import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
)


def _seed(sheets) -> None:
    sheets.tabs["MM_Accounts"] = [
        ["Name", "Category", "Logo URL", "Initial Balance", "Current Balance"],
        ["Wallet", "Cash", "", "0", "150"],
    ]
    sheets.tabs["MM_Transactions"] = [
        ["Date", "Type", "Category", "Amount", "From", "To", "Note", "ID"],
        ["01/03/2024", "Expense", "Food", "25", "Wallet", "", "", "a1"],
    ]


def test_execute_combines_the_ledger_tabs(sheets, logger) -> None:
    """Accounts, transactions and categories feed the view."""
    _seed(sheets)
    sheets.tabs["MM_Categories"] = [
        ["Expense Category", "Income Category"],
        ["Food", "Salary"],
    ]
    use_case = GetMoneyManagerDataUseCase(
        sheets,
        logger=logger,
        clock=lambda: date(2024, 3, 10),
    )

    data = use_case.execute()

    assert data.total_balance == Decimal("150")
    assert data.monthly_stats.expense == Decimal("25")
    assert data.transactions[0].uid == "a1"
    assert data.expense_categories == ["Food"]
    assert ("read_range", "MM_Transactions", "A:H") in sheets.calls


def test_missing_categories_tab_uses_defaults(sheets, logger) -> None:
    """Only the categories tab missing should still compute the view."""
    _seed(sheets)
    use_case = GetMoneyManagerDataUseCase(
        sheets,
        logger=logger,
        clock=lambda: date(2024, 3, 10),
    )

    data = use_case.execute()

    assert data.total_balance == Decimal("150")
    assert data.income_categories == list(DEFAULT_INCOME_CATEGORIES)
    logger.warning.assert_called_once()


def test_uninitialized_spreadsheet_returns_default_view(sheets, logger) -> None:
    """Missing ledger tabs yield the zeroed view with default lists."""
    data = GetMoneyManagerDataUseCase(sheets, logger=logger).execute()

    assert data.accounts == []
    assert data.expense_categories == list(DEFAULT_EXPENSE_CATEGORIES)


def test_unexpected_failure_is_logged(logger) -> None:
    """Transport failures are logged with a traceback."""
    repository = MagicMock()
    repository.read_range.side_effect = ConnectionError("offline")

    data = GetMoneyManagerDataUseCase(repository, logger=logger).execute()

    assert data.transactions == []
    logger.exception.assert_called_once()
