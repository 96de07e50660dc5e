"""Tests for the money manager ledger aggregation."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from asset_manager.domain.constants import (
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
)
from asset_manager.domain.models import TransactionType
from asset_manager.domain.services.ledger import (
    budget_limit,
    compute_growth,
    compute_money_manager_data,
    empty_money_manager_data,
    parse_accounts,
    parse_categories,
    parse_transactions,
)


TODAY = date(2024, 3, 15)

ACCOUNT_ROWS = [
    ["Name", "Category", "Logo URL", "Initial Balance", "Current Balance"],
    ["Wallet", "Cash", "", "100", "RM 80"],
    ["Maybank", "", "", "1,000", "RM 2,500.50"],
    ["", "Bank", "", "1", "1"],
]

TX_HEADER = ["Date", "Type", "Category", "Amount", "From", "To", "Note", "ID"]


def _compute(transaction_rows, category_rows=None, logger=None):
    return compute_money_manager_data(
        ACCOUNT_ROWS,
        transaction_rows,
        category_rows,
        today=TODAY,
        logger=logger or MagicMock(),
    )


def test_compute_growth_edge_cases() -> None:
    """Growth from zero is 100 for positive values, otherwise 0."""
    assert compute_growth(Decimal("50"), Decimal("0")) == Decimal("100")
    assert compute_growth(Decimal("0"), Decimal("0")) == Decimal("0")
    assert compute_growth(Decimal("150"), Decimal("100")) == Decimal("50")
    assert compute_growth(Decimal("50"), Decimal("100")) == Decimal("-50")


def test_budget_limit_has_floor_and_headroom() -> None:
    """The limit is 120% of spending with a floor of 500."""
    assert budget_limit(Decimal("100")) == Decimal("500")
    assert budget_limit(Decimal("1000")) == Decimal("1200.0")


def test_parse_accounts_sorts_by_balance_and_defaults_category() -> None:
    """Nameless rows are dropped and balances come from the sheet."""
    accounts = parse_accounts(ACCOUNT_ROWS)

    assert [a.name for a in accounts] == ["Maybank", "Wallet"]
    assert accounts[0].current_balance == Decimal("2500.50")
    assert accounts[0].category == "General"
    assert accounts[1].initial_balance == Decimal("100")


def test_parse_categories_falls_back_per_list() -> None:
    """An empty column should fall back to its own default list."""
    taxonomy = parse_categories(
        [["Expense Category", "Income Category"], ["Groceries", ""], ["Rent"]]
    )

    assert taxonomy.expense_categories == ["Groceries", "Rent"]
    assert taxonomy.income_categories == list(DEFAULT_INCOME_CATEGORIES)
    assert parse_categories([]).expense_categories == list(
        DEFAULT_EXPENSE_CATEGORIES
    )


def test_parse_transactions_skips_blank_and_bad_rows() -> None:
    """Cleared rows are skipped silently and bad dates are logged."""
    logger = MagicMock()
    rows = [
        TX_HEADER,
        ["01/03/2024", "Expense", "Food", "12.50", "Wallet", "", "Lunch", "u1"],
        ["", "", "", "", "", "", "", ""],
        ["someday", "Expense", "Food", "5", "Wallet"],
        ["2024-03-02", "Income", "", "100", "", "Maybank"],
    ]

    parsed = parse_transactions(rows, today=TODAY, logger=logger)

    assert len(parsed) == 2
    first, first_date = parsed[0]
    assert first.id == "u1"
    assert first.uid == "u1"
    assert first.row_index == 2
    assert first.date == "2024-03-01"
    assert first_date == date(2024, 3, 1)
    assert first.transaction_type == TransactionType.EXPENSE
    second, _ = parsed[1]
    assert second.id == "mtx-4"
    assert second.uid is None
    assert second.row_index == 5
    assert second.category == "Uncategorized"
    logger.warning.assert_called_once()


def test_net_spending_per_category_for_current_month() -> None:
    """Income in an expense category offsets it; other months are ignored."""
    rows = [
        TX_HEADER,
        ["02/03/2024", "Expense", "Food", "100", "Wallet"],
        ["05/03/2024", "Income", "Food", "30", "", "Wallet"],
        ["20/02/2024", "Expense", "Food", "999", "Wallet"],
        ["06/03/2024", "Expense", "Transport", "40", "Maybank"],
        ["07/03/2024", "Income", "Salary", "5000", "", "Maybank"],
    ]

    data = _compute(rows)

    spending = {item.category: item.spent for item in data.category_spending}
    assert spending == {"Food": Decimal("70"), "Transport": Decimal("40")}
    assert [item.category for item in data.category_spending] == [
        "Food",
        "Transport",
    ]
    food = data.category_spending[0]
    assert food.limit == Decimal("500")
    assert food.percentage == Decimal("14")


def test_monthly_stats_and_growth_against_previous_month() -> None:
    """Current and previous month totals feed the growth figures."""
    rows = [
        TX_HEADER,
        ["01/02/2024", "Income", "Salary", "1000", "", "Maybank"],
        ["02/02/2024", "Expense", "Food", "200", "Wallet"],
        ["01/03/2024", "Income", "Salary", "1500", "", "Maybank"],
        ["02/03/2024", "Expense", "Food", "100", "Wallet"],
        ["03/03/2024", "Transfer", "", "300", "Maybank", "Wallet"],
    ]

    stats = _compute(rows).monthly_stats

    assert stats.income == Decimal("1500")
    assert stats.expense == Decimal("100")
    assert stats.income_growth == Decimal("50")
    assert stats.expense_growth == Decimal("-50")


def test_growth_wraps_january_to_previous_december() -> None:
    """January compares against December of the previous year."""
    rows = [
        TX_HEADER,
        ["10/12/2023", "Income", "Salary", "100", "", "Maybank"],
        ["10/01/2024", "Income", "Salary", "300", "", "Maybank"],
    ]

    data = compute_money_manager_data(
        ACCOUNT_ROWS,
        rows,
        today=date(2024, 1, 20),
        logger=MagicMock(),
    )

    assert data.monthly_stats.income_growth == Decimal("200")


def test_graph_keeps_last_seven_months_in_order() -> None:
    """Only the seven most recent months with activity are charted."""
    rows = [TX_HEADER]
    for month in range(1, 13):
        rows.append(
            [f"01/{month:02d}/2023", "Expense", "Food", str(month), "Wallet"]
        )
    rows.append(["01/01/2024", "Income", "Salary", "10", "", "Maybank"])

    graph = _compute(rows).graph_data

    assert [point.name for point in graph] == [
        "Jul", "Aug", "Sep", "Oct", "Nov", "Dec", "Jan",
    ]
    assert graph[0].expense == Decimal("7")
    assert graph[-1].income == Decimal("10")
    assert graph[-1].expense == Decimal("0")


def test_upcoming_bills_are_future_expenses_sorted_by_date() -> None:
    """Only expenses after today become bills, earliest first."""
    rows = [
        TX_HEADER,
        ["30/03/2024", "Expense", "Bills", "80", "Maybank", "", "Internet"],
        ["20/03/2024", "Expense", "Bills", "120", "Maybank"],
        ["25/03/2024", "Income", "Salary", "10", "", "Maybank"],
        ["15/03/2024", "Expense", "Food", "5", "Wallet"],
    ]

    bills = _compute(rows).upcoming_bills

    assert [(b.date, b.name) for b in bills] == [
        ("2024-03-20", "Bills"),
        ("2024-03-30", "Internet"),
    ]
    assert bills[0].id == "bill-2"
    assert bills[0].is_paid is False


def test_totals_transactions_and_categories() -> None:
    """Totals, ordering and category lists come out of one computation."""
    rows = [
        TX_HEADER,
        ["01/03/2024", "Expense", "Food", "10", "Wallet"],
        ["10/03/2024", "Expense", "Transport", "20", "Wallet"],
        ["05/03/2024", "Expense", "Food", "30", "Wallet"],
    ]
    categories = [["Expense Category", "Income Category"], ["Food", "Salary"]]

    data = _compute(rows, categories)

    assert data.total_balance == Decimal("2580.50")
    assert [t.date for t in data.transactions] == [
        "2024-03-10",
        "2024-03-05",
        "2024-03-01",
    ]
    assert data.categories == ["Food", "Transport"]
    assert data.expense_categories == ["Food"]
    assert data.income_categories == ["Salary"]


def test_no_transactions_falls_back_to_expense_list() -> None:
    """Without transactions the category list is the expense taxonomy."""
    data = _compute([TX_HEADER])

    assert data.categories == list(DEFAULT_EXPENSE_CATEGORIES)
    assert data.transactions == []
    assert data.monthly_stats.income_growth == Decimal("0")


def test_empty_money_manager_data_has_defaults() -> None:
    """The zeroed view keeps both default category lists."""
    data = empty_money_manager_data()

    assert data.total_balance == Decimal("0")
    assert data.accounts == []
    assert data.income_categories == list(DEFAULT_INCOME_CATEGORIES)
    assert data.expense_categories == list(DEFAULT_EXPENSE_CATEGORIES)
