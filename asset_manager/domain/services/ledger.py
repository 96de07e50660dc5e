"""Money manager ledger aggregation.

Turns the accounts, transactions and categories tabs into the data behind
the money manager view: balances, current-month income and expense with
month-over-month growth, net spending per category, a seven-month income
and expense series, and upcoming bills.
"""

from collections import defaultdict
from datetime import date
from decimal import Decimal
from logging import Logger

from asset_manager.domain.constants import (
    BUDGET_LIMIT_FLOOR,
    BUDGET_LIMIT_HEADROOM,
    DEFAULT_ACCOUNT_CATEGORY,
    DEFAULT_EXPENSE_CATEGORIES,
    DEFAULT_INCOME_CATEGORIES,
    GRAPH_MONTHS,
    UNCATEGORIZED,
)
from asset_manager.domain.models import (
    Bill,
    CategorySpending,
    CategoryTaxonomy,
    GraphDataPoint,
    MoneyAccount,
    MoneyManagerData,
    MoneyTransaction,
    MonthlyStats,
    TransactionType,
)
from asset_manager.domain.services.parsing import (
    cell,
    format_date,
    parse_date,
    parse_money,
    raw_cell,
)


# Transactions tab: Date, Type, Category, Amount, From, To, Note, ID.
TX_DATE, TX_TYPE, TX_CATEGORY, TX_AMOUNT = 0, 1, 2, 3
TX_FROM, TX_TO, TX_NOTE, TX_UID = 4, 5, 6, 7

# Accounts tab: Name, Category, Logo URL, Initial Balance, Current Balance.
ACC_NAME, ACC_CATEGORY, ACC_LOGO, ACC_INITIAL, ACC_CURRENT = 0, 1, 2, 3, 4

# Categories tab: expense names in column A, income names in column B.
CAT_EXPENSE, CAT_INCOME = 0, 1

_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def compute_growth(current: Decimal, previous: Decimal) -> Decimal:
    """Return the percentage change from previous to current.

    A zero previous value yields 100 when current is positive and 0
    otherwise.
    """
    if previous == 0:
        return _HUNDRED if current > 0 else _ZERO
    return (current - previous) / previous * _HUNDRED


def budget_limit(spent: Decimal) -> Decimal:
    """Return the synthetic budget limit shown for a category."""
    return max(spent * Decimal(BUDGET_LIMIT_HEADROOM), Decimal(BUDGET_LIMIT_FLOOR))


def parse_categories(rows: list[list[str]]) -> CategoryTaxonomy:
    """Read the two category columns, falling back to the defaults.

    Args:
        rows: Raw rows of the categories tab, header included.

    Returns:
        CategoryTaxonomy: Income and expense lists in sheet order.
    """
    expense: list[str] = []
    income: list[str] = []
    for row in rows[1:]:
        expense_name = cell(row, CAT_EXPENSE)
        if expense_name:
            expense.append(expense_name)
        income_name = cell(row, CAT_INCOME)
        if income_name:
            income.append(income_name)
    return CategoryTaxonomy(
        income_categories=income or list(DEFAULT_INCOME_CATEGORIES),
        expense_categories=expense or list(DEFAULT_EXPENSE_CATEGORIES),
    )


def default_taxonomy() -> CategoryTaxonomy:
    return CategoryTaxonomy(
        income_categories=list(DEFAULT_INCOME_CATEGORIES),
        expense_categories=list(DEFAULT_EXPENSE_CATEGORIES),
    )


def parse_accounts(rows: list[list[str]]) -> list[MoneyAccount]:
    """Read accounts, trusting the sheet's own running balance.

    Args:
        rows: Raw rows of the accounts tab, header included.

    Returns:
        list[MoneyAccount]: Accounts sorted by current balance, descending.
    """
    accounts = [
        MoneyAccount(
            name=cell(row, ACC_NAME),
            category=cell(row, ACC_CATEGORY) or DEFAULT_ACCOUNT_CATEGORY,
            logo_url=cell(row, ACC_LOGO),
            initial_balance=parse_money(raw_cell(row, ACC_INITIAL)),
            current_balance=parse_money(raw_cell(row, ACC_CURRENT)),
        )
        for row in rows[1:]
        if cell(row, ACC_NAME)
    ]
    accounts.sort(key=lambda account: account.current_balance, reverse=True)
    return accounts


def parse_transactions(
    rows: list[list[str]],
    *,
    today: date,
    logger: Logger,
) -> list[tuple[MoneyTransaction, date]]:
    """Read transaction rows in sheet order.

    Rows without a date or amount (including cleared rows) are skipped, as
    are rows whose date cannot be parsed.

    Args:
        rows: Raw rows of the transactions tab, header included.
        today: Reference date for empty date cells.
        logger: Logger used for skipped rows.

    Returns:
        list[tuple[MoneyTransaction, date]]: Each transaction with its
        parsed date.
    """
    parsed: list[tuple[MoneyTransaction, date]] = []
    for index, row in enumerate(rows):
        if index == 0:
            continue
        raw_date = cell(row, TX_DATE)
        if not raw_date or not cell(row, TX_AMOUNT):
            continue
        try:
            tx_date = parse_date(raw_date, today=today)
        except ValueError as exc:
            logger.warning(f"Skipping transaction row {index + 1}: {exc}")
            continue

        raw_type = cell(row, TX_TYPE)
        tx_type = TransactionType.parse(raw_type)
        if tx_type is None:
            logger.warning(
                f"Transaction row {index + 1} has unknown type {raw_type!r}"
            )
        uid = cell(row, TX_UID) or None
        parsed.append(
            (
                MoneyTransaction(
                    id=uid or f"mtx-{index}",
                    row_index=index + 1,
                    uid=uid,
                    date=format_date(tx_date),
                    type=tx_type or raw_type,
                    category=cell(row, TX_CATEGORY) or UNCATEGORIZED,
                    amount=parse_money(raw_cell(row, TX_AMOUNT)),
                    from_account=cell(row, TX_FROM) or None,
                    to_account=cell(row, TX_TO) or None,
                    note=cell(row, TX_NOTE) or None,
                ),
                tx_date,
            )
        )
    return parsed


def _previous_month(today: date) -> tuple[int, int]:
    if today.month == 1:
        return today.year - 1, 12
    return today.year, today.month - 1


def compute_money_manager_data(
    account_rows: list[list[str]],
    transaction_rows: list[list[str]],
    category_rows: list[list[str]] | None = None,
    *,
    today: date,
    logger: Logger,
) -> MoneyManagerData:
    """Aggregate the ledger tabs into the money manager view.

    Category spending follows the net-spending rule: within the current
    month an Expense adds to its category and an Income under the same
    category name subtracts from it. Only categories left with a positive
    total are reported.

    Args:
        account_rows: Raw rows of the accounts tab.
        transaction_rows: Raw rows of the transactions tab.
        category_rows: Raw rows of the categories tab, if available.
        today: Date that defines the current and previous month.
        logger: Logger used for skipped rows and progress.

    Returns:
        MoneyManagerData: Fully computed view data.
    """
    taxonomy = parse_categories(category_rows or [])
    accounts = parse_accounts(account_rows)
    parsed = parse_transactions(transaction_rows, today=today, logger=logger)

    current_key = (today.year, today.month)
    previous_key = _previous_month(today)
    income: dict[tuple[int, int], Decimal] = defaultdict(Decimal)
    expense: dict[tuple[int, int], Decimal] = defaultdict(Decimal)
    category_totals: dict[str, Decimal] = {}
    seen_categories: set[str] = set()
    upcoming: list[Bill] = []

    for transaction, tx_date in parsed:
        if transaction.category != UNCATEGORIZED:
            seen_categories.add(transaction.category)
        tx_type = transaction.transaction_type
        month_key = (tx_date.year, tx_date.month)

        if tx_type == TransactionType.INCOME:
            income[month_key] += transaction.amount
            if month_key == current_key:
                category_totals[transaction.category] = (
                    category_totals.get(transaction.category, _ZERO)
                    - transaction.amount
                )
        elif tx_type == TransactionType.EXPENSE:
            expense[month_key] += transaction.amount
            if month_key == current_key:
                category_totals[transaction.category] = (
                    category_totals.get(transaction.category, _ZERO)
                    + transaction.amount
                )

        if tx_type == TransactionType.EXPENSE and tx_date > today:
            upcoming.append(
                Bill(
                    id=f"bill-{transaction.row_index - 1}",
                    name=transaction.note or transaction.category,
                    date=transaction.date,
                    amount=transaction.amount,
                )
            )

    monthly_stats = MonthlyStats(
        income=income.get(current_key, _ZERO),
        expense=expense.get(current_key, _ZERO),
        income_growth=compute_growth(
            income.get(current_key, _ZERO),
            income.get(previous_key, _ZERO),
        ),
        expense_growth=compute_growth(
            expense.get(current_key, _ZERO),
            expense.get(previous_key, _ZERO),
        ),
    )

    category_spending = [
        CategorySpending(
            category=category,
            spent=spent,
            limit=budget_limit(spent),
            percentage=spent / budget_limit(spent) * _HUNDRED,
        )
        for category, spent in category_totals.items()
        if spent > 0
    ]
    category_spending.sort(key=lambda item: item.spent, reverse=True)

    months = sorted(set(income) | set(expense))[-GRAPH_MONTHS:]
    graph_data = [
        GraphDataPoint(
            name=_MONTH_ABBR[month - 1],
            income=income.get((year, month), _ZERO),
            expense=expense.get((year, month), _ZERO),
        )
        for year, month in months
    ]

    transactions = sorted(
        (transaction for transaction, _ in parsed),
        key=lambda transaction: transaction.date,
        reverse=True,
    )
    upcoming.sort(key=lambda bill: bill.date)
    total_balance = sum((a.current_balance for a in accounts), _ZERO)
    categories = sorted(seen_categories) or list(taxonomy.expense_categories)

    logger.info(
        f"Money manager computed: accounts={len(accounts)}, "
        f"transactions={len(transactions)}, total_balance={total_balance}"
    )
    return MoneyManagerData(
        accounts=accounts,
        transactions=transactions,
        total_balance=total_balance,
        monthly_stats=monthly_stats,
        category_spending=category_spending,
        graph_data=graph_data,
        upcoming_bills=upcoming,
        categories=categories,
        income_categories=taxonomy.income_categories,
        expense_categories=taxonomy.expense_categories,
    )


def empty_money_manager_data() -> MoneyManagerData:
    """Return the zeroed view with the default category lists."""
    taxonomy = default_taxonomy()
    return MoneyManagerData(
        accounts=[],
        transactions=[],
        total_balance=_ZERO,
        monthly_stats=MonthlyStats(
            income=_ZERO,
            expense=_ZERO,
            income_growth=_ZERO,
            expense_growth=_ZERO,
        ),
        category_spending=[],
        graph_data=[],
        upcoming_bills=[],
        categories=[
            *taxonomy.expense_categories,
            *taxonomy.income_categories,
        ],
        income_categories=taxonomy.income_categories,
        expense_categories=taxonomy.expense_categories,
    )


__all__ = [
    "budget_limit",
    "compute_growth",
    "compute_money_manager_data",
    "default_taxonomy",
    "empty_money_manager_data",
    "parse_accounts",
    "parse_categories",
    "parse_transactions",
]
