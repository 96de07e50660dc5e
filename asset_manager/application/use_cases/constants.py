"""Tab names, ranges and header rows shared by the use cases."""

from dataclasses import dataclass


@dataclass(frozen=True)
class SheetNames:
    """Tab titles inside the spreadsheet (case sensitive)."""

    trades: str = "Transaction"
    cash_flow: str = "Cash Flow"
    portfolio: str = "Portfolio"
    accounts: str = "MM_Accounts"
    transactions: str = "MM_Transactions"
    categories: str = "MM_Categories"

    @property
    def ledger_tabs(self) -> tuple[str, str, str]:
        """Tabs created by the database bootstrap."""
        return (self.accounts, self.transactions, self.categories)


DEFAULT_SHEET_NAMES = SheetNames()

PORTFOLIO_RANGE = "A:N"
CASH_FLOW_RANGE = "A:H"
DEPOSIT_RANGE = "A:C"
CONVERSION_RANGE = "E:H"
TRADES_RANGE = "A:G"
ACCOUNTS_RANGE = "A:E"
TRANSACTIONS_RANGE = "A:H"
TRANSACTION_UID_RANGE = "H:H"
CATEGORIES_RANGE = "A:B"

TRANSACTION_FIRST_COLUMN = "A"
TRANSACTION_LAST_COLUMN = "H"
EXPENSE_CATEGORY_COLUMN = "A"
INCOME_CATEGORY_COLUMN = "B"

ACCOUNTS_HEADER = [
    "Name",
    "Category",
    "Logo URL",
    "Initial Balance",
    "Current Balance",
]
TRANSACTIONS_HEADER = [
    "Date",
    "Type",
    "Category",
    "Amount",
    "From Account",
    "To Account",
    "Note",
    "ID",
]
CATEGORIES_HEADER = ["Expense Category", "Income Category"]


def transaction_row_range(row_index: int) -> str:
    """Return the A1 range covering one transaction row."""
    return (
        f"{TRANSACTION_FIRST_COLUMN}{row_index}:"
        f"{TRANSACTION_LAST_COLUMN}{row_index}"
    )


__all__ = [
    "ACCOUNTS_HEADER",
    "ACCOUNTS_RANGE",
    "CASH_FLOW_RANGE",
    "CATEGORIES_HEADER",
    "CATEGORIES_RANGE",
    "CONVERSION_RANGE",
    "DEFAULT_SHEET_NAMES",
    "DEPOSIT_RANGE",
    "EXPENSE_CATEGORY_COLUMN",
    "INCOME_CATEGORY_COLUMN",
    "PORTFOLIO_RANGE",
    "SheetNames",
    "TRADES_RANGE",
    "TRANSACTIONS_HEADER",
    "TRANSACTIONS_RANGE",
    "TRANSACTION_UID_RANGE",
    "transaction_row_range",
]
