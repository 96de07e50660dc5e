"""Domain models for the money manager ledger."""

from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum


class TransactionType(str, Enum):
    """Kind of ledger movement."""

    INCOME = "Income"
    EXPENSE = "Expense"
    TRANSFER = "Transfer"

    @classmethod
    def parse(cls, raw: str | None) -> "TransactionType | None":
        """Return the matching member, or None for unknown values."""
        if not raw:
            return None
        cleaned = raw.strip()
        for member in cls:
            if member.value.lower() == cleaned.lower():
                return member
        return None


class InvalidTransactionError(ValueError):
    """A transaction payload violates the rules of its type."""


# Accounts each transaction type must reference; the others are dropped.
_REQUIRED_ACCOUNTS = {
    TransactionType.INCOME: ("to_account",),
    TransactionType.EXPENSE: ("from_account",),
    TransactionType.TRANSFER: ("from_account", "to_account"),
}


@dataclass(frozen=True)
class MoneyAccount:
    """Cash or bank account tracked in the ledger.

    Attributes:
        name: Account name, unique key.
        category: Free-text grouping (Bank, E-Wallet, Cash...).
        logo_url: Optional logo for the UI.
        initial_balance: Opening balance.
        current_balance: Running balance computed by the sheet itself.
    """

    name: str
    category: str
    logo_url: str
    initial_balance: Decimal
    current_balance: Decimal


@dataclass(frozen=True)
class MoneyTransaction:
    """A single ledger row.

    ``row_index`` is the 1-based sheet row the transaction was read from and
    is None for transactions not yet persisted. ``uid`` is the stable
    identifier stored in the ID column; legacy rows have none.
    """

    id: str
    date: str
    type: TransactionType | str
    category: str
    amount: Decimal
    from_account: str | None = None
    to_account: str | None = None
    note: str | None = None
    row_index: int | None = None
    uid: str | None = None

    @property
    def transaction_type(self) -> TransactionType | None:
        if isinstance(self.type, TransactionType):
            return self.type
        return TransactionType.parse(self.type)

    @property
    def type_label(self) -> str:
        if isinstance(self.type, TransactionType):
            return self.type.value
        return str(self.type)

    @classmethod
    def create(
        cls,
        *,
        date: str,
        type: TransactionType | str,
        category: str,
        amount: Decimal,
        from_account: str | None = None,
        to_account: str | None = None,
        note: str | None = None,
        id: str = "",
        row_index: int | None = None,
        uid: str | None = None,
    ) -> "MoneyTransaction":
        """Build a transaction, enforcing the account rules of its type.

        Income needs ``to_account``, Expense needs ``from_account`` and
        Transfer needs both. Accounts that do not apply to the type are
        discarded.

        Raises:
            InvalidTransactionError: On an unknown type, a negative amount,
                or a missing required account.
        """
        tx_type = (
            type
            if isinstance(type, TransactionType)
            else TransactionType.parse(type)
        )
        if tx_type is None:
            raise InvalidTransactionError(f"Unknown transaction type: {type!r}")
        if amount < 0:
            raise InvalidTransactionError("Amount must not be negative")
        accounts = {
            "from_account": (from_account or "").strip() or None,
            "to_account": (to_account or "").strip() or None,
        }
        required = _REQUIRED_ACCOUNTS[tx_type]
        missing = [name for name in required if not accounts[name]]
        if missing:
            raise InvalidTransactionError(
                f"{tx_type.value} transaction requires {', '.join(missing)}"
            )
        for name in accounts:
            if name not in required:
                accounts[name] = None
        return cls(
            id=id,
            date=date,
            type=tx_type,
            category=category,
            amount=amount,
            note=note,
            row_index=row_index,
            uid=uid,
            **accounts,
        )

    def with_uid(self, uid: str) -> "MoneyTransaction":
        return replace(self, uid=uid)


@dataclass(frozen=True)
class MonthlyStats:
    """Income and expense for the current month with growth versus the prior."""

    income: Decimal
    expense: Decimal
    income_growth: Decimal
    expense_growth: Decimal


@dataclass(frozen=True)
class CategorySpending:
    """Net spending for a category against a synthetic budget limit."""

    category: str
    spent: Decimal
    limit: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class GraphDataPoint:
    """Monthly income/expense pair labelled with a short month name."""

    name: str
    income: Decimal
    expense: Decimal


@dataclass(frozen=True)
class Bill:
    """Future-dated expense shown as an upcoming bill."""

    id: str
    name: str
    date: str
    amount: Decimal
    is_paid: bool = False


@dataclass(frozen=True)
class CategoryTaxonomy:
    """Income and expense category lists."""

    income_categories: list[str]
    expense_categories: list[str]

    def for_type(self, tx_type: TransactionType) -> list[str]:
        if tx_type == TransactionType.INCOME:
            return self.income_categories
        return self.expense_categories


@dataclass(frozen=True)
class MoneyManagerData:
    """Everything the money manager view renders."""

    accounts: list[MoneyAccount]
    transactions: list[MoneyTransaction]
    total_balance: Decimal
    monthly_stats: MonthlyStats
    category_spending: list[CategorySpending]
    graph_data: list[GraphDataPoint]
    upcoming_bills: list[Bill]
    categories: list[str]
    income_categories: list[str] = field(default_factory=list)
    expense_categories: list[str] = field(default_factory=list)


__all__ = [
    "Bill",
    "CategorySpending",
    "CategoryTaxonomy",
    "GraphDataPoint",
    "InvalidTransactionError",
    "MoneyAccount",
    "MoneyManagerData",
    "MoneyTransaction",
    "MonthlyStats",
    "TransactionType",
]
