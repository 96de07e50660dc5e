"""Tests for the ManageTransactionsUseCase."""

from datetime import date
from decimal import Decimal
from itertools import count
from unittest.mock import MagicMock

from asset_manager.application.use_cases.get_money_manager import (
    GetMoneyManagerDataUseCase,
)
from asset_manager.application.use_cases.manage_transactions import (
    ManageTransactionsUseCase,
)
from asset_manager.application.use_cases.mutation_support import (
    SETUP_REQUIRED,
)
from asset_manager.domain.models import MoneyTransaction, TransactionType


HEADER = ["Date", "Type", "Category", "Amount", "From", "To", "Note", "ID"]


def _sequential_uids():
    counter = count(1)
    return lambda: f"uid-{next(counter)}"


def _expense(amount="25", **overrides) -> MoneyTransaction:
    values = dict(
        date="2024-03-02",
        type=TransactionType.EXPENSE,
        category="Food",
        amount=Decimal(amount),
        from_account="Wallet",
        note="Lunch",
    )
    values.update(overrides)
    return MoneyTransaction.create(**values)


def _use_case(sheets, logger) -> ManageTransactionsUseCase:
    return ManageTransactionsUseCase(
        sheets,
        logger=logger,
        uid_factory=_sequential_uids(),
    )


def _read(sheets):
    return GetMoneyManagerDataUseCase(
        sheets,
        logger=MagicMock(),
        clock=lambda: date(2024, 3, 10),
    ).execute()


def test_add_appends_row_with_generated_uid(sheets, logger) -> None:
    """The appended row should carry the type label and a new uid."""
    sheets.tabs["MM_Transactions"] = [HEADER]

    result = _use_case(sheets, logger).add_transaction(_expense())

    assert result.success is True
    assert sheets.writes() == [
        (
            "append_row",
            "MM_Transactions",
            "A:H",
            ["2024-03-02", "Expense", "Food", Decimal("25"), "Wallet", "",
             "Lunch", "uid-1"],
        )
    ]


def test_added_transaction_is_visible_on_next_read(sheets, logger) -> None:
    """A successful add should show up in the following fetch."""
    sheets.tabs["MM_Accounts"] = [["Name"]]
    sheets.tabs["MM_Transactions"] = [HEADER]

    _use_case(sheets, logger).add_transaction(_expense())
    data = _read(sheets)

    assert len(data.transactions) == 1
    assert data.transactions[0].uid == "uid-1"
    assert data.transactions[0].row_index == 2
    assert data.monthly_stats.expense == Decimal("25")


def test_update_locates_row_by_uid_even_after_rows_move(
    sheets,
    logger,
) -> None:
    """The uid lookup should win over a stale row index."""
    sheets.tabs["MM_Transactions"] = [
        HEADER,
        ["2024-03-01", "Expense", "Food", "5", "Wallet", "", "", "other"],
        ["2024-03-02", "Expense", "Food", "25", "Wallet", "", "", "mine"],
    ]
    edited = _expense(amount="30", uid="mine", row_index=2)

    result = _use_case(sheets, logger).update_transaction(edited)

    assert result.success is True
    assert sheets.tabs["MM_Transactions"][2][3] == "30"
    assert sheets.tabs["MM_Transactions"][2][7] == "mine"
    assert sheets.tabs["MM_Transactions"][1][3] == "5"


def test_update_legacy_row_by_index_assigns_uid(sheets, logger) -> None:
    """Rows without an ID fall back to the row index and gain a uid."""
    sheets.tabs["MM_Transactions"] = [
        HEADER,
        ["2024-03-02", "Expense", "Food", "25", "Wallet"],
    ]

    result = _use_case(sheets, logger).update_transaction(
        _expense(amount="12"),
        row_index=2,
    )

    assert result.success is True
    assert ("update_row", "MM_Transactions", "A2:H2") == sheets.writes()[0][:3]
    assert sheets.tabs["MM_Transactions"][1][7] == "uid-1"


def test_delete_clears_row_and_disappears_from_read(sheets, logger) -> None:
    """After a delete the next fetch no longer lists the transaction."""
    sheets.tabs["MM_Accounts"] = [["Name"]]
    sheets.tabs["MM_Transactions"] = [HEADER]
    use_case = _use_case(sheets, logger)
    use_case.add_transaction(_expense())
    use_case.add_transaction(_expense(amount="7", note="Coffee"))

    result = use_case.delete_transaction(uid="uid-1")
    data = _read(sheets)

    assert result.success is True
    assert [t.uid for t in data.transactions] == ["uid-2"]
    assert data.monthly_stats.expense == Decimal("7")


def test_delete_by_row_index_for_legacy_rows(sheets, logger) -> None:
    """Without a uid the captured row index is cleared."""
    sheets.tabs["MM_Transactions"] = [
        HEADER,
        ["2024-03-02", "Expense", "Food", "25", "Wallet"],
    ]

    result = _use_case(sheets, logger).delete_transaction(row_index=2)

    assert result.success is True
    assert sheets.writes() == [("clear_range", "MM_Transactions", "A2:H2")]


def test_unsaved_missing_and_header_rows_are_rejected(sheets, logger) -> None:
    """Bad targets fail without writing anything."""
    sheets.tabs["MM_Transactions"] = [HEADER]
    use_case = _use_case(sheets, logger)

    unsaved = use_case.update_transaction(_expense())
    missing = use_case.delete_transaction(uid="ghost")
    header = use_case.delete_transaction(row_index=1)

    assert unsaved.error == "Transaction has not been saved"
    assert missing.error == "Transaction not found"
    assert header.error == "Invalid transaction row: 1"
    assert sheets.writes() == []


def test_missing_configuration_reports_setup_required(
    unconfigured_sheets,
    logger,
) -> None:
    """Without credentials the mutation fails before any write."""
    use_case = _use_case(unconfigured_sheets, logger)

    result = use_case.add_transaction(_expense())

    assert result.success is False
    assert result.error == SETUP_REQUIRED
    assert unconfigured_sheets.tabs == {}


def test_transport_failure_returns_generic_error(logger) -> None:
    """Unexpected failures are logged and reported, not raised."""
    repository = MagicMock()
    repository.append_row.side_effect = RuntimeError("HTTP 500")

    result = _use_case(repository, logger).add_transaction(_expense())

    assert result.success is False
    assert result.error == "Failed to write to Google Sheets"
    logger.exception.assert_called_once()
