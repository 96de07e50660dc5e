"""Use case to add, edit and delete money manager transactions."""

import uuid
from collections.abc import Callable

from asset_manager.application.ports.sheets_repository import (
    SheetsRepositoryPort,
)
from asset_manager.application.use_cases.constants import (
    DEFAULT_SHEET_NAMES,
    TRANSACTION_UID_RANGE,
    TRANSACTIONS_RANGE,
    SheetNames,
    transaction_row_range,
)
from asset_manager.application.use_cases.mutation_support import run_mutation
from asset_manager.domain.models import MoneyTransaction, MutationResult
from asset_manager.domain.services.parsing import cell
from asset_manager.infrastructure.logging.logger import get_app_logger


def _new_uid() -> str:
    return uuid.uuid4().hex


class ManageTransactionsUseCase:
    """Write money manager transactions to the transactions tab.

    Edits and deletes locate their row by the stable ID column when the
    transaction carries one, so a row that moved after the last read is
    still found. Legacy rows without an ID fall back to the row index
    captured at read time.
    """

    def __init__(
        self,
        sheets_repository: SheetsRepositoryPort,
        logger=None,
        sheet_names: SheetNames = DEFAULT_SHEET_NAMES,
        uid_factory: Callable[[], str] = _new_uid,
    ) -> None:
        self._sheets_repository = sheets_repository
        self._logger = logger or get_app_logger()
        self._tab = sheet_names.transactions
        self._uid_factory = uid_factory

    def add_transaction(self, transaction: MoneyTransaction) -> MutationResult:
        """Append a transaction with a freshly generated stable ID."""

        def _append() -> None:
            row = self._to_row(transaction, self._uid_factory())
            self._sheets_repository.append_row(
                self._tab,
                TRANSACTIONS_RANGE,
                row,
            )

        return run_mutation(
            _append,
            description=f"Add {transaction.type_label} transaction",
            failure_message="Failed to write to Google Sheets",
            logger=self._logger,
        )

    def update_transaction(
        self,
        transaction: MoneyTransaction,
        row_index: int | None = None,
    ) -> MutationResult:
        """Overwrite an existing transaction row.

        Args:
            transaction: New values; its ``uid`` and ``row_index`` identify
                the row.
            row_index: Explicit 1-based row, overriding
                ``transaction.row_index`` for rows without an ID.

        Returns:
            MutationResult: Outcome of the write.
        """

        def _update() -> MutationResult | None:
            target = self._resolve_row(
                transaction.uid,
                row_index or transaction.row_index,
            )
            if isinstance(target, MutationResult):
                return target
            row = self._to_row(
                transaction,
                transaction.uid or self._uid_factory(),
            )
            self._sheets_repository.update_row(
                self._tab,
                transaction_row_range(target),
                row,
            )
            return None

        return run_mutation(
            _update,
            description=f"Update transaction {transaction.id}",
            failure_message="Failed to update Google Sheets",
            logger=self._logger,
        )

    def delete_transaction(
        self,
        row_index: int | None = None,
        uid: str | None = None,
    ) -> MutationResult:
        """Clear a transaction row.

        Args:
            row_index: 1-based row captured when the transaction was read.
            uid: Stable ID of the transaction; preferred when given.

        Returns:
            MutationResult: Outcome of the write.
        """

        def _delete() -> MutationResult | None:
            target = self._resolve_row(uid, row_index)
            if isinstance(target, MutationResult):
                return target
            self._sheets_repository.clear_range(
                self._tab,
                transaction_row_range(target),
            )
            return None

        return run_mutation(
            _delete,
            description=f"Delete transaction uid={uid} row={row_index}",
            failure_message="Failed to delete from Google Sheets",
            logger=self._logger,
        )

    def _resolve_row(
        self,
        uid: str | None,
        row_index: int | None,
    ) -> int | MutationResult:
        if uid:
            rows = self._sheets_repository.read_range(
                self._tab,
                TRANSACTION_UID_RANGE,
            )
            for index, row in enumerate(rows):
                if index > 0 and cell(row, 0) == uid:
                    return index + 1
            return MutationResult.failed("Transaction not found")
        if row_index is None:
            return MutationResult.failed("Transaction has not been saved")
        if row_index < 2:
            return MutationResult.failed(
                f"Invalid transaction row: {row_index}"
            )
        return row_index

    @staticmethod
    def _to_row(transaction: MoneyTransaction, uid: str) -> list:
        return [
            transaction.date,
            transaction.type_label,
            transaction.category,
            transaction.amount,
            transaction.from_account or "",
            transaction.to_account or "",
            transaction.note or "",
            uid,
        ]


__all__ = ["ManageTransactionsUseCase"]
