"""Use case to maintain the income and expense category lists."""

from asset_manager.application.ports.sheets_repository import (
    SheetsRepositoryPort,
)
from asset_manager.application.use_cases.constants import (
    CATEGORIES_RANGE,
    DEFAULT_SHEET_NAMES,
    EXPENSE_CATEGORY_COLUMN,
    INCOME_CATEGORY_COLUMN,
    SheetNames,
)
from asset_manager.application.use_cases.mutation_support import run_mutation
from asset_manager.domain.models import MutationResult, TransactionType
from asset_manager.domain.services.parsing import cell
from asset_manager.infrastructure.logging.logger import get_app_logger


_COLUMNS = {
    TransactionType.EXPENSE: (0, EXPENSE_CATEGORY_COLUMN),
    TransactionType.INCOME: (1, INCOME_CATEGORY_COLUMN),
}


class ManageCategoriesUseCase:
    """Add, rename and delete categories in the categories tab.

    Expense names live in column A and income names in column B. Rows are
    located by re-reading the column and matching the exact name; deleted
    names leave a blank cell that the next addition reuses.
    """

    def __init__(
        self,
        sheets_repository: SheetsRepositoryPort,
        logger=None,
        sheet_names: SheetNames = DEFAULT_SHEET_NAMES,
    ) -> None:
        self._sheets_repository = sheets_repository
        self._logger = logger or get_app_logger()
        self._tab = sheet_names.categories

    def add_category(
        self,
        name: str,
        category_type: TransactionType | str,
    ) -> MutationResult:
        """Write a new category into the first free cell of its column."""
        cleaned = (name or "").strip()
        column = self._column_for(category_type)
        if not cleaned:
            return MutationResult.failed("Category name required")
        if column is None:
            return MutationResult.failed(
                f"Unsupported category type: {category_type}"
            )
        index, letter = column

        def _add() -> MutationResult | None:
            rows = self._read_rows()
            values = [cell(row, index) for row in rows[1:]]
            if cleaned in values:
                return MutationResult.failed("Category already exists")
            target = len(rows) + 1
            for offset, value in enumerate(values):
                if not value:
                    target = offset + 2
                    break
            self._sheets_repository.update_row(
                self._tab,
                f"{letter}{target}",
                [cleaned],
            )
            return None

        return run_mutation(
            _add,
            description=f"Add category {cleaned}",
            failure_message="Failed to write to Google Sheets",
            logger=self._logger,
        )

    def update_category(
        self,
        old_name: str,
        new_name: str,
        category_type: TransactionType | str,
    ) -> MutationResult:
        """Rename a category in place."""
        cleaned = (new_name or "").strip()
        column = self._column_for(category_type)
        if not cleaned:
            return MutationResult.failed("Category name required")
        if column is None:
            return MutationResult.failed(
                f"Unsupported category type: {category_type}"
            )
        index, letter = column

        def _update() -> MutationResult | None:
            target = self._find_row(old_name, index)
            if target is None:
                return MutationResult.failed("Category not found")
            self._sheets_repository.update_row(
                self._tab,
                f"{letter}{target}",
                [cleaned],
            )
            return None

        return run_mutation(
            _update,
            description=f"Rename category {old_name} to {cleaned}",
            failure_message="Failed to update Google Sheets",
            logger=self._logger,
        )

    def delete_category(
        self,
        name: str,
        category_type: TransactionType | str,
    ) -> MutationResult:
        """Blank the cell holding a category."""
        column = self._column_for(category_type)
        if column is None:
            return MutationResult.failed(
                f"Unsupported category type: {category_type}"
            )
        index, letter = column

        def _delete() -> MutationResult | None:
            target = self._find_row(name, index)
            if target is None:
                return MutationResult.failed("Category not found")
            self._sheets_repository.clear_range(
                self._tab,
                f"{letter}{target}",
            )
            return None

        return run_mutation(
            _delete,
            description=f"Delete category {name}",
            failure_message="Failed to update Google Sheets",
            logger=self._logger,
        )

    def _read_rows(self) -> list[list[str]]:
        return self._sheets_repository.read_range(self._tab, CATEGORIES_RANGE)

    def _find_row(self, name: str, index: int) -> int | None:
        for offset, row in enumerate(self._read_rows()):
            if offset > 0 and cell(row, index) == name:
                return offset + 1
        return None

    @staticmethod
    def _column_for(category_type: TransactionType | str):
        tx_type = (
            category_type
            if isinstance(category_type, TransactionType)
            else TransactionType.parse(category_type)
        )
        return _COLUMNS.get(tx_type)


__all__ = ["ManageCategoriesUseCase"]
