"""Use case to build the money manager view from the ledger tabs."""

from collections.abc import Callable
from datetime import date

from asset_manager.application.ports.sheets_repository import (
    SheetNotFoundError,
    SheetsRepositoryPort,
)
from asset_manager.application.use_cases.constants import (
    ACCOUNTS_RANGE,
    CATEGORIES_RANGE,
    DEFAULT_SHEET_NAMES,
    TRANSACTIONS_RANGE,
    SheetNames,
)
from asset_manager.domain.models import MoneyManagerData
from asset_manager.domain.services.ledger import (
    compute_money_manager_data,
    empty_money_manager_data,
)
from asset_manager.infrastructure.logging.logger import get_app_logger


class GetMoneyManagerDataUseCase:
    """Aggregate accounts, transactions and categories."""

    def __init__(
        self,
        sheets_repository: SheetsRepositoryPort,
        logger=None,
        sheet_names: SheetNames = DEFAULT_SHEET_NAMES,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            sheets_repository: Port providing spreadsheet range reads.
            logger: Optional logger compatible with logging.Logger-like API.
            sheet_names: Tab titles of the spreadsheet.
            clock: Callable returning "today"; month buckets and upcoming
                bills are computed relative to it.
        """
        self._sheets_repository = sheets_repository
        self._logger = logger or get_app_logger()
        self._sheet_names = sheet_names
        self._clock = clock

    def execute(self) -> MoneyManagerData:
        """Return the money manager data.

        A missing categories tab falls back to the default categories; any
        other failure is logged and yields the zeroed default view.

        Returns:
            MoneyManagerData: Computed view data.
        """
        names = self._sheet_names
        try:
            account_rows = self._sheets_repository.read_range(
                names.accounts,
                ACCOUNTS_RANGE,
            )
            transaction_rows = self._sheets_repository.read_range(
                names.transactions,
                TRANSACTIONS_RANGE,
            )
            category_rows = self._read_categories()
            self._logger.info(
                f"Fetched {len(account_rows)} account rows and "
                f"{len(transaction_rows)} transaction rows"
            )
            return compute_money_manager_data(
                account_rows,
                transaction_rows,
                category_rows,
                today=self._clock(),
                logger=self._logger,
            )
        except SheetNotFoundError as exc:
            self._logger.warning(
                f"{exc}; money manager is not initialized"
            )
        except Exception as exc:
            self._logger.exception(f"Money manager fetch failed: {exc}")
        return empty_money_manager_data()

    def _read_categories(self) -> list[list[str]]:
        try:
            return self._sheets_repository.read_range(
                self._sheet_names.categories,
                CATEGORIES_RANGE,
            )
        except SheetNotFoundError as exc:
            self._logger.warning(f"{exc}; using default categories")
            return []


__all__ = ["GetMoneyManagerDataUseCase"]
