"""Use cases to check and bootstrap the money manager tabs."""

from asset_manager.application.ports.sheets_repository import (
    SheetsConfigurationError,
    SheetsRepositoryPort,
)
from asset_manager.application.use_cases.constants import (
    ACCOUNTS_HEADER,
    CATEGORIES_HEADER,
    DEFAULT_SHEET_NAMES,
    TRANSACTIONS_HEADER,
    SheetNames,
)
from asset_manager.application.use_cases.mutation_support import (
    SETUP_REQUIRED,
)
from asset_manager.domain.models import DatabaseStatus, InitializeDatabaseResult
from asset_manager.infrastructure.logging.logger import get_app_logger


class CheckDatabaseStatusUseCase:
    """Report whether the spreadsheet is reachable and fully set up."""

    def __init__(
        self,
        sheets_repository: SheetsRepositoryPort,
        logger=None,
        sheet_names: SheetNames = DEFAULT_SHEET_NAMES,
    ) -> None:
        self._sheets_repository = sheets_repository
        self._logger = logger or get_app_logger()
        self._sheet_names = sheet_names

    def execute(self) -> DatabaseStatus:
        """Return the configuration and initialization status.

        Returns:
            DatabaseStatus: ``configured`` is False when credentials are
            missing or the spreadsheet cannot be reached.
        """
        expected = list(self._sheet_names.ledger_tabs)
        try:
            existing = set(self._sheets_repository.list_tabs())
        except SheetsConfigurationError as exc:
            self._logger.warning(f"Spreadsheet not configured: {exc}")
            return DatabaseStatus(
                configured=False,
                initialized=False,
                missing_tabs=expected,
            )
        except Exception as exc:
            self._logger.exception(f"Could not list spreadsheet tabs: {exc}")
            return DatabaseStatus(
                configured=False,
                initialized=False,
                missing_tabs=expected,
            )
        missing = [tab for tab in expected if tab not in existing]
        return DatabaseStatus(
            configured=True,
            initialized=not missing,
            missing_tabs=missing,
        )


class InitializeDatabaseUseCase:
    """Create any missing money manager tab with its header row.

    Running it again is harmless: tabs that already exist are skipped.
    """

    def __init__(
        self,
        sheets_repository: SheetsRepositoryPort,
        logger=None,
        sheet_names: SheetNames = DEFAULT_SHEET_NAMES,
    ) -> None:
        self._sheets_repository = sheets_repository
        self._logger = logger or get_app_logger()
        self._sheet_names = sheet_names

    def execute(self) -> InitializeDatabaseResult:
        """Create the missing tabs.

        Returns:
            InitializeDatabaseResult: Success flag and the tabs created.
        """
        headers = {
            self._sheet_names.accounts: ACCOUNTS_HEADER,
            self._sheet_names.transactions: TRANSACTIONS_HEADER,
            self._sheet_names.categories: CATEGORIES_HEADER,
        }
        created: list[str] = []
        try:
            existing = set(self._sheets_repository.list_tabs())
            for tab, header in headers.items():
                if tab in existing:
                    self._logger.info(f"Tab {tab} already exists; skipping")
                    continue
                self._sheets_repository.create_tab(tab, list(header))
                created.append(tab)
                self._logger.info(f"Created tab {tab}")
        except SheetsConfigurationError as exc:
            self._logger.warning(f"Initialization skipped: {exc}")
            return InitializeDatabaseResult(
                success=False,
                error=SETUP_REQUIRED,
                created_tabs=created,
            )
        except Exception as exc:
            self._logger.exception(f"Initialization failed: {exc}")
            return InitializeDatabaseResult(
                success=False,
                error=f"Failed to initialize spreadsheet: {exc}",
                created_tabs=created,
            )
        return InitializeDatabaseResult(success=True, created_tabs=created)


__all__ = ["CheckDatabaseStatusUseCase", "InitializeDatabaseUseCase"]
