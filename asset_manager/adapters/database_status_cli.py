"""Simple CLI to check the spreadsheet connection and ledger tabs."""

from asset_manager.application.use_cases.initialize_database import (
    CheckDatabaseStatusUseCase,
)
from asset_manager.infrastructure.container import (
    build_settings,
    build_sheets_repository,
)
from asset_manager.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Print whether the spreadsheet is configured and initialized."""
    logger = get_app_logger()
    settings = build_settings()
    use_case = CheckDatabaseStatusUseCase(
        sheets_repository=build_sheets_repository(settings),
        logger=logger,
        sheet_names=settings.sheet_names,
    )

    status = use_case.execute()

    if not status.configured:
        print(
            "Spreadsheet not configured: set GOOGLE_SERVICE_ACCOUNT_KEY "
            "and SPREADSHEET_ID."
        )
        return
    if status.initialized:
        print("Spreadsheet is initialized.")
    else:
        print(f"Missing tabs: {', '.join(status.missing_tabs)}")


if __name__ == "__main__":  # pragma: no cover
    main()
