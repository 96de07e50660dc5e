"""CLI adapter to create the money manager tabs in the spreadsheet.

This module wires the InitializeDatabaseUseCase to the Google Sheets
repository and provides a command-line entry point for the bootstrap.
"""

from asset_manager.application.use_cases.initialize_database import (
    InitializeDatabaseUseCase,
)
from asset_manager.infrastructure.container import (
    build_settings,
    build_sheets_repository,
)
from asset_manager.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the database bootstrap use case."""
    logger = get_app_logger()
    settings = build_settings()
    use_case = InitializeDatabaseUseCase(
        sheets_repository=build_sheets_repository(settings),
        logger=logger,
        sheet_names=settings.sheet_names,
    )

    result = use_case.execute()

    if not result.success:
        print(f"Initialization failed: {result.error}")
        return
    if result.created_tabs:
        print(f"Created tabs: {', '.join(result.created_tabs)}")
    else:
        print("All money manager tabs already exist.")


if __name__ == "__main__":  # pragma: no cover
    main()
