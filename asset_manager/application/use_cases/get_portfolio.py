"""Use case to build the portfolio summary from the portfolio tab."""

from asset_manager.application.ports.sheets_repository import (
    SheetNotFoundError,
    SheetsRepositoryPort,
)
from asset_manager.application.use_cases.constants import (
    DEFAULT_SHEET_NAMES,
    PORTFOLIO_RANGE,
    SheetNames,
)
from asset_manager.domain.models import PortfolioSummary
from asset_manager.domain.services.classification import SectorClassifier
from asset_manager.domain.services.portfolio import (
    DEFAULT_PORTFOLIO_LAYOUT,
    PortfolioLayout,
    compute_portfolio_summary,
)
from asset_manager.infrastructure.logging.logger import get_app_logger


class GetPortfolioUseCase:
    """Read the portfolio tab and aggregate it into a summary."""

    def __init__(
        self,
        sheets_repository: SheetsRepositoryPort,
        classifier: SectorClassifier,
        logger=None,
        sheet_names: SheetNames = DEFAULT_SHEET_NAMES,
        layout: PortfolioLayout = DEFAULT_PORTFOLIO_LAYOUT,
    ) -> None:
        """Initialize the use case.

        Args:
            sheets_repository: Port providing spreadsheet range reads.
            classifier: Sector/asset-class classifier for holdings.
            logger: Optional logger compatible with logging.Logger-like API.
            sheet_names: Tab titles of the spreadsheet.
            layout: Column layout of the portfolio tab.
        """
        self._sheets_repository = sheets_repository
        self._classifier = classifier
        self._logger = logger or get_app_logger()
        self._sheet_names = sheet_names
        self._layout = layout

    def execute(self) -> PortfolioSummary:
        """Return the portfolio summary.

        A missing tab or any read/aggregation failure is logged and yields a
        zeroed summary instead of an exception.

        Returns:
            PortfolioSummary: Holdings and totals.
        """
        tab = self._sheet_names.portfolio
        try:
            rows = self._sheets_repository.read_range(tab, PORTFOLIO_RANGE)
            self._logger.info(f"Fetched {len(rows)} rows from {tab}")
            return compute_portfolio_summary(
                rows,
                self._classifier,
                logger=self._logger,
                layout=self._layout,
            )
        except SheetNotFoundError as exc:
            self._logger.warning(f"{exc}; returning an empty portfolio")
        except Exception as exc:
            self._logger.exception(f"Portfolio fetch failed: {exc}")
        return PortfolioSummary.empty()


__all__ = ["GetPortfolioUseCase"]
