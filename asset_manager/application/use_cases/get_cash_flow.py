"""Use case to summarize deposits and conversions."""

from asset_manager.application.ports.sheets_repository import (
    SheetNotFoundError,
    SheetsRepositoryPort,
)
from asset_manager.application.use_cases.constants import (
    CASH_FLOW_RANGE,
    DEFAULT_SHEET_NAMES,
    SheetNames,
)
from asset_manager.domain.models import CashFlowSummary
from asset_manager.domain.services.cash_flow import (
    DEFAULT_CASH_FLOW_LAYOUT,
    CashFlowLayout,
    compute_cash_flow_summary,
)
from asset_manager.infrastructure.logging.logger import get_app_logger


class GetCashFlowUseCase:
    """Read the cash flow tab and total its deposits and conversions."""

    def __init__(
        self,
        sheets_repository: SheetsRepositoryPort,
        logger=None,
        sheet_names: SheetNames = DEFAULT_SHEET_NAMES,
        layout: CashFlowLayout = DEFAULT_CASH_FLOW_LAYOUT,
    ) -> None:
        self._sheets_repository = sheets_repository
        self._logger = logger or get_app_logger()
        self._sheet_names = sheet_names
        self._layout = layout

    def execute(self) -> CashFlowSummary:
        """Return the cash flow summary, zeroed on any failure."""
        tab = self._sheet_names.cash_flow
        try:
            rows = self._sheets_repository.read_range(tab, CASH_FLOW_RANGE)
            self._logger.info(f"Fetched {len(rows)} rows from {tab}")
            return compute_cash_flow_summary(
                rows,
                logger=self._logger,
                layout=self._layout,
            )
        except SheetNotFoundError as exc:
            self._logger.warning(f"{exc}; returning empty cash flow")
        except Exception as exc:
            self._logger.exception(f"Cash flow fetch failed: {exc}")
        return CashFlowSummary.empty()


__all__ = ["GetCashFlowUseCase"]
