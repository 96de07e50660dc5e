"""Use case to record trades, deposits and currency conversions."""

from asset_manager.application.ports.sheets_repository import (
    SheetsRepositoryPort,
)
from asset_manager.application.use_cases.constants import (
    CONVERSION_RANGE,
    DEFAULT_SHEET_NAMES,
    DEPOSIT_RANGE,
    TRADES_RANGE,
    SheetNames,
)
from asset_manager.application.use_cases.mutation_support import run_mutation
from asset_manager.domain.models import (
    ConversionInput,
    DepositInput,
    MutationResult,
    TradeInput,
)
from asset_manager.infrastructure.logging.logger import get_app_logger


class RecordInvestmentsUseCase:
    """Append investment activity rows to the trades and cash flow tabs."""

    def __init__(
        self,
        sheets_repository: SheetsRepositoryPort,
        logger=None,
        sheet_names: SheetNames = DEFAULT_SHEET_NAMES,
    ) -> None:
        self._sheets_repository = sheets_repository
        self._logger = logger or get_app_logger()
        self._sheet_names = sheet_names

    def add_trade(self, trade: TradeInput) -> MutationResult:
        """Append a trade; the amount column is quantity times price."""
        row = [
            trade.date,
            trade.ticker.strip().upper(),
            trade.action.value,
            trade.quantity,
            trade.price,
            trade.fees,
            trade.amount,
        ]
        return run_mutation(
            lambda: self._sheets_repository.append_row(
                self._sheet_names.trades,
                TRADES_RANGE,
                row,
            ),
            description=f"Add {trade.action.value} trade for {row[1]}",
            failure_message="Failed to write to Google Sheets",
            logger=self._logger,
        )

    def add_deposit(self, deposit: DepositInput) -> MutationResult:
        """Append a deposit to the deposit column group."""
        row = [deposit.date, deposit.amount, deposit.reason]
        return run_mutation(
            lambda: self._sheets_repository.append_row(
                self._sheet_names.cash_flow,
                DEPOSIT_RANGE,
                row,
            ),
            description="Add deposit",
            failure_message="Failed to write to Google Sheets",
            logger=self._logger,
        )

    def add_conversion(self, conversion: ConversionInput) -> MutationResult:
        """Append a conversion to the conversion column group."""
        row = [
            conversion.date,
            conversion.amount_myr,
            conversion.amount_usd,
            conversion.rate,
        ]
        return run_mutation(
            lambda: self._sheets_repository.append_row(
                self._sheet_names.cash_flow,
                CONVERSION_RANGE,
                row,
            ),
            description="Add conversion",
            failure_message="Failed to write to Google Sheets",
            logger=self._logger,
        )


__all__ = ["RecordInvestmentsUseCase"]
