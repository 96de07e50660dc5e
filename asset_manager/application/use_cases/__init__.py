"""Application use cases package."""

from .get_cash_flow import GetCashFlowUseCase
from .get_money_manager import GetMoneyManagerDataUseCase
from .get_portfolio import GetPortfolioUseCase
from .initialize_database import (
    CheckDatabaseStatusUseCase,
    InitializeDatabaseUseCase,
)
from .manage_categories import ManageCategoriesUseCase
from .manage_transactions import ManageTransactionsUseCase
from .record_investments import RecordInvestmentsUseCase

__all__ = [
    "CheckDatabaseStatusUseCase",
    "GetCashFlowUseCase",
    "GetMoneyManagerDataUseCase",
    "GetPortfolioUseCase",
    "InitializeDatabaseUseCase",
    "ManageCategoriesUseCase",
    "ManageTransactionsUseCase",
    "RecordInvestmentsUseCase",
]
