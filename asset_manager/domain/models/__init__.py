"""Domain models package."""

from .cash_flow import CashFlowSummary, Conversion, Deposit
from .money import (
    Bill,
    CategorySpending,
    CategoryTaxonomy,
    GraphDataPoint,
    InvalidTransactionError,
    MoneyAccount,
    MoneyManagerData,
    MoneyTransaction,
    MonthlyStats,
    TransactionType,
)
from .mutations import (
    ConversionInput,
    DatabaseStatus,
    DepositInput,
    InitializeDatabaseResult,
    MutationResult,
    TradeAction,
    TradeInput,
)
from .portfolio import (
    ASSET_CLASS_CRYPTO,
    ASSET_CLASS_EQUITY,
    ASSET_CLASS_ETF,
    Holding,
    PortfolioSummary,
    QuoteProfile,
    SectorClassification,
)

__all__ = [
    "ASSET_CLASS_CRYPTO",
    "ASSET_CLASS_EQUITY",
    "ASSET_CLASS_ETF",
    "Bill",
    "CashFlowSummary",
    "CategorySpending",
    "CategoryTaxonomy",
    "Conversion",
    "ConversionInput",
    "DatabaseStatus",
    "Deposit",
    "DepositInput",
    "GraphDataPoint",
    "Holding",
    "InitializeDatabaseResult",
    "InvalidTransactionError",
    "MoneyAccount",
    "MoneyManagerData",
    "MoneyTransaction",
    "MonthlyStats",
    "MutationResult",
    "PortfolioSummary",
    "QuoteProfile",
    "SectorClassification",
    "TradeAction",
    "TradeInput",
    "TransactionType",
]
