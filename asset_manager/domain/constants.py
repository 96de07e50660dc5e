"""Domain constants for classification and the money manager."""

from types import MappingProxyType


DEFAULT_SECTOR_MAP = MappingProxyType(
    {
        # Tech
        "AAPL": "Technology",
        "MSFT": "Technology",
        "NVDA": "Semiconductors",
        "INTC": "Semiconductors",
        "AMD": "Semiconductors",
        "SMH": "Semiconductors",
        "META": "Technology",
        "GOOGL": "Technology",
        "GOOG": "Technology",
        "AMZN": "Consumer Cyclical",
        "PLTR": "Technology",
        "AVGO": "Semiconductors",
        "NFLX": "Communication Services",
        "CRM": "Technology",
        "ADBE": "Technology",
        "ORCL": "Technology",
        "CSCO": "Technology",
        "TSM": "Semiconductors",
        "QCOM": "Semiconductors",
        "MU": "Semiconductors",
        # EV / Auto
        "TSLA": "Automotive",
        "F": "Automotive",
        "GM": "Automotive",
        "RIVN": "Automotive",
        "LCID": "Automotive",
        # Financials
        "JPM": "Financials",
        "BAC": "Financials",
        "V": "Financials",
        "MA": "Financials",
        "WFC": "Financials",
        "GS": "Financials",
        "MS": "Financials",
        "BLK": "Financials",
        "C": "Financials",
        # Healthcare
        "UNH": "Healthcare",
        "JNJ": "Healthcare",
        "PFE": "Healthcare",
        "LLY": "Healthcare",
        "MRK": "Healthcare",
        "ABBV": "Healthcare",
        "TMO": "Healthcare",
        # Energy
        "XOM": "Energy",
        "CVX": "Energy",
        "SHEL": "Energy",
        "COP": "Energy",
        # Consumer
        "WMT": "Consumer Defensive",
        "KO": "Consumer Defensive",
        "PEP": "Consumer Defensive",
        "PG": "Consumer Defensive",
        "COST": "Consumer Defensive",
        "MCD": "Consumer Cyclical",
        "SBUX": "Consumer Cyclical",
        "NKE": "Consumer Cyclical",
        # ETFs
        "VOO": "Index ETF",
        "SPY": "Index ETF",
        "QQQ": "Index ETF",
        "QQQM": "Index ETF",
        "IWM": "Index ETF",
        "VTI": "Index ETF",
        "VEA": "Index ETF",
        "VWO": "Index ETF",
        "BND": "Bond ETF",
        "GLD": "Commodity ETF",
        "XLE": "Energy ETF",
        "XLF": "Financial ETF",
        "XLK": "Tech ETF",
        "XLV": "Healthcare ETF",
        # Crypto
        "IBIT": "Crypto",
        "BTC": "Crypto",
        "ETH": "Crypto",
        "COIN": "Crypto",
        "MSTR": "Crypto Proxy",
    }
)

CRYPTO_SYMBOLS = frozenset({"BTC", "ETH", "SOL"})
FALLBACK_SECTOR = "Other"

DEFAULT_INCOME_CATEGORIES = (
    "Salary",
    "Bonus",
    "Allowance",
    "Dividend",
    "Side Hustle",
    "Other",
)
DEFAULT_EXPENSE_CATEGORIES = (
    "Food",
    "Transport",
    "Bills",
    "Fashion",
    "Entertainment",
    "Healthcare",
    "Electronics",
    "Debt",
    "Family",
    "Other",
)

DEFAULT_ACCOUNT_CATEGORY = "General"
UNCATEGORIZED = "Uncategorized"

# Synthetic budget shown next to category spending.
BUDGET_LIMIT_FLOOR = 500
BUDGET_LIMIT_HEADROOM = "1.2"

GRAPH_MONTHS = 7


__all__ = [
    "BUDGET_LIMIT_FLOOR",
    "BUDGET_LIMIT_HEADROOM",
    "CRYPTO_SYMBOLS",
    "DEFAULT_ACCOUNT_CATEGORY",
    "DEFAULT_EXPENSE_CATEGORIES",
    "DEFAULT_INCOME_CATEGORIES",
    "DEFAULT_SECTOR_MAP",
    "FALLBACK_SECTOR",
    "GRAPH_MONTHS",
    "UNCATEGORIZED",
]
