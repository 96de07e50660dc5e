"""Settings helpers for infrastructure adapters."""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from asset_manager.application.ports.sheets_repository import (
    SheetsConfigurationError,
)
from asset_manager.application.use_cases.constants import (
    DEFAULT_SHEET_NAMES,
    SheetNames,
)
from asset_manager.domain.services.classification import DEFAULT_MAX_WORKERS
from asset_manager.infrastructure.logging.logger import get_app_logger


_TRUE_VALUES = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class SheetsSettings:
    """Settings for the Google Sheets backend.

    Attributes:
        service_account_key: Service-account JSON blob, or a path to a
            JSON key file.
        spreadsheet_id: Key of the target spreadsheet.
        sheet_names: Tab titles inside the spreadsheet.
        quote_lookup_enabled: Whether unknown tickers are looked up remotely.
        quote_lookup_workers: Cap on concurrent remote lookups.
    """

    service_account_key: str | None = None
    spreadsheet_id: str | None = None
    sheet_names: SheetNames = DEFAULT_SHEET_NAMES
    quote_lookup_enabled: bool = True
    quote_lookup_workers: int = DEFAULT_MAX_WORKERS

    @classmethod
    def from_env(cls) -> "SheetsSettings":
        """Build settings from environment variables.

        Returns:
            SheetsSettings: Settings sourced from environment variables.
        """
        defaults = DEFAULT_SHEET_NAMES
        sheet_names = SheetNames(
            trades=os.getenv("TRADES_SHEET", defaults.trades),
            cash_flow=os.getenv("CASH_FLOW_SHEET", defaults.cash_flow),
            portfolio=os.getenv("PORTFOLIO_SHEET", defaults.portfolio),
            accounts=os.getenv("MM_ACCOUNTS_SHEET", defaults.accounts),
            transactions=os.getenv(
                "MM_TRANSACTIONS_SHEET",
                defaults.transactions,
            ),
            categories=os.getenv("MM_CATEGORIES_SHEET", defaults.categories),
        )
        return cls(
            service_account_key=(
                os.getenv("GOOGLE_SERVICE_ACCOUNT_KEY") or ""
            ).strip() or None,
            spreadsheet_id=(os.getenv("SPREADSHEET_ID") or "").strip() or None,
            sheet_names=sheet_names,
            quote_lookup_enabled=(
                os.getenv("QUOTE_LOOKUP_ENABLED", "true").strip().lower()
                in _TRUE_VALUES
            ),
            quote_lookup_workers=cls._parse_workers(
                os.getenv("QUOTE_LOOKUP_WORKERS"),
            ),
        )

    @property
    def is_configured(self) -> bool:
        """True when both credentials and a spreadsheet id are present."""
        return bool(self.service_account_key and self.spreadsheet_id)

    def load_credentials_info(self) -> dict[str, Any]:
        """Return the service-account key as a dictionary.

        Returns:
            dict[str, Any]: Parsed service-account JSON.

        Raises:
            SheetsConfigurationError: If the key is missing, unreadable,
                or not valid JSON.
        """
        raw = self.service_account_key
        if not raw:
            raise SheetsConfigurationError(
                "GOOGLE_SERVICE_ACCOUNT_KEY is not defined"
            )
        if not raw.lstrip().startswith("{"):
            path = Path(raw).expanduser()
            if not path.exists():
                raise SheetsConfigurationError(
                    f"Service account key file not found: {path}"
                )
            raw = path.read_text(encoding="utf-8")
        try:
            info = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise SheetsConfigurationError(
                "Failed to parse GOOGLE_SERVICE_ACCOUNT_KEY; "
                "ensure it is valid JSON"
            ) from exc
        if not isinstance(info, dict):
            raise SheetsConfigurationError(
                "GOOGLE_SERVICE_ACCOUNT_KEY must be a JSON object"
            )
        return info

    @staticmethod
    def _parse_workers(raw: str | None) -> int:
        if not raw:
            return DEFAULT_MAX_WORKERS
        try:
            value = int(raw)
        except ValueError:
            get_app_logger().warning(
                f"Invalid QUOTE_LOOKUP_WORKERS '{raw}'; "
                f"using {DEFAULT_MAX_WORKERS}"
            )
            return DEFAULT_MAX_WORKERS
        return max(1, value)


__all__ = ["SheetsSettings"]
