"""Normalization of loosely formatted spreadsheet cells."""

import re
from datetime import date, datetime
from decimal import Decimal

from asset_manager.utils.decimal_utils import coerce_decimal


_NON_NUMERIC = re.compile(r"[^0-9.\-]")
_LEADING_NUMBER = re.compile(r"^-?(\d+\.?\d*|\.\d+)")
_DAY_FIRST = re.compile(r"^(\d{1,2})/(\d{1,2})/(\d{4})")
_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})")
_FALLBACK_FORMATS = (
    "%d %b %Y",
    "%d %B %Y",
    "%b %d, %Y",
    "%B %d, %Y",
    "%d-%b-%Y",
)


def parse_money(value) -> Decimal:
    """Turn a currency-formatted cell into a Decimal.

    Numbers pass through unchanged. Strings keep only digits, dots and minus
    signs and the leading numeric part is parsed, so ``"RM 1,234.50"`` and
    ``"$1,234.50"`` both give ``Decimal("1234.50")``. Anything unparsable
    yields zero; this never raises.

    Args:
        value: Raw cell value (str, int, float, Decimal or None).

    Returns:
        Decimal: Parsed amount, or zero.
    """
    if isinstance(value, bool):
        return Decimal("0")
    if isinstance(value, (int, float, Decimal)):
        return coerce_decimal(value)
    if not value:
        return Decimal("0")
    cleaned = _NON_NUMERIC.sub("", str(value))
    match = _LEADING_NUMBER.match(cleaned)
    if not match:
        return Decimal("0")
    return coerce_decimal(match.group(0))


def parse_date(text: str | None, today: date | None = None) -> date:
    """Parse ``DD/MM/YYYY`` or ``YYYY-MM-DD`` text into a calendar date.

    The result is a plain ``date`` built from explicit components, so
    serializing it never shifts the day across a timezone boundary.
    Empty input means today.

    Args:
        text: Raw cell text.
        today: Reference date for empty input; defaults to ``date.today()``.

    Returns:
        date: Parsed calendar date.

    Raises:
        ValueError: If the text matches no supported format or names an
            impossible day.
    """
    if not text or not str(text).strip():
        return today or date.today()
    raw = str(text).strip()

    match = _DAY_FIRST.match(raw)
    if match:
        day, month, year = (int(part) for part in match.groups())
        return date(year, month, day)

    match = _ISO_DATE.match(raw)
    if match:
        year, month, day = (int(part) for part in match.groups())
        return date(year, month, day)

    try:
        return datetime.fromisoformat(raw).date()
    except ValueError:
        pass
    for fmt in _FALLBACK_FORMATS:
        try:
            return datetime.strptime(raw, fmt).date()
        except ValueError:
            continue
    raise ValueError(f"Unrecognized date format: {raw!r}")


def format_date(value: date) -> str:
    """Render a date as ``YYYY-MM-DD``."""
    return value.isoformat()


def cell(row: list, index: int | None) -> str:
    """Return the trimmed text of ``row[index]``, or an empty string."""
    if index is None or index < 0 or index >= len(row):
        return ""
    value = row[index]
    if value is None:
        return ""
    return str(value).strip()


def raw_cell(row: list, index: int | None):
    """Return ``row[index]`` untouched, or None when out of range."""
    if index is None or index < 0 or index >= len(row):
        return None
    return row[index]


__all__ = ["cell", "format_date", "parse_date", "parse_money", "raw_cell"]
