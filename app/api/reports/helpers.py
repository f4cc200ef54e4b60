from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import NamedTuple
import logging

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")
ZERO = Decimal("0")
# larger amounts cannot be quantized to cents in the default decimal context
MAX_EXPONENT = 15

MONTH_NAMES = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]


class YearMonth(NamedTuple):
    year: int
    month: int

    @classmethod
    def create(cls, year: int, month: int) -> "YearMonth":
        if not 1 <= month <= 12:
            raise ValueError(f"Month must be between 1 and 12, got {month}")
        return cls(year, month)

    @classmethod
    def of(cls, value: date) -> "YearMonth":
        return cls(value.year, value.month)

    def shift(self, months: int) -> "YearMonth":
        index = self.year * 12 + (self.month - 1) + months
        return YearMonth(index // 12, index % 12 + 1)

    def months_since(self, other: "YearMonth") -> int:
        return (self.year - other.year) * 12 + (self.month - other.month)

    def contains(self, value: date | None) -> bool:
        return value is not None and (value.year, value.month) == self

    @property
    def label(self) -> str:
        return f"{self.year}-{self.month:02d}"

    @property
    def month_name(self) -> str:
        return MONTH_NAMES[self.month - 1]


def to_decimal(value) -> Decimal:
    """Coerce a raw amount to Decimal; anything non-numeric becomes 0."""
    if value is None or isinstance(value, bool):
        return ZERO
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return ZERO
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        return ZERO
    if not result.is_finite() or result.adjusted() > MAX_EXPONENT:
        return ZERO
    return result


def to_count(value) -> int:
    return int(to_decimal(value))


def money(value: Decimal | str | int | float | None) -> Decimal:
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def format_brl(value) -> str:
    amount = money(value)
    if not amount:
        return "R$ 0,00"
    formatted = f"{amount:,.2f}".replace(",", "_").replace(".", ",").replace("_", ".")
    return f"R$ {formatted}"


def parse_timestamp(value, tz: tzinfo | None = None) -> datetime | None:
    """Parse a booking timestamp, returning None when it cannot be read.

    Accepts datetimes, dates, ISO-8601 strings and epoch milliseconds.
    Offset-aware values are moved into ``tz`` before use so that the
    calendar month matches the agency's local calendar. Naive values and
    date-only strings are kept as written.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, (int, float)):
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            logger.debug("Unreadable epoch timestamp: %r", value)
            return None
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            return None
        try:
            parsed = datetime.fromisoformat(s.replace("Z", "+00:00"))
        except ValueError:
            logger.debug("Unreadable timestamp string: %r", value)
            return None
    else:
        return None

    if parsed.tzinfo is not None and tz is not None:
        parsed = parsed.astimezone(tz)
    return parsed


def parse_date(value, tz: tzinfo | None = None) -> date | None:
    parsed = parse_timestamp(value, tz)
    return parsed.date() if parsed else None
