from __future__ import annotations

from datetime import date, datetime, tzinfo
from decimal import Decimal
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from app.api.reports.helpers import YearMonth, parse_date, parse_timestamp, to_count, to_decimal

# Installments start the calendar month after the booking was registered
# unless the booking names an explicit first due date.
DEFAULT_FIRST_INSTALLMENT_DELAY_MONTHS = 1


def _context_tz(info: ValidationInfo) -> tzinfo | None:
    if isinstance(info.context, dict):
        return info.context.get("tz")
    return None


class Booking(BaseModel):
    """A client's trip record, reduced to what reports need.

    Every field is parse-or-default: malformed amounts become 0 and
    unreadable dates become None, so building a Booking never fails on
    upstream data quality.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    phone: str | None = None
    destination: str | None = None
    payment_method: str | None = None
    birthdate: date | None = None
    travel_date: date | None = None

    created_at: datetime | None = None
    travel_price: Decimal = Field(default=Decimal("0"))
    down_payment: Decimal = Field(default=Decimal("0"))
    installments_count: int = 0
    first_installment_due_date: date | None = None

    @field_validator("travel_price", "down_payment", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> Decimal:
        return to_decimal(value)

    @field_validator("installments_count", mode="before")
    @classmethod
    def _coerce_count(cls, value: Any) -> int:
        return to_count(value)

    @field_validator("created_at", mode="before")
    @classmethod
    def _coerce_timestamp(cls, value: Any, info: ValidationInfo) -> datetime | None:
        return parse_timestamp(value, _context_tz(info))

    @field_validator("first_installment_due_date", "travel_date", "birthdate", mode="before")
    @classmethod
    def _coerce_date(cls, value: Any, info: ValidationInfo) -> date | None:
        return parse_date(value, _context_tz(info))

    @field_validator(
        "id", "first_name", "last_name", "email", "phone", "destination", "payment_method",
        mode="before",
    )
    @classmethod
    def _coerce_text(cls, value: Any) -> str | None:
        if value is None:
            return None
        return str(value)

    @classmethod
    def from_record(cls, record: Mapping[str, Any], tz: tzinfo | None = None) -> "Booking":
        return cls.model_validate(dict(record), context={"tz": tz})

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    @property
    def created_month(self) -> YearMonth | None:
        return YearMonth.of(self.created_at) if self.created_at else None

    @property
    def pays_in_installments(self) -> bool:
        return self.installments_count > 0 and self.travel_price > 0

    @property
    def installment_amount(self) -> Decimal:
        if self.installments_count <= 0:
            return Decimal("0")
        return (self.travel_price - self.down_payment) / self.installments_count

    @property
    def first_installment_month(self) -> YearMonth | None:
        if self.first_installment_due_date is not None:
            return YearMonth.of(self.first_installment_due_date)
        created = self.created_month
        if created is None:
            return None
        return created.shift(DEFAULT_FIRST_INSTALLMENT_DELAY_MONTHS)
