"""Attribution of booking revenue to calendar months.

A booking pays either in full in the month it was registered, or with an
optional down payment in that month plus ``installments_count`` equal
monthly installments. The installments start at the first-installment month,
which defaults to the month after registration.

``installment_info`` is the single per-booking evaluator. The monthly total
and the per-booking labels shown in reports are both read from it, so they
cannot disagree.
"""
from __future__ import annotations

from datetime import tzinfo
from decimal import Decimal
from typing import Any, Iterable, Mapping

from app.api.reports.helpers import YearMonth
from app.api.reports.models import Booking, DownPayment, FullPayment, Installment, PaymentEvent


def as_booking(item: Booking | Mapping[str, Any], tz: tzinfo | None = None) -> Booking:
    if isinstance(item, Booking):
        return item
    return Booking.from_record(item, tz)


def installment_info(
    booking: Booking | Mapping[str, Any], year: int, month: int
) -> tuple[PaymentEvent, ...]:
    """Return the payment events a booking has in the given month.

    A down payment and the first installment can land in the same month,
    in which case both are returned, down payment first.
    """
    booking = as_booking(booking)
    target = YearMonth.create(year, month)
    created = booking.created_month

    if not booking.pays_in_installments:
        if created == target and booking.travel_price > 0:
            return (FullPayment(booking.travel_price),)
        return ()

    events: list[PaymentEvent] = []
    if created == target and booking.down_payment > 0:
        events.append(DownPayment(booking.down_payment))

    first = booking.first_installment_month
    if first is not None:
        offset = target.months_since(first)
        if 0 <= offset < booking.installments_count:
            events.append(
                Installment(
                    amount=booking.installment_amount,
                    number=offset + 1,
                    total=booking.installments_count,
                )
            )
    return tuple(events)


def primary_event(
    booking: Booking | Mapping[str, Any], year: int, month: int
) -> PaymentEvent | None:
    events = installment_info(booking, year, month)
    return events[0] if events else None


def booking_revenue(booking: Booking | Mapping[str, Any], year: int, month: int) -> Decimal:
    return sum((event.amount for event in installment_info(booking, year, month)), Decimal("0"))


def calculate_monthly_revenue(
    bookings: Iterable[Booking | Mapping[str, Any]], year: int, month: int
) -> Decimal:
    YearMonth.create(year, month)
    return sum((booking_revenue(booking, year, month) for booking in bookings), Decimal("0"))
