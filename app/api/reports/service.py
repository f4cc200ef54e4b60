from __future__ import annotations

from collections import defaultdict
from datetime import datetime
from typing import Sequence

from app.api.reports.allocator import calculate_monthly_revenue, installment_info
from app.api.reports.helpers import YearMonth, money
from app.api.reports.models import Booking, Installment
from app.api.reports.schemas import (
    BookingItem,
    DestinationBreakdown,
    MonthlyReportResponse,
    MonthlyRevenueResponse,
    MonthlyStats,
    PaymentEventItem,
    TrendPoint,
    TrendResponse,
)

MIN_TREND_MONTHS = 6
MAX_TREND_MONTHS = 12
NO_DESTINATION = "Sem destino"


def _created_sort_key(booking: Booking) -> datetime:
    # aware values were already moved to the report timezone; compare wall time
    if booking.created_at is None:
        return datetime.min
    return booking.created_at.replace(tzinfo=None)


def bookings_created_in(bookings: Sequence[Booking], period: YearMonth) -> list[Booking]:
    created = [b for b in bookings if period.contains(b.created_at)]
    return sorted(created, key=_created_sort_key, reverse=True)


def bookings_created_in_year(bookings: Sequence[Booking], year: int) -> list[Booking]:
    created = [b for b in bookings if b.created_at is not None and b.created_at.year == year]
    return sorted(created, key=_created_sort_key, reverse=True)


def to_booking_item(booking: Booking) -> BookingItem:
    return BookingItem(
        id=booking.id,
        client_name=booking.full_name,
        destination=booking.destination,
        travel_date=booking.travel_date,
        travel_price=money(booking.travel_price),
        down_payment=money(booking.down_payment),
        installments_count=booking.installments_count,
        payment_method=booking.payment_method,
        created_at=booking.created_at,
    )


def list_month_payments(
    bookings: Sequence[Booking], year: int, month: int
) -> list[PaymentEventItem]:
    items: list[PaymentEventItem] = []
    for booking in bookings:
        for event in installment_info(booking, year, month):
            is_installment = isinstance(event, Installment)
            items.append(
                PaymentEventItem(
                    booking_id=booking.id,
                    client_name=booking.full_name,
                    kind=event.kind.value,
                    label=event.label,
                    amount=money(event.amount),
                    installment_no=event.number if is_installment else None,
                    installment_total=event.total if is_installment else None,
                )
            )
    return items


def build_destination_breakdown(
    bookings: Sequence[Booking], year: int, month: int
) -> list[DestinationBreakdown]:
    period = YearMonth.create(year, month)
    groups: dict[str, list[Booking]] = defaultdict(list)
    for booking in bookings:
        groups[booking.destination or NO_DESTINATION].append(booking)

    rows = []
    for name, group in groups.items():
        clients_count = sum(1 for b in group if period.contains(b.created_at))
        departures_count = sum(1 for b in group if period.contains(b.travel_date))
        revenue = calculate_monthly_revenue(group, year, month)
        if not (clients_count or departures_count or revenue):
            continue
        rows.append(
            DestinationBreakdown(
                name=name,
                clients_count=clients_count,
                departures_count=departures_count,
                revenue=money(revenue),
            )
        )
    rows.sort(key=lambda row: (-row.revenue, row.name))
    return rows


def build_monthly_revenue(
    bookings: Sequence[Booking], year: int, month: int
) -> MonthlyRevenueResponse:
    YearMonth.create(year, month)
    return MonthlyRevenueResponse(
        year=year,
        month=month,
        revenue=money(calculate_monthly_revenue(bookings, year, month)),
    )


def build_monthly_report(
    bookings: Sequence[Booking], year: int, month: int
) -> MonthlyReportResponse:
    period = YearMonth.create(year, month)
    filtered = bookings_created_in(bookings, period)
    total_revenue = money(calculate_monthly_revenue(bookings, year, month))
    departures = sum(1 for b in bookings if period.contains(b.travel_date))

    return MonthlyReportResponse(
        year=year,
        month=month,
        filtered_bookings=[to_booking_item(b) for b in filtered],
        total_revenue_for_month=total_revenue,
        stats=MonthlyStats(
            new_clients=len(filtered),
            departures=departures,
            revenue=total_revenue,
        ),
        payments=list_month_payments(bookings, year, month),
        destinations=build_destination_breakdown(bookings, year, month),
    )


def build_trend_series(
    bookings: Sequence[Booking], year: int, month: int, months: int = MIN_TREND_MONTHS
) -> TrendResponse:
    if not MIN_TREND_MONTHS <= months <= MAX_TREND_MONTHS:
        raise ValueError(
            f"Trend window must be between {MIN_TREND_MONTHS} and {MAX_TREND_MONTHS} months"
        )
    end = YearMonth.create(year, month)

    points = []
    for back in range(months - 1, -1, -1):
        period = end.shift(-back)
        points.append(
            TrendPoint(
                month=period.label,
                name=period.month_name[:3],
                full_name=period.month_name,
                new_clients=sum(1 for b in bookings if period.contains(b.created_at)),
                revenue=money(calculate_monthly_revenue(bookings, period.year, period.month)),
            )
        )
    return TrendResponse(points=points)
