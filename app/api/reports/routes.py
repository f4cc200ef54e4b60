from __future__ import annotations

from typing import Literal

from fastapi import APIRouter, Depends, Query
from fastapi.responses import Response

from app.api.reports.export import build_csv_export
from app.api.reports.models import Booking
from app.api.reports.schemas import (
    InstallmentsResponse,
    MonthlyReportResponse,
    MonthlyRevenueResponse,
    TrendResponse,
)
from app.api.reports.service import (
    MAX_TREND_MONTHS,
    MIN_TREND_MONTHS,
    build_monthly_report,
    build_monthly_revenue,
    build_trend_series,
    list_month_payments,
)
from app.core.config import Config
from app.core.exceptions import ValidationException
from app.utils.client_source import get_bookings

reports_router = APIRouter()

YearQuery = Query(..., ge=1900, le=2999)
MonthQuery = Query(..., ge=1, le=12)


@reports_router.get(
    "/monthly",
    response_model=MonthlyReportResponse,
    response_model_by_alias=True,
)
async def monthly_report(
    year: int = YearQuery,
    month: int = MonthQuery,
    bookings: list[Booking] = Depends(get_bookings),
):
    try:
        return build_monthly_report(bookings, year, month)
    except ValueError as exc:
        raise ValidationException(str(exc)) from exc


@reports_router.get("/revenue", response_model=MonthlyRevenueResponse)
async def monthly_revenue(
    year: int = YearQuery,
    month: int = MonthQuery,
    bookings: list[Booking] = Depends(get_bookings),
):
    try:
        return build_monthly_revenue(bookings, year, month)
    except ValueError as exc:
        raise ValidationException(str(exc)) from exc


@reports_router.get(
    "/trend",
    response_model=TrendResponse,
    response_model_by_alias=True,
)
async def revenue_trend(
    year: int = YearQuery,
    month: int = MonthQuery,
    months: int | None = Query(None, ge=MIN_TREND_MONTHS, le=MAX_TREND_MONTHS),
    bookings: list[Booking] = Depends(get_bookings),
):
    try:
        return build_trend_series(
            bookings, year, month, months or Config.TREND_DEFAULT_MONTHS
        )
    except ValueError as exc:
        raise ValidationException(str(exc)) from exc


@reports_router.get(
    "/installments",
    response_model=InstallmentsResponse,
    response_model_by_alias=True,
)
async def month_installments(
    year: int = YearQuery,
    month: int = MonthQuery,
    bookings: list[Booking] = Depends(get_bookings),
):
    try:
        items = list_month_payments(bookings, year, month)
    except ValueError as exc:
        raise ValidationException(str(exc)) from exc
    return InstallmentsResponse(year=year, month=month, items=items)


@reports_router.get("/export.csv")
async def export_csv(
    type: Literal["complete", "all", "clients"] = Query("complete"),
    year: int = YearQuery,
    month: int | None = Query(None, ge=1, le=12),
    bookings: list[Booking] = Depends(get_bookings),
):
    try:
        filename, content = build_csv_export(bookings, type, year, month)
    except ValueError as exc:
        raise ValidationException(str(exc)) from exc

    return Response(
        content=content.encode("utf-8"),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
