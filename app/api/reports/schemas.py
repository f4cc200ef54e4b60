from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, Field


class BookingItem(BaseModel):
    id: str | None = None
    client_name: Annotated[str, Field(alias="clientName")]
    destination: str | None = None
    travel_date: Annotated[date | None, Field(alias="travelDate")] = None
    travel_price: Annotated[Decimal, Field(alias="travelPrice")]
    down_payment: Annotated[Decimal, Field(alias="downPayment")]
    installments_count: Annotated[int, Field(alias="installmentsCount")]
    payment_method: Annotated[str | None, Field(alias="paymentMethod")] = None
    created_at: Annotated[datetime | None, Field(alias="createdAt")] = None

    model_config = {"populate_by_name": True}


class PaymentEventItem(BaseModel):
    booking_id: Annotated[str | None, Field(alias="bookingId")] = None
    client_name: Annotated[str, Field(alias="clientName")]
    kind: str
    label: str
    amount: Decimal
    installment_no: Annotated[int | None, Field(alias="installmentNo")] = None
    installment_total: Annotated[int | None, Field(alias="installmentTotal")] = None

    model_config = {"populate_by_name": True}


class MonthlyStats(BaseModel):
    new_clients: Annotated[int, Field(alias="newClients")]
    departures: int
    revenue: Decimal

    model_config = {"populate_by_name": True}


class DestinationBreakdown(BaseModel):
    name: str
    clients_count: Annotated[int, Field(alias="clientsCount")]
    departures_count: Annotated[int, Field(alias="departuresCount")]
    revenue: Decimal

    model_config = {"populate_by_name": True}


class MonthlyReportResponse(BaseModel):
    year: int
    month: int
    filtered_bookings: Annotated[list[BookingItem], Field(alias="filteredBookings")]
    total_revenue_for_month: Annotated[Decimal, Field(alias="totalRevenueForMonth")]
    stats: MonthlyStats
    payments: list[PaymentEventItem]
    destinations: list[DestinationBreakdown]

    model_config = {"populate_by_name": True}


class MonthlyRevenueResponse(BaseModel):
    year: int
    month: int
    revenue: Decimal


class TrendPoint(BaseModel):
    month: str
    name: str
    full_name: Annotated[str, Field(alias="fullName")]
    new_clients: Annotated[int, Field(alias="newClients")]
    revenue: Decimal

    model_config = {"populate_by_name": True}


class TrendResponse(BaseModel):
    points: list[TrendPoint]


class InstallmentsResponse(BaseModel):
    year: int
    month: int
    items: list[PaymentEventItem]
