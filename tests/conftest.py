"""
Shared fixtures for the reports service tests.

The booking set below is small enough to reason about by hand. Revenue per
month in 2025:

    Jan 300   (Ana down payment 200 + Carla down payment 100)
    Feb 200   (Ana installment 1/4)
    Mar 1300  (Ana 2/4 + Bruno full payment 900 + Diego 1/3)
    Apr 400   (Ana 3/4 + Diego 2/3)
    May 400   (Ana 4/4 + Diego 3/3)
    Jun 200   (Carla 1/2, explicit first due date)
    Jul 200   (Carla 2/2)

Everything else is 0 and the year adds up to 3000, the sum of all prices.
"""
import copy

import pytest
from fastapi.testclient import TestClient

from app import app
from app.api import health
from app.api.reports.models import Booking
from app.utils.client_source import get_bookings


RAW_BOOKINGS = [
    {
        "id": "a",
        "first_name": "Ana",
        "last_name": "Souza",
        "email": "ana@example.com",
        "phone": "11999990000",
        "birthdate": "1990-04-02",
        "destination": "Gramado",
        "travel_date": "2025-06-15",
        "payment_method": "crediario_agencia",
        "created_at": "2025-01-10T10:00:00",
        "travel_price": 1000,
        "down_payment": 200,
        "installments_count": 4,
    },
    {
        "id": "b",
        "first_name": "Bruno",
        "last_name": "Lima",
        "email": "bruno@example.com",
        "phone": "21988880000",
        "destination": "Porto Seguro",
        "travel_date": "2025-03-20",
        "payment_method": "avista",
        "created_at": "2025-03-05T09:30:00",
        "travel_price": 900,
        "down_payment": 0,
        "installments_count": 0,
    },
    {
        "id": "c",
        "first_name": "Carla",
        "last_name": "Dias",
        "destination": "Gramado",
        "created_at": "2025-01-20T14:00:00",
        "travel_price": 500,
        "down_payment": 100,
        "installments_count": 2,
        "first_installment_due_date": "2025-06-01",
    },
    {
        "id": "d",
        "first_name": "Diego",
        "last_name": "Alves",
        "created_at": "2025-02-14T08:00:00",
        "travel_price": "600",
        "down_payment": "abc",
        "installments_count": "3",
        "first_installment_due_date": "not-a-date",
    },
]


@pytest.fixture()
def raw_bookings():
    return copy.deepcopy(RAW_BOOKINGS)


@pytest.fixture()
def bookings(raw_bookings):
    return [Booking.from_record(record) for record in raw_bookings]


@pytest.fixture()
def client(bookings, monkeypatch):
    """TestClient with the client source replaced by the fixture bookings."""

    async def fake_check_client_source():
        return "up"

    monkeypatch.setattr(health, "check_client_source", fake_check_client_source)
    app.dependency_overrides[get_bookings] = lambda: bookings
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c
    app.dependency_overrides.clear()
