from __future__ import annotations

from typing import Any
from zoneinfo import ZoneInfo

import httpx
from fastapi import status

from app.api.reports.models import Booking
from app.core.config import Config
from app.core.exceptions import ExternalServiceError, ResourceNotFound
from app.core.messages import ErrorMessage
from app.core.middlewares import logger


def _is_flagged(value: Any) -> bool:
    return value is True or value == "true" or value == 1


def is_active_record(record: dict) -> bool:
    return not (_is_flagged(record.get("is_deleted")) or _is_flagged(record.get("is_cancelled")))


def extract_client_records(data: Any) -> list[dict]:
    if isinstance(data, dict) and "data" in data:
        data = data["data"]
    if isinstance(data, dict) and isinstance(data.get("clients"), list):
        data = data["clients"]
    if isinstance(data, list):
        return [item for item in data if isinstance(item, dict)]
    raise ExternalServiceError(ErrorMessage.CLIENT_SOURCE_FORMAT)


async def fetch_client_records(
    transport: httpx.AsyncBaseTransport | None = None,
) -> list[dict]:
    url = f"{Config.CLIENTS_SOURCE_URL.rstrip('/')}/api/clients"
    headers: dict[str, str] = {}
    if Config.CLIENTS_SOURCE_TOKEN:
        headers["Authorization"] = f"Bearer {Config.CLIENTS_SOURCE_TOKEN}"

    try:
        async with httpx.AsyncClient(
            timeout=Config.CLIENTS_SOURCE_TIMEOUT, transport=transport
        ) as client:
            response = await client.get(
                url, params={"limit": Config.CLIENTS_FETCH_LIMIT}, headers=headers
            )
    except httpx.HTTPError as exc:
        logger.error(f"Unexpected error client source: {str(exc)}")
        raise ExternalServiceError(ErrorMessage.CLIENT_SOURCE_UNREACHABLE) from exc

    if response.status_code == status.HTTP_404_NOT_FOUND:
        raise ResourceNotFound(ErrorMessage.CLIENTS_NOT_FOUND)
    if response.status_code >= status.HTTP_400_BAD_REQUEST:
        logger.error(f"Client source returned status {response.status_code}")
        raise ExternalServiceError(ErrorMessage.CLIENT_SOURCE_ERROR)

    try:
        data = response.json()
    except ValueError as exc:
        raise ExternalServiceError(ErrorMessage.CLIENT_SOURCE_INVALID) from exc

    records = [record for record in extract_client_records(data) if is_active_record(record)]
    logger.info(f"Fetched {len(records)} active client records")
    return records


def to_bookings(records: list[dict]) -> list[Booking]:
    tz = ZoneInfo(Config.REPORT_TIMEZONE)
    return [Booking.from_record(record, tz) for record in records]


async def get_bookings() -> list[Booking]:
    return to_bookings(await fetch_client_records())
