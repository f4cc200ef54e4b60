from __future__ import annotations

import csv
import io
from datetime import date, datetime
from decimal import Decimal
from typing import Sequence

from app.api.reports.allocator import calculate_monthly_revenue
from app.api.reports.helpers import MONTH_NAMES, YearMonth, format_brl
from app.api.reports.models import Booking
from app.api.reports.service import bookings_created_in, bookings_created_in_year
from app.core.config import Config
from app.core.exceptions import ResourceNotFound
from app.core.messages import ErrorMessage

BOM = "\ufeff"
EXPORT_TYPES = {"complete": "complete", "all": "complete", "clients": "clients"}

COMPLETE_HEADER = [
    "Nome Completo", "Email", "Telefone", "Destino", "Data da Viagem",
    "Valor da Viagem", "Método de Pagamento", "Data de Cadastro",
]
CLIENTS_HEADER = [
    "Nome Completo", "Email", "Telefone", "Data de Nascimento", "Destino",
    "Data da Viagem", "Valor da Viagem", "Método de Pagamento", "Data de Cadastro",
]


FORMULA_PREFIXES = ("=", "+", "-", "@")


def _cell(value) -> str:
    """Render user-entered text; leading formula characters get a quote prefix."""
    if value is None or value == "":
        return "-"
    text = str(value).replace("\r\n", " ").replace("\n", " ")
    if text.startswith(FORMULA_PREFIXES):
        return "'" + text
    return text


def _format_date(value: date | None) -> str:
    return value.strftime("%d/%m/%Y") if value else "-"


def _format_method(value: str | None) -> str:
    return value.replace("_", " ", 1).upper() if value else "-"


def _client_row(booking: Booking, with_birthdate: bool) -> list[str]:
    row = [
        _cell(booking.full_name),
        _cell(booking.email),
        _cell(booking.phone),
    ]
    if with_birthdate:
        row.append(_format_date(booking.birthdate))
    row += [
        _cell(booking.destination),
        _format_date(booking.travel_date),
        format_brl(booking.travel_price),
        _format_method(booking.payment_method),
        _format_date(booking.created_at),
    ]
    return row


def export_filename(export_type: str, year: int, month: int | None = None) -> str:
    period = f"{MONTH_NAMES[month - 1]}_{year}" if month else f"Ano_{year}"
    if export_type == "clients":
        return f"{Config.AGENCY_FILE_PREFIX}_Clientes_{period}.csv"
    scope = "Mensal" if month else "Anual"
    return f"{Config.AGENCY_FILE_PREFIX}_Relatorio_{scope}_{period}.csv"


def period_revenue(bookings: Sequence[Booking], year: int, month: int | None = None) -> Decimal:
    if month:
        return calculate_monthly_revenue(bookings, year, month)
    return sum(
        (calculate_monthly_revenue(bookings, year, m) for m in range(1, 13)),
        Decimal("0"),
    )


def build_csv_export(
    bookings: Sequence[Booking],
    export_type: str,
    year: int,
    month: int | None = None,
    generated_at: datetime | None = None,
) -> tuple[str, str]:
    """Render a report CSV and return ``(filename, content)``.

    The content starts with a UTF-8 BOM so spreadsheet tools pick the
    right encoding. Totals come from the revenue allocator, matching the
    figures shown on the monthly report.
    """
    kind = EXPORT_TYPES.get(export_type)
    if kind is None:
        raise ValueError(f"{ErrorMessage.INVALID_EXPORT_TYPE}: {export_type}")

    if month:
        clients = bookings_created_in(bookings, YearMonth.create(year, month))
    else:
        clients = bookings_created_in_year(bookings, year)

    generated_at = generated_at or datetime.now()
    period_text = MONTH_NAMES[month - 1] if month else "Ano Completo"
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")

    if kind == "complete":
        title = "Relatório Mensal" if month else "Relatório Anual"
        writer.writerow([f"{Config.AGENCY_NAME} - {title}"])
        writer.writerow([f"Período: {period_text} de {year}"])
        writer.writerow([f"Gerado em: {generated_at.strftime('%d/%m/%Y %H:%M:%S')}"])
        writer.writerow([])
        writer.writerow(["RESUMO EXECUTIVO"])
        writer.writerow(["Total de Clientes", len(clients)])
        writer.writerow(["Receita Total", format_brl(period_revenue(bookings, year, month))])
        writer.writerow([])
        if clients:
            writer.writerow(["NOVOS CLIENTES"])
            writer.writerow(COMPLETE_HEADER)
            for booking in clients:
                writer.writerow(_client_row(booking, with_birthdate=False))
    else:
        if not clients:
            raise ResourceNotFound(ErrorMessage.NO_CLIENTS_FOR_PERIOD)
        title = "Relatório Mensal de Clientes" if month else "Relatório Anual de Clientes"
        writer.writerow([f"{Config.AGENCY_NAME} - {title}"])
        writer.writerow([f"Período: {period_text} de {year}"])
        writer.writerow([f"Total de Clientes: {len(clients)}"])
        writer.writerow([f"Gerado em: {generated_at.strftime('%d/%m/%Y %H:%M:%S')}"])
        writer.writerow([])
        writer.writerow(CLIENTS_HEADER)
        for booking in clients:
            writer.writerow(_client_row(booking, with_birthdate=True))

    return export_filename(kind, year, month), BOM + buffer.getvalue()
