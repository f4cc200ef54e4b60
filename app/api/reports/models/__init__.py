from app.api.reports.models.booking import Booking, DEFAULT_FIRST_INSTALLMENT_DELAY_MONTHS
from app.api.reports.models.payment_event import (
    DownPayment,
    FullPayment,
    Installment,
    PaymentEvent,
    PaymentKind,
)


__all__ = [
    "Booking",
    "DEFAULT_FIRST_INSTALLMENT_DELAY_MONTHS",
    "DownPayment",
    "FullPayment",
    "Installment",
    "PaymentEvent",
    "PaymentKind",
]
