from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class PaymentKind(str, Enum):
    DOWN_PAYMENT = "down_payment"
    INSTALLMENT = "installment"
    FULL_PAYMENT = "full_payment"


@dataclass(frozen=True)
class DownPayment:
    amount: Decimal
    kind: PaymentKind = PaymentKind.DOWN_PAYMENT

    @property
    def label(self) -> str:
        return "Entrada"


@dataclass(frozen=True)
class Installment:
    amount: Decimal
    number: int
    total: int
    kind: PaymentKind = PaymentKind.INSTALLMENT

    @property
    def label(self) -> str:
        return f"Parcela {self.number}/{self.total}"


@dataclass(frozen=True)
class FullPayment:
    amount: Decimal
    kind: PaymentKind = PaymentKind.FULL_PAYMENT

    @property
    def label(self) -> str:
        return "À Vista"


PaymentEvent = DownPayment | Installment | FullPayment
