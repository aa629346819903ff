from decimal import Decimal
from typing import Iterable

from src.service.accommodation.domain.entity.booking_entity import PaymentStatus
from src.service.accommodation.domain.value_object.money import ZERO, to_money


def total_paid(amounts: Iterable[Decimal]) -> Decimal:
    return to_money(sum((to_money(amount) for amount in amounts), ZERO))


def derive_payment_status(*, total_price: Decimal, amounts: Iterable[Decimal]) -> PaymentStatus:
    """
    Status is a function of the ledger sum only, so insertion order never matters.
    Overpayment still counts as completed.
    """
    paid = total_paid(amounts)
    if paid <= 0:
        return PaymentStatus.PENDING
    if paid >= to_money(total_price):
        return PaymentStatus.COMPLETED
    return PaymentStatus.PARTIAL
