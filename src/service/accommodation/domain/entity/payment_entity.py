from datetime import date, datetime, timezone
from decimal import Decimal
from enum import StrEnum
from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.domain.value_object.money import to_money


class PaymentMethod(StrEnum):
    CREDIT_CARD = 'credit_card'
    BANK_TRANSFER = 'bank_transfer'
    CASH = 'cash'
    OTHER = 'other'


@attrs.define
class Payment:
    """One append-only entry of a booking's ledger"""

    booking_id: int
    amount: Decimal
    payment_date: date
    payment_method: PaymentMethod
    reference_number: Optional[str] = None
    receipt_url: Optional[str] = None
    notes: Optional[str] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        booking_id: int,
        amount: Any,
        payment_date: Optional[date],
        payment_method: Any,
        reference_number: Optional[str] = None,
        receipt_url: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> 'Payment':
        if amount is None or payment_date is None or not payment_method:
            raise ValidationError('Please provide amount, payment_date, and payment_method')
        try:
            money = to_money(amount)
        except ValueError as e:
            raise ValidationError(str(e)) from None
        if money <= 0:
            raise ValidationError('amount must be greater than 0')
        try:
            method = PaymentMethod(payment_method)
        except ValueError:
            valid = ', '.join(m.value for m in PaymentMethod)
            raise ValidationError(f'Invalid payment_method. Must be one of: {valid}') from None

        return cls(
            booking_id=booking_id,
            amount=money,
            payment_date=payment_date,
            payment_method=method,
            reference_number=reference_number,
            receipt_url=receipt_url,
            notes=notes,
            created_at=datetime.now(timezone.utc),
        )
