from datetime import date
from decimal import Decimal
import itertools

import pytest

from src.platform.exception.exceptions import ValidationError
from src.service.accommodation.domain.entity.booking_entity import PaymentStatus
from src.service.accommodation.domain.entity.payment_entity import Payment, PaymentMethod
from src.service.accommodation.domain.service.payment_ledger import (
    derive_payment_status,
    total_paid,
)


TOTAL = Decimal('400.00')


@pytest.mark.unit
class TestDerivePaymentStatus:
    def test_empty_ledger_is_pending(self):
        assert derive_payment_status(total_price=TOTAL, amounts=[]) == PaymentStatus.PENDING

    def test_part_paid_is_partial(self):
        status = derive_payment_status(total_price=TOTAL, amounts=[Decimal('100.00')])
        assert status == PaymentStatus.PARTIAL

    def test_exact_total_is_completed(self):
        status = derive_payment_status(
            total_price=TOTAL, amounts=[Decimal('100.00'), Decimal('300.00')]
        )
        assert status == PaymentStatus.COMPLETED

    def test_overpayment_is_completed(self):
        status = derive_payment_status(total_price=TOTAL, amounts=[Decimal('450.00')])
        assert status == PaymentStatus.COMPLETED

    def test_one_cent_short_is_partial(self):
        status = derive_payment_status(total_price=TOTAL, amounts=[Decimal('399.99')])
        assert status == PaymentStatus.PARTIAL

    def test_order_of_entries_does_not_matter(self):
        amounts = [Decimal('50.00'), Decimal('150.00'), Decimal('200.00')]
        results = {
            derive_payment_status(total_price=TOTAL, amounts=list(order))
            for order in itertools.permutations(amounts)
        }
        assert results == {PaymentStatus.COMPLETED}

    def test_total_paid_sums_to_cents(self):
        assert total_paid([Decimal('0.10'), Decimal('0.20')]) == Decimal('0.30')


@pytest.mark.unit
class TestPaymentCreate:
    def test_valid_payment(self):
        payment = Payment.create(
            booking_id=12,
            amount='100',
            payment_date=date(2025, 5, 20),
            payment_method='credit_card',
            reference_number='TXN-1',
        )
        assert payment.amount == Decimal('100.00')
        assert payment.payment_method == PaymentMethod.CREDIT_CARD

    @pytest.mark.parametrize('amount', [Decimal('0'), Decimal('-5.00')])
    def test_non_positive_amount_rejected(self, amount):
        with pytest.raises(ValidationError, match='amount must be greater than 0'):
            Payment.create(
                booking_id=12,
                amount=amount,
                payment_date=date(2025, 5, 20),
                payment_method='cash',
            )

    def test_missing_fields_rejected(self):
        with pytest.raises(
            ValidationError, match='Please provide amount, payment_date, and payment_method'
        ):
            Payment.create(
                booking_id=12, amount=Decimal('10'), payment_date=None, payment_method='cash'
            )

    def test_unknown_method_rejected(self):
        with pytest.raises(ValidationError, match='Invalid payment_method'):
            Payment.create(
                booking_id=12,
                amount=Decimal('10'),
                payment_date=date(2025, 5, 20),
                payment_method='online',
            )
