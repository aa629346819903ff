from datetime import date
from decimal import Decimal
from typing import Optional, Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.accommodation.domain.entity.booking_entity import Booking
from src.service.accommodation.domain.entity.payment_entity import Payment
from src.service.accommodation.domain.entity.user_entity import UserEntity
from src.service.accommodation.domain.service.payment_ledger import derive_payment_status


@attrs.define(frozen=True)
class PaymentRecorded:
    payment: Payment
    booking: Booking


class AddPaymentUseCase:
    """
    Append a payment to a booking's ledger and reconcile payment_status

    The booking row stays locked from the read until commit, and the status is derived
    from the full ledger sum re-read inside that transaction. Two payments submitted at
    once therefore queue on the lock and the second sees the first.
    """

    def __init__(self, *, uow: AbstractUnitOfWork, booking_metrics: BookingMetrics) -> None:
        self.uow = uow
        self.booking_metrics = booking_metrics
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        booking_metrics: BookingMetrics = Depends(Provide[Container.booking_metrics]),
    ) -> Self:
        return cls(uow=uow, booking_metrics=booking_metrics)

    @Logger.io
    async def execute(
        self,
        *,
        booking_id: int,
        actor: UserEntity,
        amount: Optional[Decimal],
        payment_date: Optional[date],
        payment_method: Optional[str],
        reference_number: Optional[str] = None,
        receipt_url: Optional[str] = None,
        notes: Optional[str] = None,
    ) -> PaymentRecorded:
        """
        Raises:
            ValidationError: Missing amount, payment_date or payment_method, or amount <= 0
            NotFoundError: Unknown booking
            ForbiddenError: Caller is neither the owner nor admin/organizer
            PolicyError: Booking is cancelled
        """
        payment = Payment.create(
            booking_id=booking_id,
            amount=amount,
            payment_date=payment_date,
            payment_method=payment_method,
            reference_number=reference_number,
            receipt_url=receipt_url,
            notes=notes,
        )

        with self.tracer.start_as_current_span(
            'use_case.add_payment',
            attributes={'booking.id': booking_id, 'payment.amount': str(payment.amount)},
        ):
            async with self.uow:
                booking = await self.uow.booking_command_repo.get_by_id_for_update(
                    booking_id=booking_id
                )
                if not booking:
                    raise NotFoundError('Booking not found')
                if not actor.can_access_booking_of(booking.user_id):
                    raise ForbiddenError(
                        'You do not have permission to add payment to this booking'
                    )
                booking.validate_can_accept_payment()

                created = await self.uow.payment_command_repo.create(payment=payment)
                amounts = await self.uow.payment_command_repo.list_amounts(booking_id=booking_id)
                payment_status = derive_payment_status(
                    total_price=booking.total_price, amounts=amounts
                )
                updated = await self.uow.booking_command_repo.update(
                    booking=booking.with_payment_status(payment_status)
                )
                await self.uow.commit()

        self.booking_metrics.record_payment(
            payment_method=created.payment_method.value, payment_status=payment_status.value
        )
        Logger.base.info(
            f'💰 [PAYMENT] Booking {booking_id} +{created.amount} -> {payment_status.value}'
        )
        return PaymentRecorded(payment=created, booking=updated)
