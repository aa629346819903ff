from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.accommodation.domain.entity.booking_entity import Booking, BookingStatus
from src.service.accommodation.domain.entity.user_entity import UserEntity


class CancelBookingUseCase:
    """
    Cancel a booking on behalf of its owner or an operator

    Flow:
    1. Lock the booking row
    2. Owner or admin/organizer only
    3. Refuse once the guest has checked in (or out) and when already cancelled
    4. status -> cancelled; payment_status stays as recorded (refunds are handled elsewhere)
    """

    def __init__(self, *, uow: AbstractUnitOfWork, booking_metrics: BookingMetrics) -> None:
        self.uow = uow
        self.booking_metrics = booking_metrics

    @classmethod
    @inject
    def depends(
        cls,
        uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work]),
        booking_metrics: BookingMetrics = Depends(Provide[Container.booking_metrics]),
    ) -> Self:
        return cls(uow=uow, booking_metrics=booking_metrics)

    @Logger.io
    async def execute(self, *, booking_id: int, actor: UserEntity) -> Booking:
        async with self.uow:
            booking = await self.uow.booking_command_repo.get_by_id_for_update(
                booking_id=booking_id
            )
            if not booking:
                raise NotFoundError('Booking not found')

            if not actor.can_access_booking_of(booking.user_id):
                raise ForbiddenError('You do not have permission to cancel this booking')

            cancelled = booking.cancel()
            updated = await self.uow.booking_command_repo.update(booking=cancelled)
            await self.uow.commit()

        self.booking_metrics.record_status_change(to_status=BookingStatus.CANCELLED.value)
        return updated
