from typing import Any, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.accommodation.domain.entity.booking_entity import Booking, parse_booking_status
from src.service.accommodation.domain.entity.user_entity import UserEntity


class UpdateBookingStatusUseCase:
    """
    Operator-driven lifecycle move (confirm, check in, check out, cancel)

    Only edges of the booking state machine are accepted; checked_out and cancelled
    bookings cannot move at all.
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
    async def execute(self, *, booking_id: int, new_status: Any, actor: UserEntity) -> Booking:
        """
        Raises:
            ForbiddenError: Caller is neither admin nor organizer
            ValidationError: new_status is not a booking status
            NotFoundError: Unknown booking
            PolicyError: The transition is not allowed from the current status
        """
        if not actor.is_staff:
            raise ForbiddenError('Only admins and organizers can update booking status')
        target = parse_booking_status(new_status)

        with self.tracer.start_as_current_span(
            'use_case.update_booking_status',
            attributes={'booking.id': booking_id, 'booking.to_status': target.value},
        ):
            async with self.uow:
                booking = await self.uow.booking_command_repo.get_by_id_for_update(
                    booking_id=booking_id
                )
                if not booking:
                    raise NotFoundError('Booking not found')

                moved = booking.transition_to(target)
                updated = await self.uow.booking_command_repo.update(booking=moved)
                await self.uow.commit()

        self.booking_metrics.record_status_change(to_status=target.value)
        Logger.base.info(f'🔁 [BOOKING-STATUS] {booking_id}: {booking.status} -> {target}')
        return updated
