from datetime import date
import time
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError, NotFoundError, ValidationError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.booking_metrics import BookingMetrics
from src.service.accommodation.domain.entity.booking_entity import (
    Booking,
    parse_booking_payment_method,
)
from src.service.accommodation.domain.service.availability_checker import has_conflict
from src.service.accommodation.domain.value_object.stay_period import StayPeriod


ROOM_UNAVAILABLE_MESSAGE = 'Room is not available for the selected dates'


class CreateBookingUseCase:
    """
    Create booking - check and insert in one transaction

    Flow:
    1. Validate input and dates (fail fast, before touching the database)
    2. Event and room must exist
    3. Lock the room row, re-read its bookings, evaluate the overlap predicate
    4. Insert as pending/pending and commit

    The room lock serialises concurrent creates for the same room; the exclusion
    constraint on the bookings table catches anything that slips past it.
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
    async def create_booking(
        self,
        *,
        user_id: int,
        event_id: Optional[int],
        room_id: Optional[int],
        check_in_date: Optional[date],
        check_out_date: Optional[date],
        payment_method: Optional[str] = None,
        special_requests: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Booking:
        """
        Args:
            user_id: Booking owner (the caller)
            event_id: Event the stay is for
            room_id: Room to book
            check_in_date: First night
            check_out_date: Departure day, exclusive
            payment_method: Intended payment method (online, bank_transfer, cash, other)
            special_requests: Free text for the host
            today: Reference date for the "not in the past" rule, defaults to date.today()

        Returns:
            The persisted booking with status and payment_status pending

        Raises:
            ValidationError: Missing fields or bad dates
            NotFoundError: Unknown event or room
            ConflictError: Room is out of service or already taken for an overlapping stay
        """
        if not event_id or not room_id or not check_in_date or not check_out_date:
            raise ValidationError(
                'Please provide event_id, room_id, check_in_date, and check_out_date'
            )
        stay = StayPeriod.of(
            check_in=check_in_date, check_out=check_out_date, today=today or date.today()
        )
        parse_booking_payment_method(payment_method)

        started_at = time.perf_counter()
        with self.tracer.start_as_current_span(
            'use_case.create_booking',
            attributes={
                'booking.room_id': room_id,
                'booking.event_id': event_id,
                'booking.user_id': user_id,
            },
        ):
            try:
                async with self.uow:
                    if not await self.uow.event_query_repo.exists(event_id=event_id):
                        raise NotFoundError('Event not found')

                    room = await self.uow.accommodation_command_repo.get_room_for_update(
                        room_id=room_id
                    )
                    if not room:
                        raise NotFoundError('Room not found')
                    if not room.is_available:
                        raise ConflictError('Room is currently out of service')

                    accommodation = await self.uow.accommodation_command_repo.get_by_id(
                        accommodation_id=room.accommodation_id
                    )
                    if not accommodation:
                        raise NotFoundError('Accommodation not found')

                    existing = await self.uow.booking_command_repo.list_by_room(room_id=room_id)
                    if has_conflict(stay=stay, bookings=existing):
                        raise ConflictError(ROOM_UNAVAILABLE_MESSAGE)

                    booking = Booking.create(
                        user_id=user_id,
                        event_id=event_id,
                        room_id=room_id,
                        stay=stay,
                        price_per_night=accommodation.price_per_night,
                        payment_method=payment_method,
                        special_requests=special_requests,
                    )
                    created = await self.uow.booking_command_repo.create(booking=booking)
                    await self.uow.commit()
            except ConflictError:
                self.booking_metrics.record_booking_conflict()
                raise

        self.booking_metrics.record_booking_created(duration=time.perf_counter() - started_at)
        Logger.base.info(
            f'📝 [CREATE-BOOKING] Booking {created.id} room {room_id} '
            f'{stay.check_in}..{stay.check_out} ({stay.nights} nights, {created.total_price})'
        )
        return created
