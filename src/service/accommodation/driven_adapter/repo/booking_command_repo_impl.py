"""
Booking Command Repository Implementation

Always used through the unit of work. The exclusion constraint on
accommodation_bookings is the last line against overlapping live bookings; its
violation surfaces here as ConflictError.
"""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncContextManager, AsyncIterator, Callable, List

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.accommodation.domain.entity.booking_entity import Booking
from src.service.accommodation.driven_adapter.model.booking_model import (
    NO_OVERLAP_CONSTRAINT,
    BookingModel,
)
from src.service.accommodation.driven_adapter.repo.model_entity_mapper import booking_to_entity


class BookingCommandRepoImpl(IBookingCommandRepo):
    def __init__(
        self,
        session: AsyncSession | None = None,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None,
    ) -> None:
        self.session = session
        self.session_factory = session_factory

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Booking | None:
        async with self._get_session() as session:
            db_booking = await session.get(BookingModel, booking_id)
            if not db_booking:
                return None
            return booking_to_entity(db_booking)

    @Logger.io
    async def get_by_id_for_update(self, *, booking_id: int) -> Booking | None:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.id == booking_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            db_booking = result.scalar_one_or_none()
            if not db_booking:
                return None
            return booking_to_entity(db_booking)

    @Logger.io
    async def list_by_room(self, *, room_id: int) -> List[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .where(BookingModel.room_id == room_id)
                .order_by(BookingModel.check_in_date, BookingModel.id)
            )
            return [booking_to_entity(b) for b in result.scalars().all()]

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        async with self._get_session() as session:
            db_booking = BookingModel(
                user_id=booking.user_id,
                event_id=booking.event_id,
                room_id=booking.room_id,
                check_in_date=booking.check_in_date,
                check_out_date=booking.check_out_date,
                status=booking.status.value,
                total_price=booking.total_price,
                payment_status=booking.payment_status.value,
                payment_method=booking.payment_method.value if booking.payment_method else None,
                special_requests=booking.special_requests,
            )
            session.add(db_booking)
            try:
                await session.flush()
            except IntegrityError as e:
                if NO_OVERLAP_CONSTRAINT in str(e.orig):
                    raise ConflictError('Room is not available for the selected dates') from e
                raise
            await session.refresh(db_booking)
            return booking_to_entity(db_booking)

    @Logger.io
    async def update(self, *, booking: Booking) -> Booking:
        async with self._get_session() as session:
            db_booking = await session.get(BookingModel, booking.id)
            if not db_booking:
                raise NotFoundError('Booking not found')

            db_booking.status = booking.status.value
            db_booking.payment_status = booking.payment_status.value
            db_booking.updated_at = booking.updated_at or datetime.now(timezone.utc)

            await session.flush()
            await session.refresh(db_booking)
            return booking_to_entity(db_booking)

    @Logger.io
    async def exists_for_rooms(self, *, room_ids: List[int]) -> bool:
        if not room_ids:
            return False
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel.id).where(BookingModel.room_id.in_(room_ids)).limit(1)
            )
            return result.scalar_one_or_none() is not None
