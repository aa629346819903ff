"""
Booking Query Repository Implementation - CQRS Read Side
"""

from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, List, Optional

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.dto.booking_detail import BookingDetail
from src.service.accommodation.app.dto.query_filter import BookingListFilter
from src.service.accommodation.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.accommodation.domain.entity.accommodation_entity import RoomType
from src.service.accommodation.domain.entity.booking_entity import Booking
from src.service.accommodation.driven_adapter.model.accommodation_model import (
    AccommodationModel,
    RoomModel,
)
from src.service.accommodation.driven_adapter.model.booking_model import BookingModel
from src.service.accommodation.driven_adapter.model.event_model import EventModel
from src.service.accommodation.driven_adapter.model.payment_model import PaymentModel
from src.service.accommodation.driven_adapter.repo.model_entity_mapper import (
    booking_to_entity,
    payment_to_entity,
)


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _detail_select() -> Select[Any]:
        return (
            select(
                BookingModel,
                RoomModel.room_number,
                RoomModel.room_type,
                AccommodationModel.id.label('accommodation_id'),
                AccommodationModel.name.label('accommodation_name'),
                AccommodationModel.location.label('accommodation_location'),
                EventModel.title.label('event_title'),
            )
            .join(RoomModel, RoomModel.id == BookingModel.room_id)
            .join(AccommodationModel, AccommodationModel.id == RoomModel.accommodation_id)
            .outerjoin(EventModel, EventModel.id == BookingModel.event_id)
        )

    @staticmethod
    def _to_detail(row: Any, payments: Optional[list] = None) -> BookingDetail:
        return BookingDetail(
            booking=booking_to_entity(row.BookingModel),
            room_number=row.room_number,
            room_type=RoomType(row.room_type),
            accommodation_id=row.accommodation_id,
            accommodation_name=row.accommodation_name,
            accommodation_location=row.accommodation_location,
            event_title=row.event_title,
            payments=payments or [],
        )

    @Logger.io
    async def get_detail(self, *, booking_id: int) -> Optional[BookingDetail]:
        async with self._get_session() as session:
            result = await session.execute(
                self._detail_select().where(BookingModel.id == booking_id)
            )
            row = result.one_or_none()
            if row is None:
                return None

            payments_result = await session.execute(
                select(PaymentModel)
                .where(PaymentModel.booking_id == booking_id)
                .order_by(PaymentModel.payment_date, PaymentModel.id)
            )
            payments = [payment_to_entity(p) for p in payments_result.scalars().all()]
            return self._to_detail(row, payments)

    @Logger.io
    async def list(self, *, query_filter: BookingListFilter) -> List[BookingDetail]:
        async with self._get_session() as session:
            stmt = self._detail_select()
            if query_filter.status is not None:
                stmt = stmt.where(BookingModel.status == query_filter.status.value)
            if query_filter.event_id is not None:
                stmt = stmt.where(BookingModel.event_id == query_filter.event_id)
            if query_filter.user_id is not None:
                stmt = stmt.where(BookingModel.user_id == query_filter.user_id)
            if query_filter.accommodation_id is not None:
                stmt = stmt.where(AccommodationModel.id == query_filter.accommodation_id)
            if query_filter.start_date is not None:
                stmt = stmt.where(BookingModel.check_in_date >= query_filter.start_date)
            if query_filter.end_date is not None:
                stmt = stmt.where(BookingModel.check_out_date <= query_filter.end_date)
            if query_filter.payment_status is not None:
                stmt = stmt.where(BookingModel.payment_status == query_filter.payment_status.value)

            stmt = stmt.order_by(BookingModel.created_at.desc(), BookingModel.id.desc())
            if query_filter.limit is not None:
                stmt = stmt.limit(query_filter.limit)
            if query_filter.offset:
                stmt = stmt.offset(query_filter.offset)

            result = await session.execute(stmt)
            return [self._to_detail(row) for row in result.all()]

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
    async def list_by_accommodation(self, *, accommodation_id: int) -> List[Booking]:
        async with self._get_session() as session:
            result = await session.execute(
                select(BookingModel)
                .join(RoomModel, RoomModel.id == BookingModel.room_id)
                .where(RoomModel.accommodation_id == accommodation_id)
                .order_by(BookingModel.check_in_date, BookingModel.id)
            )
            return [booking_to_entity(b) for b in result.scalars().all()]
