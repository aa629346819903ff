"""
Accommodation Query Repository Implementation - CQRS Read Side
"""

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional

from sqlalchemy import Integer, case, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.dto.booking_detail import AvailabilitySummaryItem
from src.service.accommodation.app.dto.query_filter import AccommodationListFilter
from src.service.accommodation.app.interface.i_accommodation_query_repo import (
    IAccommodationQueryRepo,
)
from src.service.accommodation.domain.entity.accommodation_entity import Accommodation, Room
from src.service.accommodation.driven_adapter.model.accommodation_model import (
    AccommodationModel,
    RoomModel,
)
from src.service.accommodation.driven_adapter.repo.model_entity_mapper import (
    accommodation_to_entity,
    room_to_entity,
)


class AccommodationQueryRepoImpl(IAccommodationQueryRepo):
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

    @Logger.io
    async def get_by_id(self, *, accommodation_id: int) -> Optional[Accommodation]:
        async with self._get_session() as session:
            result = await session.execute(
                select(AccommodationModel)
                .options(selectinload(AccommodationModel.rooms))
                .where(AccommodationModel.id == accommodation_id)
            )
            db_accommodation = result.scalar_one_or_none()
            if not db_accommodation:
                return None
            return accommodation_to_entity(db_accommodation, with_rooms=True)

    @Logger.io
    async def list(self, *, query_filter: AccommodationListFilter) -> List[Accommodation]:
        async with self._get_session() as session:
            stmt = select(AccommodationModel)
            if query_filter.is_active is not None:
                stmt = stmt.where(AccommodationModel.is_active == query_filter.is_active)
            if query_filter.min_price is not None:
                stmt = stmt.where(AccommodationModel.price_per_night >= query_filter.min_price)
            if query_filter.max_price is not None:
                stmt = stmt.where(AccommodationModel.price_per_night <= query_filter.max_price)
            if query_filter.location:
                stmt = stmt.where(AccommodationModel.location.ilike(f'%{query_filter.location}%'))

            result = await session.execute(
                stmt.order_by(AccommodationModel.price_per_night, AccommodationModel.id)
            )
            return [accommodation_to_entity(a) for a in result.scalars().all()]

    @Logger.io
    async def get_room(self, *, room_id: int) -> Optional[Room]:
        async with self._get_session() as session:
            db_room = await session.get(RoomModel, room_id)
            if not db_room:
                return None
            return room_to_entity(db_room)

    @Logger.io
    async def availability_summary(self) -> List[AvailabilitySummaryItem]:
        async with self._get_session() as session:
            available_count = func.coalesce(
                func.sum(case((RoomModel.is_available.is_(True), 1), else_=0)), 0
            ).cast(Integer)
            result = await session.execute(
                select(
                    AccommodationModel.id,
                    AccommodationModel.name,
                    AccommodationModel.location,
                    AccommodationModel.price_per_night,
                    func.count(RoomModel.id).label('total_rooms'),
                    available_count.label('available_rooms'),
                )
                .outerjoin(RoomModel, RoomModel.accommodation_id == AccommodationModel.id)
                .where(AccommodationModel.is_active.is_(True))
                .group_by(AccommodationModel.id)
                .order_by(AccommodationModel.price_per_night, AccommodationModel.id)
            )
            return [
                AvailabilitySummaryItem(
                    id=row.id,
                    name=row.name,
                    location=row.location,
                    price_per_night=row.price_per_night,
                    total_rooms=row.total_rooms,
                    available_rooms=row.available_rooms,
                )
                for row in result.all()
            ]
