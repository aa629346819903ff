"""
Accommodation Command Repository Implementation

Runs on the unit-of-work session: flushes so ids and server defaults are visible,
never commits on its own.
"""

from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.interface.i_accommodation_command_repo import (
    IAccommodationCommandRepo,
)
from src.service.accommodation.domain.entity.accommodation_entity import Accommodation, Room
from src.service.accommodation.driven_adapter.model.accommodation_model import (
    ROOM_NUMBER_CONSTRAINT,
    AccommodationModel,
    RoomModel,
)
from src.service.accommodation.driven_adapter.repo.model_entity_mapper import (
    accommodation_to_entity,
    room_to_entity,
)


class AccommodationCommandRepoImpl(IAccommodationCommandRepo):
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

    @staticmethod
    async def _flush_room(session: AsyncSession) -> None:
        try:
            await session.flush()
        except IntegrityError as e:
            if ROOM_NUMBER_CONSTRAINT in str(e.orig):
                raise ConflictError('Room number already exists in this accommodation') from e
            raise

    @Logger.io
    async def get_by_id(self, *, accommodation_id: int) -> Optional[Accommodation]:
        async with self._get_session() as session:
            db_accommodation = await session.get(AccommodationModel, accommodation_id)
            if not db_accommodation:
                return None
            return accommodation_to_entity(db_accommodation)

    @Logger.io
    async def create(self, *, accommodation: Accommodation) -> Accommodation:
        async with self._get_session() as session:
            db_accommodation = AccommodationModel(
                name=accommodation.name,
                description=accommodation.description,
                location=accommodation.location,
                total_rooms=accommodation.total_rooms,
                price_per_night=accommodation.price_per_night,
                amenities=accommodation.amenities,
                image_url=accommodation.image_url,
                is_active=accommodation.is_active,
            )
            session.add(db_accommodation)
            await session.flush()
            await session.refresh(db_accommodation)
            return accommodation_to_entity(db_accommodation)

    @Logger.io
    async def update(self, *, accommodation: Accommodation) -> Accommodation:
        async with self._get_session() as session:
            db_accommodation = await session.get(AccommodationModel, accommodation.id)
            if not db_accommodation:
                raise NotFoundError('Accommodation not found')

            db_accommodation.name = accommodation.name
            db_accommodation.description = accommodation.description
            db_accommodation.location = accommodation.location
            db_accommodation.total_rooms = accommodation.total_rooms
            db_accommodation.price_per_night = accommodation.price_per_night
            db_accommodation.amenities = accommodation.amenities
            db_accommodation.image_url = accommodation.image_url
            db_accommodation.is_active = accommodation.is_active

            await session.flush()
            await session.refresh(db_accommodation)
            return accommodation_to_entity(db_accommodation)

    @Logger.io
    async def delete(self, *, accommodation_id: int) -> bool:
        async with self._get_session() as session:
            # Rooms are removed by ON DELETE CASCADE
            result = await session.execute(
                delete(AccommodationModel).where(AccommodationModel.id == accommodation_id)
            )
            return result.rowcount > 0  # type: ignore[attr-defined]

    @Logger.io
    async def get_room(self, *, room_id: int) -> Optional[Room]:
        async with self._get_session() as session:
            db_room = await session.get(RoomModel, room_id)
            if not db_room:
                return None
            return room_to_entity(db_room)

    @Logger.io
    async def get_room_for_update(self, *, room_id: int) -> Optional[Room]:
        async with self._get_session() as session:
            result = await session.execute(
                select(RoomModel)
                .where(RoomModel.id == room_id)
                .with_for_update()
                .execution_options(populate_existing=True)
            )
            db_room = result.scalar_one_or_none()
            if not db_room:
                return None
            return room_to_entity(db_room)

    @Logger.io
    async def room_number_exists(
        self, *, accommodation_id: int, room_number: str, exclude_room_id: Optional[int] = None
    ) -> bool:
        async with self._get_session() as session:
            stmt = select(RoomModel.id).where(
                RoomModel.accommodation_id == accommodation_id,
                RoomModel.room_number == room_number,
            )
            if exclude_room_id is not None:
                stmt = stmt.where(RoomModel.id != exclude_room_id)
            result = await session.execute(stmt.limit(1))
            return result.scalar_one_or_none() is not None

    @Logger.io
    async def add_room(self, *, room: Room) -> Room:
        async with self._get_session() as session:
            db_room = RoomModel(
                accommodation_id=room.accommodation_id,
                room_number=room.room_number,
                room_type=room.room_type.value,
                capacity=room.capacity,
                is_available=room.is_available,
            )
            session.add(db_room)
            await self._flush_room(session)
            await session.refresh(db_room)
            return room_to_entity(db_room)

    @Logger.io
    async def update_room(self, *, room: Room) -> Room:
        async with self._get_session() as session:
            db_room = await session.get(RoomModel, room.id)
            if not db_room:
                raise NotFoundError('Room not found')

            db_room.room_number = room.room_number
            db_room.room_type = room.room_type.value
            db_room.capacity = room.capacity
            db_room.is_available = room.is_available

            await self._flush_room(session)
            await session.refresh(db_room)
            return room_to_entity(db_room)

    @Logger.io
    async def delete_room(self, *, room_id: int) -> bool:
        async with self._get_session() as session:
            result = await session.execute(delete(RoomModel).where(RoomModel.id == room_id))
            return result.rowcount > 0  # type: ignore[attr-defined]

    @Logger.io
    async def list_room_ids(self, *, accommodation_id: int) -> List[int]:
        async with self._get_session() as session:
            result = await session.execute(
                select(RoomModel.id)
                .where(RoomModel.accommodation_id == accommodation_id)
                .order_by(RoomModel.id)
            )
            return list(result.scalars().all())
