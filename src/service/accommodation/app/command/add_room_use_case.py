from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.domain.entity.accommodation_entity import Room


class AddRoomUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(
        self,
        *,
        accommodation_id: int,
        room_number: Optional[str],
        room_type: Optional[str],
        capacity: Optional[int] = None,
        is_available: Optional[bool] = None,
    ) -> Room:
        room = Room.create(
            accommodation_id=accommodation_id,
            room_number=room_number,
            room_type=room_type,
            capacity=capacity,
            is_available=is_available,
        )

        async with self.uow:
            accommodation = await self.uow.accommodation_command_repo.get_by_id(
                accommodation_id=accommodation_id
            )
            if not accommodation:
                raise NotFoundError('Accommodation not found')

            if await self.uow.accommodation_command_repo.room_number_exists(
                accommodation_id=accommodation_id, room_number=room.room_number
            ):
                raise ConflictError('Room number already exists in this accommodation')

            created = await self.uow.accommodation_command_repo.add_room(room=room)
            await self.uow.commit()

        return created
