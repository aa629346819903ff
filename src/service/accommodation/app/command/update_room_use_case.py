from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import ConflictError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.domain.entity.accommodation_entity import Room


class UpdateRoomUseCase:
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
        room_id: int,
        room_number: Optional[str] = None,
        room_type: Optional[str] = None,
        capacity: Optional[int] = None,
        is_available: Optional[bool] = None,
    ) -> Room:
        """
        Raises:
            NotFoundError: Unknown room
            ValidationError: room_number or room_type supplied but empty
            ConflictError: New room_number is taken within the accommodation
        """
        async with self.uow:
            room = await self.uow.accommodation_command_repo.get_room(room_id=room_id)
            if not room:
                raise NotFoundError('Room not found')

            changed = room.apply_update(
                room_number=room_number,
                room_type=room_type,
                capacity=capacity,
                is_available=is_available,
            )
            if changed.room_number != room.room_number and (
                await self.uow.accommodation_command_repo.room_number_exists(
                    accommodation_id=room.accommodation_id,
                    room_number=changed.room_number,
                    exclude_room_id=room_id,
                )
            ):
                raise ConflictError('Room number already exists in this accommodation')

            updated = await self.uow.accommodation_command_repo.update_room(room=changed)
            await self.uow.commit()

        return updated
