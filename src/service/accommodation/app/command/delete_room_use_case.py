from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import PolicyError
from src.platform.logging.loguru_io import Logger


class DeleteRoomUseCase:
    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, room_id: int) -> bool:
        """
        Returns:
            False when the room does not exist (nothing to delete)

        Raises:
            PolicyError: The room is referenced by a booking
        """
        async with self.uow:
            room = await self.uow.accommodation_command_repo.get_room(room_id=room_id)
            if not room:
                return False

            if await self.uow.booking_command_repo.exists_for_rooms(room_ids=[room_id]):
                raise PolicyError('Cannot delete a room that has bookings')

            deleted = await self.uow.accommodation_command_repo.delete_room(room_id=room_id)
            await self.uow.commit()

        return deleted
