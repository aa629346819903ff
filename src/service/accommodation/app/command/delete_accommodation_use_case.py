from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError, PolicyError
from src.platform.logging.loguru_io import Logger


class DeleteAccommodationUseCase:
    """
    Hard delete of an accommodation and its rooms

    Bookings are never deleted, so an accommodation whose rooms were ever booked can
    only be deactivated (is_active=false).
    """

    def __init__(self, *, uow: AbstractUnitOfWork) -> None:
        self.uow = uow

    @classmethod
    @inject
    def depends(cls, uow: AbstractUnitOfWork = Depends(Provide[Container.unit_of_work])) -> Self:
        return cls(uow=uow)

    @Logger.io
    async def execute(self, *, accommodation_id: int) -> None:
        async with self.uow:
            accommodation = await self.uow.accommodation_command_repo.get_by_id(
                accommodation_id=accommodation_id
            )
            if not accommodation:
                raise NotFoundError('Accommodation not found')

            room_ids = await self.uow.accommodation_command_repo.list_room_ids(
                accommodation_id=accommodation_id
            )
            if await self.uow.booking_command_repo.exists_for_rooms(room_ids=room_ids):
                raise PolicyError(
                    'Cannot delete accommodation with existing bookings; deactivate it instead'
                )

            await self.uow.accommodation_command_repo.delete(accommodation_id=accommodation_id)
            await self.uow.commit()

        Logger.base.info(f'🗑️  [ACCOMMODATION] Deleted {accommodation_id}')
