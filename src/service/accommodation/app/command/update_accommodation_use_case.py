from decimal import Decimal
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.domain.entity.accommodation_entity import Accommodation


class UpdateAccommodationUseCase:
    """Partial update: only fields that are passed (not None) change"""

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
        name: Optional[str] = None,
        location: Optional[str] = None,
        total_rooms: Optional[int] = None,
        price_per_night: Optional[Decimal] = None,
        description: Optional[str] = None,
        amenities: Optional[str] = None,
        image_url: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> Accommodation:
        async with self.uow:
            accommodation = await self.uow.accommodation_command_repo.get_by_id(
                accommodation_id=accommodation_id
            )
            if not accommodation:
                raise NotFoundError('Accommodation not found')

            changed = accommodation.apply_update(
                name=name,
                location=location,
                total_rooms=total_rooms,
                price_per_night=price_per_night,
                description=description,
                amenities=amenities,
                image_url=image_url,
                is_active=is_active,
            )
            updated = await self.uow.accommodation_command_repo.update(accommodation=changed)
            await self.uow.commit()

        return updated
