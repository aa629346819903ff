from decimal import Decimal
from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.database.unit_of_work import AbstractUnitOfWork
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.domain.entity.accommodation_entity import Accommodation


class CreateAccommodationUseCase:
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
        name: Optional[str],
        location: Optional[str],
        total_rooms: Optional[int],
        price_per_night: Optional[Decimal],
        description: Optional[str] = None,
        amenities: Optional[str] = None,
        image_url: Optional[str] = None,
        is_active: Optional[bool] = None,
    ) -> Accommodation:
        accommodation = Accommodation.create(
            name=name,
            location=location,
            total_rooms=total_rooms,
            price_per_night=price_per_night,
            description=description,
            amenities=amenities,
            image_url=image_url,
            is_active=is_active,
        )

        async with self.uow:
            created = await self.uow.accommodation_command_repo.create(accommodation=accommodation)
            await self.uow.commit()

        Logger.base.info(f'🏨 [ACCOMMODATION] Created {created.id} ({created.name})')
        return created
