from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.interface.i_accommodation_query_repo import (
    IAccommodationQueryRepo,
)
from src.service.accommodation.domain.entity.accommodation_entity import Accommodation


class GetAccommodationUseCase:
    def __init__(self, *, accommodation_query_repo: IAccommodationQueryRepo) -> None:
        self.accommodation_query_repo = accommodation_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        accommodation_query_repo: IAccommodationQueryRepo = Depends(
            Provide[Container.accommodation_query_repo]
        ),
    ) -> Self:
        return cls(accommodation_query_repo=accommodation_query_repo)

    @Logger.io
    async def get_accommodation(self, *, accommodation_id: int) -> Accommodation:
        accommodation = await self.accommodation_query_repo.get_by_id(
            accommodation_id=accommodation_id
        )
        if not accommodation:
            raise NotFoundError('Accommodation not found')
        return accommodation
