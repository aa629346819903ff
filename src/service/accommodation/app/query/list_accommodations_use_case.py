from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.dto.booking_detail import AvailabilitySummaryItem
from src.service.accommodation.app.dto.query_filter import AccommodationListFilter
from src.service.accommodation.app.interface.i_accommodation_query_repo import (
    IAccommodationQueryRepo,
)
from src.service.accommodation.domain.entity.accommodation_entity import Accommodation


class ListAccommodationsUseCase:
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
    async def list_accommodations(
        self, *, query_filter: AccommodationListFilter
    ) -> List[Accommodation]:
        if (
            query_filter.min_price is not None
            and query_filter.max_price is not None
            and query_filter.min_price > query_filter.max_price
        ):
            raise ValidationError('min_price cannot be greater than max_price')
        return await self.accommodation_query_repo.list(query_filter=query_filter)

    @Logger.io
    async def availability_summary(self) -> List[AvailabilitySummaryItem]:
        return await self.accommodation_query_repo.availability_summary()
