from typing import List, Self

import attrs
from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.core_setting import settings
from src.platform.config.di import Container
from src.platform.exception.exceptions import ValidationError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.dto.booking_detail import BookingDetail
from src.service.accommodation.app.dto.query_filter import BookingListFilter
from src.service.accommodation.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.accommodation.domain.entity.user_entity import UserEntity


class ListBookingsUseCase:
    def __init__(self, *, booking_query_repo: IBookingQueryRepo) -> None:
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo)

    @Logger.io
    async def list_bookings(
        self, *, query_filter: BookingListFilter, actor: UserEntity
    ) -> List[BookingDetail]:
        """
        Admins and organizers see every booking; everyone else only their own,
        whatever user_id they asked for. Pages default to DEFAULT_PAGE_SIZE.
        """
        if query_filter.limit is not None and query_filter.limit < 1:
            raise ValidationError('limit must be at least 1')
        if query_filter.offset < 0:
            raise ValidationError('offset cannot be negative')

        limit = query_filter.limit if query_filter.limit is not None else settings.DEFAULT_PAGE_SIZE
        effective = attrs.evolve(
            query_filter,
            limit=min(limit, settings.MAX_PAGE_SIZE),
            user_id=query_filter.user_id if actor.is_staff else actor.id,
        )
        return await self.booking_query_repo.list(query_filter=effective)

    @Logger.io
    async def list_my_bookings(self, *, actor: UserEntity) -> List[BookingDetail]:
        return await self.booking_query_repo.list(query_filter=BookingListFilter(user_id=actor.id))
