from typing import Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.dto.booking_detail import BookingDetail
from src.service.accommodation.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.accommodation.domain.entity.user_entity import UserEntity


class GetBookingUseCase:
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
    async def get_booking(self, *, booking_id: int, actor: UserEntity) -> BookingDetail:
        """Booking with labels and payments; visible to its owner and to admins/organizers"""
        detail = await self.booking_query_repo.get_detail(booking_id=booking_id)
        if not detail:
            raise NotFoundError('Booking not found')

        if not actor.can_access_booking_of(detail.booking.user_id):
            raise ForbiddenError('You do not have permission to view this booking')

        return detail
