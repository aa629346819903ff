from datetime import date
from typing import List, Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.interface.i_accommodation_query_repo import (
    IAccommodationQueryRepo,
)
from src.service.accommodation.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.accommodation.domain.entity.accommodation_entity import Room
from src.service.accommodation.domain.service.availability_checker import (
    filter_available_rooms,
    has_conflict,
)
from src.service.accommodation.domain.value_object.stay_period import StayPeriod


class FindAvailableRoomsUseCase:
    """
    Availability lookups for browsing

    Reads without locks, so the answer can be stale by the time the guest books;
    booking creation re-checks under a room lock.
    """

    def __init__(
        self,
        *,
        accommodation_query_repo: IAccommodationQueryRepo,
        booking_query_repo: IBookingQueryRepo,
    ) -> None:
        self.accommodation_query_repo = accommodation_query_repo
        self.booking_query_repo = booking_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        accommodation_query_repo: IAccommodationQueryRepo = Depends(
            Provide[Container.accommodation_query_repo]
        ),
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
    ) -> Self:
        return cls(
            accommodation_query_repo=accommodation_query_repo,
            booking_query_repo=booking_query_repo,
        )

    @Logger.io
    async def find_available_rooms(
        self,
        *,
        accommodation_id: int,
        check_in_date: Optional[date],
        check_out_date: Optional[date],
        today: Optional[date] = None,
    ) -> List[Room]:
        stay = StayPeriod.of(
            check_in=check_in_date, check_out=check_out_date, today=today or date.today()
        )
        accommodation = await self.accommodation_query_repo.get_by_id(
            accommodation_id=accommodation_id
        )
        if not accommodation:
            raise NotFoundError('Accommodation not found')

        bookings = await self.booking_query_repo.list_by_accommodation(
            accommodation_id=accommodation_id
        )
        return filter_available_rooms(rooms=accommodation.rooms, bookings=bookings, stay=stay)

    @Logger.io
    async def has_conflict(
        self,
        *,
        room_id: int,
        check_in_date: Optional[date],
        check_out_date: Optional[date],
    ) -> bool:
        """Overlap check only; past dates are allowed so operators can audit history"""
        stay = StayPeriod.of(check_in=check_in_date, check_out=check_out_date)
        room = await self.accommodation_query_repo.get_room(room_id=room_id)
        if not room:
            raise NotFoundError('Room not found')

        bookings = await self.booking_query_repo.list_by_room(room_id=room_id)
        return has_conflict(stay=stay, bookings=bookings)
