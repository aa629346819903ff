from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import ForbiddenError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.accommodation.app.interface.i_payment_repo import IPaymentQueryRepo
from src.service.accommodation.domain.entity.payment_entity import Payment
from src.service.accommodation.domain.entity.user_entity import UserEntity


class ListPaymentsUseCase:
    def __init__(
        self, *, booking_query_repo: IBookingQueryRepo, payment_query_repo: IPaymentQueryRepo
    ) -> None:
        self.booking_query_repo = booking_query_repo
        self.payment_query_repo = payment_query_repo

    @classmethod
    @inject
    def depends(
        cls,
        booking_query_repo: IBookingQueryRepo = Depends(Provide[Container.booking_query_repo]),
        payment_query_repo: IPaymentQueryRepo = Depends(Provide[Container.payment_query_repo]),
    ) -> Self:
        return cls(booking_query_repo=booking_query_repo, payment_query_repo=payment_query_repo)

    @Logger.io
    async def list_payments(self, *, booking_id: int, actor: UserEntity) -> List[Payment]:
        detail = await self.booking_query_repo.get_detail(booking_id=booking_id)
        if not detail:
            raise NotFoundError('Booking not found')
        if not actor.can_access_booking_of(detail.booking.user_id):
            raise ForbiddenError('You do not have permission to view payments for this booking')

        return await self.payment_query_repo.list_by_booking(booking_id=booking_id)
