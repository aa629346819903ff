from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.interface.i_payment_repo import IPaymentQueryRepo
from src.service.accommodation.domain.entity.payment_entity import Payment
from src.service.accommodation.driven_adapter.model.payment_model import PaymentModel
from src.service.accommodation.driven_adapter.repo.model_entity_mapper import payment_to_entity


class PaymentQueryRepoImpl(IPaymentQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ) -> None:
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @Logger.io
    async def list_by_booking(self, *, booking_id: int) -> List[Payment]:
        async with self._get_session() as session:
            result = await session.execute(
                select(PaymentModel)
                .where(PaymentModel.booking_id == booking_id)
                .order_by(PaymentModel.payment_date, PaymentModel.id)
            )
            return [payment_to_entity(p) for p in result.scalars().all()]
