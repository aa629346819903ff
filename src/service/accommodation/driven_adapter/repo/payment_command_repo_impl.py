from contextlib import asynccontextmanager
from decimal import Decimal
from typing import AsyncContextManager, AsyncIterator, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.interface.i_payment_repo import IPaymentCommandRepo
from src.service.accommodation.domain.entity.payment_entity import Payment
from src.service.accommodation.driven_adapter.model.payment_model import PaymentModel
from src.service.accommodation.driven_adapter.repo.model_entity_mapper import payment_to_entity


class PaymentCommandRepoImpl(IPaymentCommandRepo):
    def __init__(
        self,
        session: AsyncSession | None = None,
        session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None,
    ) -> None:
        self.session = session
        self.session_factory = session_factory

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
    async def create(self, *, payment: Payment) -> Payment:
        async with self._get_session() as session:
            db_payment = PaymentModel(
                booking_id=payment.booking_id,
                amount=payment.amount,
                payment_date=payment.payment_date,
                payment_method=payment.payment_method.value,
                reference_number=payment.reference_number,
                receipt_url=payment.receipt_url,
                notes=payment.notes,
            )
            session.add(db_payment)
            await session.flush()
            await session.refresh(db_payment)
            return payment_to_entity(db_payment)

    @Logger.io
    async def list_amounts(self, *, booking_id: int) -> List[Decimal]:
        async with self._get_session() as session:
            result = await session.execute(
                select(PaymentModel.amount).where(PaymentModel.booking_id == booking_id)
            )
            return list(result.scalars().all())
