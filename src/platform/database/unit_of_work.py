"""
Unit of Work Pattern - one database transaction shared by the repositories of a use case

Architecture:
- UoW owns the session lifecycle and commit/rollback
- Repositories receive the shared session from the UoW
- Anything not committed before leaving the `async with` block is rolled back
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING, AsyncContextManager, Callable, Optional

from sqlalchemy.ext.asyncio import AsyncSession


if TYPE_CHECKING:
    from src.service.accommodation.app.interface.i_accommodation_command_repo import (
        IAccommodationCommandRepo,
    )
    from src.service.accommodation.app.interface.i_booking_command_repo import (
        IBookingCommandRepo,
    )
    from src.service.accommodation.app.interface.i_event_query_repo import IEventQueryRepo
    from src.service.accommodation.app.interface.i_payment_repo import IPaymentCommandRepo


class AbstractUnitOfWork(abc.ABC):
    """
    Abstract Unit of Work for the accommodation service

    Usage:
        async with uow:
            room = await uow.accommodation_command_repo.get_room_for_update(room_id=...)
            booking = await uow.booking_command_repo.create(booking=...)
            await uow.commit()
    """

    accommodation_command_repo: IAccommodationCommandRepo
    booking_command_repo: IBookingCommandRepo
    payment_command_repo: IPaymentCommandRepo
    event_query_repo: IEventQueryRepo

    async def __aenter__(self) -> AbstractUnitOfWork:
        return self

    async def __aexit__(self, *args) -> None:
        await self.rollback()

    async def commit(self) -> None:
        await self._commit()

    @abc.abstractmethod
    async def _commit(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    async def rollback(self) -> None:
        raise NotImplementedError


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """
    SQLAlchemy implementation of Unit of Work

    A fresh session is opened per `async with` block, so one instance may be reused
    for consecutive transactions but not for nested ones.
    """

    def __init__(self, session_factory: Callable[[], AsyncContextManager[AsyncSession]]):
        self.session_factory = session_factory
        self.session: Optional[AsyncSession] = None
        self._session_cm: Optional[AsyncContextManager[AsyncSession]] = None

    async def __aenter__(self) -> SqlAlchemyUnitOfWork:
        from src.service.accommodation.driven_adapter.repo.accommodation_command_repo_impl import (
            AccommodationCommandRepoImpl,
        )
        from src.service.accommodation.driven_adapter.repo.booking_command_repo_impl import (
            BookingCommandRepoImpl,
        )
        from src.service.accommodation.driven_adapter.repo.event_query_repo_impl import (
            EventQueryRepoImpl,
        )
        from src.service.accommodation.driven_adapter.repo.payment_command_repo_impl import (
            PaymentCommandRepoImpl,
        )

        self._session_cm = self.session_factory()
        self.session = await self._session_cm.__aenter__()

        # Repositories share the UoW session
        self.accommodation_command_repo = AccommodationCommandRepoImpl(session=self.session)
        self.booking_command_repo = BookingCommandRepoImpl(session=self.session)
        self.payment_command_repo = PaymentCommandRepoImpl(session=self.session)
        self.event_query_repo = EventQueryRepoImpl(session=self.session)

        await super().__aenter__()
        return self

    async def __aexit__(self, *args) -> None:
        try:
            await super().__aexit__(*args)
        finally:
            if self._session_cm is not None:
                await self._session_cm.__aexit__(*args)
            self._session_cm = None
            self.session = None

    async def _commit(self) -> None:
        if self.session is None:
            raise RuntimeError('commit() called outside of `async with uow`')
        await self.session.commit()

    async def rollback(self) -> None:
        if self.session is not None:
            await self.session.rollback()
