from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.platform.logging.loguru_io import Logger
from src.service.accommodation.app.interface.i_event_query_repo import IEventQueryRepo
from src.service.accommodation.driven_adapter.model.event_model import EventModel


class EventQueryRepoImpl(IEventQueryRepo):
    """Reads the events table owned by the event module; never writes to it"""

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
    async def exists(self, *, event_id: int) -> bool:
        async with self._get_session() as session:
            result = await session.execute(select(EventModel.id).where(EventModel.id == event_id))
            return result.scalar_one_or_none() is not None
