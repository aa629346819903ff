"""
PostgreSQL fixtures for integration tests

- The test database is created when missing and migrated to head with Alembic once per session
- Every test starts from empty tables
- The whole module is skipped when PostgreSQL is not reachable
"""

import asyncio
from pathlib import Path
from typing import AsyncGenerator

from alembic import command
from alembic.config import Config
import pytest
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.ext.asyncio import create_async_engine

from src.platform.config.core_setting import settings
from src.platform.database.db_setting import Database, dispose_engine, get_engine
from src.platform.database.unit_of_work import SqlAlchemyUnitOfWork


PROJECT_ROOT = Path(__file__).resolve().parents[4]
TABLES = (
    'accommodation_payments',
    'accommodation_bookings',
    'accommodation_rooms',
    'accommodations',
    'events',
)


async def _ensure_database() -> None:
    url = make_url(settings.DATABASE_URL_ASYNC)
    admin_engine = create_async_engine(
        url.set(database='postgres'), isolation_level='AUTOCOMMIT'
    )
    try:
        async with admin_engine.connect() as conn:
            exists = await conn.scalar(
                text('SELECT 1 FROM pg_database WHERE datname = :name'), {'name': url.database}
            )
            if not exists:
                await conn.execute(text(f'CREATE DATABASE "{url.database}"'))
    finally:
        await admin_engine.dispose()


@pytest.fixture(scope='session')
def migrated_database() -> None:
    try:
        asyncio.run(_ensure_database())
    except (OSError, OperationalError, DBAPIError) as e:
        pytest.skip(f'PostgreSQL not reachable: {e}')

    alembic_config = Config(str(PROJECT_ROOT / 'alembic.ini'))
    alembic_config.set_main_option('script_location', str(PROJECT_ROOT / 'src/platform/alembic'))
    command.upgrade(alembic_config, 'head')


@pytest.fixture
async def clean_database(migrated_database: None) -> AsyncGenerator[None, None]:
    async with get_engine().begin() as conn:
        await conn.execute(text(f'TRUNCATE {", ".join(TABLES)} RESTART IDENTITY CASCADE'))
    yield
    await dispose_engine()


@pytest.fixture
def database(clean_database: None) -> Database:
    return Database()


@pytest.fixture
def uow_factory(database: Database):
    """New unit of work per call, as the DI container hands one to each use case"""
    return lambda: SqlAlchemyUnitOfWork(session_factory=database.session)


@pytest.fixture
async def event_id(clean_database: None) -> int:
    async with get_engine().begin() as conn:
        return await conn.scalar(
            text("INSERT INTO events (title) VALUES ('PyCon Taiwan') RETURNING id")
        )
