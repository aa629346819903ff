"""
Production FastAPI Application

Event accommodation inventory, bookings, payments and reporting.
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.database.orm_db_setting import dispose_engine, get_engine
from src.platform.logging.loguru_io import Logger
from src.platform.observability.tracing import TracingConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Accommodation Service] Starting up...')

    # Setup OpenTelemetry tracing (OTLP export when OTEL_EXPORTER_OTLP_ENDPOINT is set)
    tracing = TracingConfig(service_name='accommodation-service')
    tracing.setup()
    Logger.base.info('📊 [Accommodation Service] OpenTelemetry tracing configured')

    # Wire dependency injection for all modules
    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Accommodation Service] Dependency injection wired')

    # Schema is owned by Alembic; only the engine is prepared here
    engine = get_engine()
    tracing.instrument_sqlalchemy(engine=engine)
    Logger.base.info('🗄️  [Accommodation Service] Database engine ready + instrumented')

    Logger.base.info('✅ [Accommodation Service] Startup complete')

    yield

    Logger.base.info('🛑 [Accommodation Service] Shutting down...')

    await dispose_engine()
    Logger.base.info('🗄️  [Accommodation Service] Database engine disposed')

    # Shutdown tracing (flush remaining spans)
    tracing.shutdown()
    Logger.base.info('📊 [Accommodation Service] Tracing shutdown complete')

    container.unwire()

    Logger.base.info('👋 [Accommodation Service] Shutdown complete')


app = create_app(
    lifespan=lifespan,
    description='Event Accommodation Service - Handles accommodation inventory, '
    'room bookings, payment ledgers and occupancy reporting',
)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
