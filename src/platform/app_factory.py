"""
FastAPI app factory shared by the production app and the test app

Both get the same middleware, exception mapping, routers and operational endpoints;
only the lifespan differs.
"""

from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

from src.platform.config.core_setting import settings
from src.platform.constant.route_constant import ACCOMMODATION_BASE, BOOKING_BASE, REPORT_GET
from src.platform.exception.exception_handlers import register_exception_handlers
from src.platform.observability.tracing import TracingConfig
from src.service.accommodation.driving_adapter.http_controller.accommodation_controller import (
    router as accommodation_router,
)
from src.service.accommodation.driving_adapter.http_controller.booking_controller import (
    router as booking_router,
)
from src.service.accommodation.driving_adapter.http_controller.report_controller import (
    router as report_router,
)


# Order matters: '/api/accommodation/{accommodation_id}' would match '/bookings' and '/reports'
ROUTERS: list[tuple[APIRouter, str, str]] = [
    (booking_router, BOOKING_BASE, 'booking'),
    (report_router, REPORT_GET, 'report'),
    (accommodation_router, ACCOMMODATION_BASE, 'accommodation'),
]


def create_app(
    *,
    lifespan: Callable[[FastAPI], AbstractAsyncContextManager[Any]],
    title_suffix: str = '',
    description: str = 'Event Accommodation Service',
    service_name: str = 'accommodation-service',
) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        lifespan: startup/shutdown context manager
        title_suffix: appended to PROJECT_NAME, e.g. " (Test)"
        description: OpenAPI description
        service_name: resource name reported on spans
    """
    app = FastAPI(
        title=f'{settings.PROJECT_NAME}{title_suffix}',
        description=description,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    # Instrumentation has to wrap the app before routes are mounted
    TracingConfig(service_name=service_name).instrument_fastapi(app=app)

    app.add_middleware(
        CORSMiddleware,  # type: ignore
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    register_exception_handlers(app)

    for router, prefix, tag in ROUTERS:
        app.include_router(router, prefix=prefix, tags=[tag])

    _register_operational_endpoints(app)

    return app


def _register_operational_endpoints(app: FastAPI) -> None:
    @app.get('/health')
    async def health_check() -> dict[str, str]:
        return {'status': 'healthy', 'service': settings.PROJECT_NAME}

    @app.get('/metrics')
    async def get_metrics() -> PlainTextResponse:
        """Prometheus scrape target (booking counters and the create-duration histogram)"""
        return PlainTextResponse(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
