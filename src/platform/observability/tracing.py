"""
OpenTelemetry setup for the accommodation service

- FastAPI and SQLAlchemy are auto-instrumented
- Use cases open their own spans through `trace.get_tracer(__name__)`
- Spans are exported over OTLP when OTEL_EXPORTER_OTLP_ENDPOINT is configured
"""

from typing import Optional

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.trace.sampling import ALWAYS_ON
from sqlalchemy.ext.asyncio import AsyncEngine

from src.platform.config.core_setting import settings


UNTRACED_URLS = 'health,metrics'


class TracingConfig:
    def __init__(
        self,
        *,
        service_name: str,
        otlp_endpoint: Optional[str] = None,
        console_export: Optional[bool] = None,
    ) -> None:
        self.service_name = service_name
        self.otlp_endpoint = otlp_endpoint or settings.OTEL_EXPORTER_OTLP_ENDPOINT
        self.console_export = (
            settings.OTEL_CONSOLE_EXPORT if console_export is None else console_export
        )
        self._provider: Optional[TracerProvider] = None

    def setup(self) -> None:
        """Install the global tracer provider; spans stay in-process when no exporter is set"""
        self._provider = TracerProvider(
            resource=Resource(attributes={SERVICE_NAME: self.service_name}),
            sampler=ALWAYS_ON,
        )

        exporters = []
        if self.otlp_endpoint:
            exporters.append(OTLPSpanExporter(endpoint=self.otlp_endpoint))
        if self.console_export:
            exporters.append(ConsoleSpanExporter())
        for exporter in exporters:
            self._provider.add_span_processor(BatchSpanProcessor(exporter))

        trace.set_tracer_provider(self._provider)

    def instrument_fastapi(self, *, app: FastAPI) -> None:
        FastAPIInstrumentor.instrument_app(app, excluded_urls=UNTRACED_URLS)

    def instrument_sqlalchemy(self, *, engine: AsyncEngine) -> None:
        # The instrumentor hooks cursor events, which only the sync engine emits
        SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)

    def shutdown(self) -> None:
        """Flush pending spans"""
        if self._provider:
            self._provider.shutdown()
