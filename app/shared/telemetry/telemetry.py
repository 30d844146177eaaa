"""OpenTelemetry tracing for the stall directory.

Off unless TELEMETRY_ENABLED is set. Exporters: console, otlp (gRPC) or none.
One Telemetry instance is built in create_app() and registered with
set_telemetry() so the engine factory and the lifespan can reach it.
"""

import logging
import threading

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)

# Health probes would drown the upload and catalog spans.
EXCLUDED_URLS = "/api/health"


def _build_exporter(exporter_type: str, otlp_endpoint: str | None) -> SpanExporter | None:
    if exporter_type == "none":
        return None
    if exporter_type == "otlp":
        if otlp_endpoint:
            return OTLPSpanExporter(
                endpoint=otlp_endpoint,
                insecure=otlp_endpoint.startswith("http://"),
            )
        logger.warning("TELEMETRY_EXPORTER=otlp without an endpoint, using console")
    elif exporter_type != "console":
        logger.warning("Unknown telemetry exporter %r, using console", exporter_type)
    return ConsoleSpanExporter()


class Telemetry:
    """Tracer provider plus the instrumentations hung off it."""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        environment: str = "development",
    ) -> None:
        self.service_name = service_name
        self.service_version = service_version
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    @property
    def active(self) -> bool:
        return self.tracer_provider is not None

    def start(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> None:
        """Install a global tracer provider.

        A failure here is logged and leaves telemetry inactive; the service
        keeps serving without spans.
        """
        try:
            provider = TracerProvider(
                resource=Resource(
                    attributes={
                        SERVICE_NAME: self.service_name,
                        SERVICE_VERSION: self.service_version,
                        "deployment.environment": self.environment,
                    }
                ),
                sampler=TraceIdRatioBased(sample_rate),
            )
            exporter = _build_exporter(exporter_type, otlp_endpoint)
            if exporter is not None:
                provider.add_span_processor(BatchSpanProcessor(exporter))
            trace.set_tracer_provider(provider)
        except Exception as e:
            logger.exception("Failed to initialize telemetry: %s", e)
            return
        self.tracer_provider = provider
        logger.info(
            "Telemetry started: service=%s version=%s exporter=%s",
            self.service_name,
            self.service_version,
            exporter_type,
        )

    def instrument_app(self, app: FastAPI) -> None:
        if not self.active:
            return
        try:
            FastAPIInstrumentor.instrument_app(
                app,
                tracer_provider=self.tracer_provider,
                excluded_urls=EXCLUDED_URLS,
            )
            LoggingInstrumentor().instrument(
                tracer_provider=self.tracer_provider,
                set_logging_format=True,
            )
        except Exception as e:
            logger.exception("Failed to instrument app: %s", e)

    def instrument_engine(self, engine: AsyncEngine) -> None:
        """Trace queries on the stall database engine."""
        if not self.active:
            return
        try:
            SQLAlchemyInstrumentor().instrument(
                engine=engine.sync_engine,
                tracer_provider=self.tracer_provider,
            )
        except Exception as e:
            logger.exception("Failed to instrument SQLAlchemy: %s", e)

    def shutdown(self) -> None:
        """Flush pending spans."""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
        except Exception as e:
            logger.exception("Error during telemetry shutdown: %s", e)


_telemetry: Telemetry | None = None
_telemetry_lock = threading.RLock()


def get_telemetry() -> Telemetry | None:
    with _telemetry_lock:
        return _telemetry


def set_telemetry(telemetry: Telemetry | None) -> None:
    global _telemetry
    with _telemetry_lock:
        _telemetry = telemetry
