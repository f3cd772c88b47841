"""OpenTelemetry tracing for the catalog service."""

import logging
from typing import TYPE_CHECKING

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, SpanExporter
from opentelemetry.trace import Tracer

from catalog import __version__
from catalog.core.config import Settings, get_settings

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)

_tracer_provider: TracerProvider | None = None


def _create_exporter(settings: Settings) -> SpanExporter:
    """Build the OTLP span exporter for the configured protocol."""
    if settings.otel_exporter_otlp_protocol == "grpc":
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
    else:
        from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter

    return OTLPSpanExporter(endpoint=settings.otel_exporter_otlp_endpoint)


def _instrument(app: "FastAPI") -> None:
    """Trace incoming requests and every statement sent to the catalog database."""
    from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
    from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor

    from catalog.core.database import engine

    FastAPIInstrumentor.instrument_app(app, excluded_urls="/docs,/openapi.json")
    SQLAlchemyInstrumentor().instrument(engine=engine.sync_engine)


def setup_tracing(app: "FastAPI") -> None:
    """Install a tracer provider and instrument the app when tracing is enabled.

    Service spans (book writes, delete guards) are created through
    ``get_tracer`` and exported alongside the request and SQL spans.
    """
    global _tracer_provider

    settings = get_settings()
    if not settings.otel_enabled:
        logger.info("Tracing disabled (OTEL_ENABLED is not set)")
        return

    provider = TracerProvider(
        resource=Resource.create(
            {
                "service.name": settings.otel_service_name,
                "service.version": __version__,
                "deployment.environment": settings.environment,
            }
        )
    )
    provider.add_span_processor(BatchSpanProcessor(_create_exporter(settings)))
    trace.set_tracer_provider(provider)
    _tracer_provider = provider

    _instrument(app)

    logger.info(
        f"Tracing '{settings.otel_service_name}' over OTLP/{settings.otel_exporter_otlp_protocol} "
        f"to {settings.otel_exporter_otlp_endpoint}"
    )


def shutdown_tracing() -> None:
    """Flush pending spans and release the tracer provider."""
    global _tracer_provider

    if _tracer_provider is None:
        return
    _tracer_provider.shutdown()
    _tracer_provider = None
    logger.info("Tracing shut down")


def get_tracer(name: str) -> Tracer:
    """Return a tracer for service-level spans in module ``name``."""
    return trace.get_tracer(name)
