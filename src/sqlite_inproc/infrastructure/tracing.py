"""OpenTelemetry tracing configuration.

Each bridge call runs inside a span following the OpenTelemetry database
semantic conventions (``db.system``, ``db.name``, ``db.statement``).
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Generator

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from sqlite_inproc import __version__
from sqlite_inproc.infrastructure.config import ObservabilityConfig


_tracer: trace.Tracer | None = None

DB_SYSTEM = "sqlite"


def setup_tracing(
    service_name: str = "sqlite_inproc",
    otlp_endpoint: str | None = None,
    console_export: bool = False,
) -> trace.Tracer:
    """
    Set up OpenTelemetry tracing.

    Args:
        service_name: Name of the service for tracing
        otlp_endpoint: OTLP collector endpoint (e.g., "http://localhost:4317")
        console_export: Whether to also export to console (for debugging)

    Returns:
        Configured tracer instance
    """
    global _tracer

    provider = TracerProvider(
        resource=Resource.create(
            {
                "service.name": service_name,
                "service.version": __version__,
            }
        )
    )

    if otlp_endpoint:
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=otlp_endpoint, insecure=True))
        )
    if console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)
    _tracer = provider.get_tracer(service_name, __version__)
    return _tracer


def setup_tracing_from_config(config: ObservabilityConfig) -> trace.Tracer:
    """Set up tracing from the observability section of the config."""
    return setup_tracing(
        service_name=config.otel_service_name,
        otlp_endpoint=config.otel_endpoint,
    )


def get_tracer() -> trace.Tracer:
    """Get the global tracer instance."""
    global _tracer
    if _tracer is None:
        _tracer = trace.get_tracer("sqlite_inproc", __version__)
    return _tracer


@contextmanager
def trace_span(
    name: str,
    attributes: dict[str, Any] | None = None,
) -> Generator[trace.Span, None, None]:
    """
    Context manager for creating a trace span.

    Exceptions escaping the block are recorded on the span and re-raised.

    Args:
        name: Name of the span
        attributes: Optional attributes to add to the span

    Yields:
        The created span
    """
    with get_tracer().start_as_current_span(name, attributes=attributes) as span:
        yield span


@contextmanager
def statement_span(
    operation: str,
    sql: str,
    database: str,
) -> Generator[trace.Span, None, None]:
    """
    Span for one bridge call.

    Args:
        operation: Bridge operation, e.g. ``query`` or ``execute_batch``
        sql: The statement text
        database: Location of the database (":memory:" or a path)

    Yields:
        The created span, named ``sqlite.<operation>``
    """
    attributes = {
        "db.system": DB_SYSTEM,
        "db.name": database,
        "db.statement": sql,
        "db.operation": operation,
    }
    with trace_span(f"{DB_SYSTEM}.{operation}", attributes) as span:
        yield span
