"""Infrastructure layer - cross-cutting concerns."""

from sqlite_inproc.infrastructure.config import (
    Config,
    DatabaseConfig,
    ObservabilityConfig,
    get_config,
)
from sqlite_inproc.infrastructure.logging import (
    get_logger,
    setup_logging,
    setup_logging_from_config,
)
from sqlite_inproc.infrastructure.metrics import MetricsRegistry, get_metrics, setup_metrics
from sqlite_inproc.infrastructure.tracing import (
    get_tracer,
    setup_tracing,
    setup_tracing_from_config,
    statement_span,
    trace_span,
)

__all__ = [
    "Config",
    "DatabaseConfig",
    "ObservabilityConfig",
    "get_config",
    "setup_logging",
    "setup_logging_from_config",
    "get_logger",
    "setup_metrics",
    "get_metrics",
    "MetricsRegistry",
    "setup_tracing",
    "get_tracer",
    "setup_tracing_from_config",
    "trace_span",
    "statement_span",
]
