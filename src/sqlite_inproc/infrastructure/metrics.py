"""Prometheus metrics for the in-process SQLite bridge.

Metrics are only collected here; exposing them (an HTTP endpoint, a push
gateway) is left to the host process that owns the registry.
"""

from __future__ import annotations

import sqlite3

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    Info,
    REGISTRY,
    CollectorRegistry,
)


class MetricsRegistry:
    """Registry of all connection bridge metrics."""

    def __init__(self, registry: CollectorRegistry | None = None) -> None:
        """Initialize metrics registry."""
        self._registry = registry or REGISTRY

        # Query metrics
        self.queries_total = Counter(
            "sqlite_queries_total",
            "Total number of statements executed",
            ["operation", "status"],  # operation: query, execute_batch; status: success, error
            registry=self._registry,
        )

        self.query_latency_seconds = Histogram(
            "sqlite_query_latency_seconds",
            "End-to-end latency of a call, including offload and lock wait",
            ["operation"],
            buckets=(0.0005, 0.001, 0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0),
            registry=self._registry,
        )

        self.rows_returned_total = Counter(
            "sqlite_rows_returned_total",
            "Total rows materialized into query results",
            registry=self._registry,
        )

        # Lock metrics
        self.lock_wait_seconds = Histogram(
            "sqlite_lock_wait_seconds",
            "Time a worker spent waiting for the connection lock",
            buckets=(0.0001, 0.001, 0.01, 0.1, 0.5, 1.0, 5.0),
            registry=self._registry,
        )

        self.calls_in_flight = Gauge(
            "sqlite_calls_in_flight",
            "Calls handed to a worker thread and not yet finished",
            registry=self._registry,
        )

        # Offload metrics
        self.offload_failures_total = Counter(
            "sqlite_offload_failures_total",
            "Calls whose worker thread failed to run",
            ["operation"],
            registry=self._registry,
        )

        # Connection metrics
        self.connections_opened_total = Counter(
            "sqlite_connections_opened_total",
            "Total database handles opened",
            ["location"],  # memory, file
            registry=self._registry,
        )

        self.info = Info(
            "sqlite_inproc",
            "In-process SQLite bridge information",
            registry=self._registry,
        )


# Global metrics registry
_metrics: MetricsRegistry | None = None


def setup_metrics(registry: CollectorRegistry | None = None) -> MetricsRegistry:
    """
    Set up the global metrics registry.

    Args:
        registry: Optional custom registry

    Returns:
        The metrics registry
    """
    global _metrics
    _metrics = MetricsRegistry(registry)

    from sqlite_inproc import __version__
    _metrics.info.info({
        "version": __version__,
        "sqlite_version": sqlite3.sqlite_version,
    })

    return _metrics


def get_metrics() -> MetricsRegistry:
    """Get the global metrics registry."""
    global _metrics
    if _metrics is None:
        _metrics = MetricsRegistry()
    return _metrics
