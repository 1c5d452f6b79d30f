"""Pytest configuration and fixtures for sqlite_inproc tests."""

from __future__ import annotations

import sqlite3
import tempfile
from pathlib import Path
from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from sqlite_inproc.adapters.outbound import open_handle
from sqlite_inproc.application import InProcConnection
from sqlite_inproc.domain.value_objects import InMemory
from sqlite_inproc.domain.value_objects import Path as PathLocation
from sqlite_inproc.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def handle() -> Generator[sqlite3.Connection, None, None]:
    """Provide a raw in-memory engine handle configured like the bridge's."""
    conn = open_handle(InMemory())
    yield conn
    conn.close()


@pytest.fixture
def memory_connection(metrics_registry: MetricsRegistry) -> InProcConnection:
    """Provide an in-memory connection with private metrics."""
    return InProcConnection(
        InMemory(),
        statement_cache_size=16,
        busy_timeout_seconds=1.0,
        metrics=metrics_registry,
    )


@pytest.fixture
def file_location(temp_dir: Path) -> PathLocation:
    """Provide a file-backed location inside the temp directory."""
    return PathLocation(temp_dir / "test.db")


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow tests")
