"""In-process connection - async bridge over a synchronous sqlite3 handle.

The sqlite3 handle is neither safe to call concurrently nor safe to call from
the event loop thread. Every call therefore:

    1. is handed to a worker thread with ``asyncio.to_thread`` (the only
       suspension point), and
    2. acquires the connection's ``threading.Lock`` inside that worker, just
       before touching the handle, releasing it on every exit path.

The lock is never held across an ``await``. If the awaiting task is
cancelled, the worker is not interrupted: it finishes the engine call and
releases the lock; the result is discarded.

Usage:
    from sqlite_inproc import InMemory, Integer, InProcConnection

    conn = InProcConnection(InMemory())
    result = await conn.query("SELECT ? AS x", [Integer(42)])
    # result.columns == ["x"], result.rows[0].values == [Integer(42)]
"""

from __future__ import annotations

import asyncio
import sqlite3
import threading
import time
import weakref
from contextlib import contextmanager
from typing import Any, Callable, Iterator, Sequence, TypeVar

from sqlite_inproc.adapters.outbound.row_materializer import make_query
from sqlite_inproc.adapters.outbound.script_runner import run_script
from sqlite_inproc.adapters.outbound.sqlite_handle import open_handle
from sqlite_inproc.domain.entities import QueryResult
from sqlite_inproc.domain.value_objects import VALUE_TYPES, InMemory, Location, Value
from sqlite_inproc.infrastructure.config import DatabaseConfig, get_config
from sqlite_inproc.infrastructure.logging import get_logger
from sqlite_inproc.infrastructure.metrics import MetricsRegistry, get_metrics
from sqlite_inproc.infrastructure.tracing import statement_span
from sqlite_inproc.ports.inbound import (
    BatchExecutionError,
    ConversionError,
    IoError,
    SqliteError,
)

T = TypeVar("T")

# sqlite3.Warning covers misuse such as several statements in one execute
# on older interpreters; it is not a subclass of sqlite3.Error.
ENGINE_ERRORS = (sqlite3.Error, sqlite3.Warning)


class InProcConnection:
    """Async connection to an in-process SQLite database.

    Implements the ``Connection`` port. One instance owns exactly one engine
    handle; share the instance (not the handle) between tasks. There is no
    close method: the handle is closed when the last reference is dropped.

    Thread Safety:
        Safe to share between any number of tasks and event loops. Calls are
        serialized by an exclusive lock in lock-acquisition order; no further
        fairness is guaranteed. Separate instances never coordinate.
    """

    def __init__(
        self,
        location: Location,
        statement_cache_size: int | None = None,
        busy_timeout_seconds: float | None = None,
        metrics: MetricsRegistry | None = None,
    ) -> None:
        """Open the engine handle.

        Args:
            location: In-memory or a filesystem path.
            statement_cache_size: Prepared statement cache size (default from config).
            busy_timeout_seconds: Wait on a locked file (default from config).
            metrics: Metrics registry (default: the global one).

        Raises:
            IoError: If the database cannot be opened or created.
        """
        if statement_cache_size is None:
            statement_cache_size = get_config().database.statement_cache_size
        if busy_timeout_seconds is None:
            busy_timeout_seconds = get_config().database.busy_timeout_seconds

        self._location = location
        self._metrics = metrics or get_metrics()
        self._logger = get_logger(__name__, location=str(location))

        handle = open_handle(
            location,
            cached_statements=statement_cache_size,
            timeout=busy_timeout_seconds,
        )
        self._handle = handle
        self._lock = threading.Lock()
        # Must not reference self, or the connection would never be collected
        self._finalizer = weakref.finalize(self, handle.close)

        kind = "memory" if isinstance(location, InMemory) else "file"
        self._metrics.connections_opened_total.labels(location=kind).inc()
        self._logger.info("connection_opened", cache_size=statement_cache_size)

    @property
    def location(self) -> Location:
        """Where this connection's database lives."""
        return self._location

    def __repr__(self) -> str:
        return f"InProcConnection({self._location})"

    # --- Public API -----------------------------------------------------------------

    async def query(self, sql: str, parameters: Sequence[Value] = ()) -> QueryResult:
        """Execute one statement and return every row.

        Args:
            sql: A single SQL statement with ``?`` placeholders.
            parameters: One value per placeholder, in order.

        Returns:
            Column names and fully buffered rows.

        Raises:
            IoError: On any engine failure, value conversion failure, or if
                the worker thread fails to run.
            TypeError: If a parameter is not a ``Value``. Nothing is executed.
        """
        params = list(parameters)
        for param in params:
            if not isinstance(param, VALUE_TYPES):
                raise TypeError(f"Not a Value: {param!r}")
        start = time.perf_counter()
        with statement_span("query", sql, str(self._location)) as span:
            try:
                result = await self._offload("query", self._run_query, sql, params)
            except IoError as e:
                self._record("query", "error", start)
                self._logger.warning("query_failed", sql=sql, error=e.message)
                raise
            span.set_attribute("db.rows_returned", len(result.rows))

        self._record("query", "success", start)
        self._metrics.rows_returned_total.inc(len(result.rows))
        self._logger.debug(
            "query_executed",
            sql=sql,
            columns=len(result.columns),
            rows=len(result.rows),
        )
        return result

    async def execute_batch(self, statements: str) -> None:
        """Execute one or more semicolon-separated statements.

        Statements run one at a time in order; rows they produce are
        discarded. No transaction is opened or committed on the caller's
        behalf. A failure stops the batch: earlier statements stay applied,
        and a transaction left open stays open for the caller to end.

        Raises:
            BatchExecutionError: With ``stage`` "statement execution" for
                engine failures, "offload dispatch" if the worker fails.
        """
        start = time.perf_counter()
        with statement_span("execute_batch", statements, str(self._location)):
            try:
                await self._offload("execute_batch", self._run_batch, statements)
            except BatchExecutionError as e:
                self._record("execute_batch", "error", start)
                self._logger.warning("batch_failed", stage=e.stage, error=e.message)
                raise
            except IoError as e:
                self._record("execute_batch", "error", start)
                self._logger.warning(
                    "batch_failed", stage=BatchExecutionError.OFFLOAD_DISPATCH, error=e.message
                )
                raise BatchExecutionError(
                    f"failed to spawn blocking task: {e.message}",
                    stage=BatchExecutionError.OFFLOAD_DISPATCH,
                ) from e

        self._record("execute_batch", "success", start)
        self._logger.debug("batch_executed")

    async def changes(self) -> int:
        """Rows modified by the most recent INSERT, UPDATE or DELETE.

        Raises:
            IoError: On engine or offload failure.
        """
        return await self._offload("changes", self._run_scalar, "SELECT changes()")

    async def last_insert_rowid(self) -> int:
        """Rowid of the most recent successful INSERT, or 0 if none.

        Raises:
            IoError: On engine or offload failure.
        """
        return await self._offload(
            "last_insert_rowid", self._run_scalar, "SELECT last_insert_rowid()"
        )

    # --- Internal -------------------------------------------------------------------

    async def _offload(self, operation: str, func: Callable[..., T], *args: Any) -> T:
        """Run ``func`` on a worker thread and wait for it.

        Errors raised by ``func`` as ``SqliteError`` pass through unchanged.
        Anything else means the worker itself failed and becomes an ``IoError``.
        """
        try:
            return await asyncio.to_thread(func, *args)
        except SqliteError:
            raise
        except Exception as e:
            self._metrics.offload_failures_total.labels(operation=operation).inc()
            self._logger.error("offload_failed", operation=operation, error=str(e))
            raise IoError(f"blocking task failed: {e}") from e

    @contextmanager
    def _locked(self) -> Iterator[sqlite3.Connection]:
        """Hold the exclusive lock; runs on the worker thread only."""
        self._metrics.calls_in_flight.inc()
        try:
            waited = time.perf_counter()
            with self._lock:
                self._metrics.lock_wait_seconds.observe(time.perf_counter() - waited)
                yield self._handle
        finally:
            self._metrics.calls_in_flight.dec()

    def _run_query(self, sql: str, params: list[Value]) -> QueryResult:
        with self._locked() as handle:
            try:
                return make_query(handle, sql, params)
            except ENGINE_ERRORS + (ConversionError,) as e:
                raise IoError(str(e)) from e

    def _run_batch(self, statements: str) -> None:
        with self._locked() as handle:
            try:
                run_script(handle, statements)
            except ENGINE_ERRORS as e:
                raise BatchExecutionError(
                    f"failed to execute batch statements: {e}",
                    stage=BatchExecutionError.STATEMENT_EXECUTION,
                ) from e

    def _run_scalar(self, sql: str) -> int:
        with self._locked() as handle:
            try:
                return handle.execute(sql).fetchone()[0]
            except ENGINE_ERRORS as e:
                raise IoError(str(e)) from e

    def _record(self, operation: str, status: str, start: float) -> None:
        self._metrics.queries_total.labels(operation=operation, status=status).inc()
        self._metrics.query_latency_seconds.labels(operation=operation).observe(
            time.perf_counter() - start
        )


def open_connection(
    location: Location | None = None,
    config: DatabaseConfig | None = None,
    metrics: MetricsRegistry | None = None,
) -> InProcConnection:
    """Open a connection from configuration.

    Args:
        location: Overrides the configured location when given.
        config: Database settings (default: ``get_config().database``).
        metrics: Metrics registry (default: the global one).

    Raises:
        IoError: If the database cannot be opened or created.
    """
    config = config or get_config().database
    if location is None:
        location = config.location()
    return InProcConnection(
        location,
        statement_cache_size=config.statement_cache_size,
        busy_timeout_seconds=config.busy_timeout_seconds,
        metrics=metrics,
    )
