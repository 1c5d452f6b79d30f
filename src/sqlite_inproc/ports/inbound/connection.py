"""Connection port for asynchronous SQL execution.

This inbound port defines the contract offered to async callers: run one
statement with positional parameters and get a fully buffered result back,
or run a script of statements for their side effects.

Key responsibilities:
- Never block the caller's event loop during an engine call
- Serialize all calls against the same underlying handle
- Report every failure through the error types below

Engine failures are deliberately collapsed into ``IoError``; callers that need
to tell a syntax error from a constraint violation must inspect the message.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Protocol, Sequence

from sqlite_inproc.domain.entities import QueryResult
from sqlite_inproc.domain.value_objects import Value


class Connection(Protocol):
    """Protocol for an async connection to an embedded database.

    Thread Safety:
        Implementations must be safe to share between any number of
        concurrent tasks. Calls on one connection run one at a time.
    """

    @abstractmethod
    async def query(self, sql: str, parameters: Sequence[Value]) -> QueryResult:
        """Execute one statement and return its rows.

        Args:
            sql: A single SQL statement with ``?`` placeholders.
            parameters: One value per placeholder, in order.

        Returns:
            Column names and every row, fully materialized.

        Raises:
            IoError: On any engine, conversion or offload failure.
        """
        ...

    @abstractmethod
    async def execute_batch(self, statements: str) -> None:
        """Execute one or more semicolon-separated statements.

        Args:
            statements: The SQL script. Rows produced are discarded.

        Raises:
            BatchExecutionError: If a statement or the offload fails.
        """
        ...

    @abstractmethod
    async def changes(self) -> int:
        """Return rows modified by the most recent INSERT, UPDATE or DELETE."""
        ...

    @abstractmethod
    async def last_insert_rowid(self) -> int:
        """Return the rowid of the most recent successful INSERT, or 0."""
        ...


class SqliteError(Exception):
    """Base class for every error raised through the connection port."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class IoError(SqliteError):
    """I/O-class failure carrying a human-readable description.

    Raised when the handle cannot be opened, when the blocking offload itself
    fails, and for every engine-reported failure.
    """

    pass


class BatchExecutionError(SqliteError):
    """Batch execution failed.

    Attributes:
        stage: Which step failed - ``"statement execution"`` or
            ``"offload dispatch"``. Diagnostic only.
    """

    STATEMENT_EXECUTION = "statement execution"
    OFFLOAD_DISPATCH = "offload dispatch"

    def __init__(self, message: str, stage: str) -> None:
        super().__init__(message)
        self.stage = stage


class ConversionError(Exception):
    """A native engine value could not be converted to a ``Value``.

    Raised inside the blocking worker; callers see it as the ``__cause__``
    of an ``IoError``.
    """

    pass
