"""Row materializer - turn one statement execution into a QueryResult.

Everything here runs on a worker thread with the connection lock held. The
result is fully buffered before returning so that no cursor or native row
escapes the locked region.

Algorithm:
    1. Execute through sqlite3's per-connection statement cache, keyed by
       the SQL text.
    2. Capture column names from the cursor description, declaration order.
    3. Bind parameters positionally through the value codec.
    4. Fetch every row; each row must be exactly as wide as the column list.
    5. Any failure aborts the whole query. No partial result is returned.
"""

from __future__ import annotations

import sqlite3
from contextlib import closing
from typing import Sequence

from sqlite_inproc.adapters.outbound.value_codec import from_native_row, to_native_params
from sqlite_inproc.domain.entities import QueryResult, RowResult
from sqlite_inproc.domain.value_objects import Value
from sqlite_inproc.ports.inbound import ConversionError


def column_names(cursor: sqlite3.Cursor) -> list[str]:
    """Column names of the last executed statement.

    Statements without result columns (DDL, plain INSERT) have no
    description and yield an empty list.
    """
    if cursor.description is None:
        return []
    return [desc[0] for desc in cursor.description]


def materialize_row(native_row: Sequence[object], width: int) -> RowResult:
    """Convert one native row, checking it against the column count.

    Raises:
        ConversionError: If a value cannot be converted or the row width
            disagrees with the column metadata.
    """
    if len(native_row) != width:
        raise ConversionError(
            f"Row has {len(native_row)} values but statement reports {width} columns"
        )
    return RowResult(values=list(from_native_row(native_row)))


def make_query(
    connection: sqlite3.Connection,
    sql: str,
    parameters: Sequence[Value],
) -> QueryResult:
    """Execute ``sql`` with positional ``parameters`` and buffer every row.

    The caller must hold the connection's lock.

    Args:
        connection: An open handle from ``open_handle``.
        sql: One SQL statement.
        parameters: One value per ``?`` placeholder.

    Returns:
        The fully materialized result.

    Raises:
        sqlite3.Error: On any engine failure, including a parameter count
            mismatch.
        ConversionError: If a column value cannot be converted.
    """
    with closing(connection.cursor()) as cursor:
        cursor.execute(sql, to_native_params(parameters))
        columns = column_names(cursor)
        width = len(columns)
        rows = [materialize_row(native, width) for native in cursor.fetchall()]
    return QueryResult(columns=columns, rows=rows)
