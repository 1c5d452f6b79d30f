"""Script runner - execute a semicolon-separated batch one statement at a time.

``sqlite3.Cursor.executescript`` commits any open transaction before it
starts, so a caller's ``BEGIN`` issued in an earlier batch would be silently
committed. Running each statement through ``execute`` leaves transaction
control entirely to the SQL text.

Statement boundaries are found with ``sqlite3.complete_statement``, which
understands string literals, comments and trigger bodies, so a ``;`` inside
any of those does not split the statement.
"""

from __future__ import annotations

import sqlite3
from contextlib import closing
from typing import Iterator


def split_statements(script: str) -> Iterator[str]:
    """Yield each complete statement of ``script``, in order.

    Empty statements (a bare ``;``) are skipped. Trailing text without a
    terminating semicolon is yielded as the last statement.
    """
    pieces = script.split(";")
    buffer = ""
    for i, piece in enumerate(pieces):
        buffer += piece
        if i < len(pieces) - 1:
            buffer += ";"
            if not sqlite3.complete_statement(buffer):
                continue
        if buffer.replace(";", "").strip():
            yield buffer
        buffer = ""


def run_script(connection: sqlite3.Connection, script: str) -> None:
    """Execute every statement of ``script``; produced rows are discarded.

    The caller must hold the connection's lock. Execution stops at the first
    failing statement; statements before it stay applied, and any
    transaction the script opened stays open.

    Raises:
        sqlite3.Error: On the first engine failure.
    """
    with closing(connection.cursor()) as cursor:
        for statement in split_statements(script):
            cursor.execute(statement)
