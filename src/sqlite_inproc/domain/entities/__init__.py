"""Domain entities for the in-process SQLite bridge.

Exports:
    Results:
        - RowResult: One row of values, in column order
        - QueryResult: Column names plus fully buffered rows
"""

from sqlite_inproc.domain.entities.query_result import QueryResult, RowResult

__all__ = [
    "RowResult",
    "QueryResult",
]
