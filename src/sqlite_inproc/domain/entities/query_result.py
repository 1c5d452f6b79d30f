"""Fully materialized query results.

A ``QueryResult`` is a snapshot: it owns every value it holds and keeps no
reference to engine cursors or rows, so it can safely outlive the lock under
which it was built.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator

from sqlite_inproc.domain.value_objects import Value


@dataclass(slots=True)
class RowResult:
    """One row of a result set, values in column order."""

    values: list[Value] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.values)

    def __getitem__(self, index: int) -> Value:
        return self.values[index]


@dataclass(slots=True)
class QueryResult:
    """Column names plus rows.

    Invariant: every row has exactly ``len(columns)`` values.

    Example:
        >>> result = QueryResult(columns=["x"], rows=[RowResult([Integer(42)])])
        >>> result.rows[0].values
        [Integer(42)]
    """

    columns: list[str] = field(default_factory=list)
    rows: list[RowResult] = field(default_factory=list)

    def __post_init__(self) -> None:
        width = len(self.columns)
        for index, row in enumerate(self.rows):
            if len(row.values) != width:
                raise ValueError(
                    f"Row {index} has {len(row.values)} values, expected {width}"
                )

    def __len__(self) -> int:
        return len(self.rows)

    def column_index(self, name: str) -> int:
        """Return the position of a column by name.

        Raises:
            KeyError: If no column has that name.
        """
        try:
            return self.columns.index(name)
        except ValueError as e:
            raise KeyError(f"Column '{name}' not found") from e

    def column(self, name: str) -> list[Value]:
        """Return every value of one column, top to bottom."""
        idx = self.column_index(name)
        return [row.values[idx] for row in self.rows]
