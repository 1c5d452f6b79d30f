"""
sqlite_inproc - In-process SQLite for asyncio

Runs SQL against an embedded SQLite database (in memory or in a file) from
async code: blocking driver calls are offloaded to worker threads and
serialized per connection, and values cross the boundary only as the
portable Null / Integer / Real / Text / Blob types.
"""

__version__ = "0.1.0"
__author__ = "Systems Engineering Portfolio"

from sqlite_inproc.application import InProcConnection, open_connection
from sqlite_inproc.domain.entities import QueryResult, RowResult
from sqlite_inproc.domain.value_objects import (
    Blob,
    InMemory,
    Integer,
    Location,
    Null,
    Path,
    Real,
    Text,
    Value,
    location_from_string,
)
from sqlite_inproc.ports.inbound import (
    BatchExecutionError,
    Connection,
    ConversionError,
    IoError,
    SqliteError,
)

__all__ = [
    "__version__",
    # Connection
    "Connection",
    "InProcConnection",
    "open_connection",
    # Values
    "Value",
    "Null",
    "Integer",
    "Real",
    "Text",
    "Blob",
    # Locations
    "Location",
    "InMemory",
    "Path",
    "location_from_string",
    # Results
    "QueryResult",
    "RowResult",
    # Errors
    "SqliteError",
    "IoError",
    "BatchExecutionError",
    "ConversionError",
]
