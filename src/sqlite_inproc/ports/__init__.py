"""Ports layer - interface definitions following Hexagonal Architecture.

Ports are abstract interfaces (protocols) that define contracts:
- Inbound ports: APIs offered to clients (Connection)

Adapters and the application layer implement these ports.
"""

from sqlite_inproc.ports.inbound import (
    BatchExecutionError,
    Connection,
    ConversionError,
    IoError,
    SqliteError,
)

__all__ = [
    "Connection",
    "SqliteError",
    "IoError",
    "BatchExecutionError",
    "ConversionError",
]
