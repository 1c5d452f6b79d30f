"""Inbound ports - APIs offered to async callers.

Exports:
    - Connection: Async query / execute-batch contract
    - SqliteError: Base error
    - IoError: Uniform I/O-class error
    - BatchExecutionError: Batch failure with stage context
    - ConversionError: Native value could not be converted
"""

from sqlite_inproc.ports.inbound.connection import (
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
