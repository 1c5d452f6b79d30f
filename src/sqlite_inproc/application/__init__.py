"""Application layer for the in-process SQLite bridge.

Exports:
    - InProcConnection: Async connection bridge over one sqlite3 handle
    - open_connection: Build a connection from configuration
"""

from sqlite_inproc.application.inproc_connection import InProcConnection, open_connection

__all__ = [
    "InProcConnection",
    "open_connection",
]
