"""Adapters layer - concrete implementations backed by sqlite3."""

from sqlite_inproc.adapters.outbound import make_query, open_handle

__all__ = [
    "open_handle",
    "make_query",
]
