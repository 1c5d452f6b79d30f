"""Outbound adapters - the sqlite3 driver side of the bridge.

Exports:
    - open_handle: Open a configured sqlite3 connection
    - make_query: Execute one statement and buffer its rows
    - run_script: Execute a batch one statement at a time
    - to_native, from_native, decode_text: Value codec
"""

from sqlite_inproc.adapters.outbound.row_materializer import make_query
from sqlite_inproc.adapters.outbound.script_runner import run_script, split_statements
from sqlite_inproc.adapters.outbound.sqlite_handle import open_handle
from sqlite_inproc.adapters.outbound.value_codec import (
    decode_text,
    from_native,
    to_native,
    to_native_params,
)

__all__ = [
    "open_handle",
    "make_query",
    "run_script",
    "split_statements",
    "to_native",
    "to_native_params",
    "from_native",
    "decode_text",
]
