"""Database handle factory.

Opens a raw ``sqlite3.Connection`` configured for use behind the connection
bridge:

- ``check_same_thread=False``: every call runs on whichever worker thread the
  event loop hands it to; the bridge's lock provides the exclusion sqlite3's
  thread check would otherwise enforce.
- ``isolation_level=None``: autocommit. Transactions exist only when the
  caller issues BEGIN/COMMIT itself (typically inside a batch).
- ``text_factory=decode_text``: strict UTF-8 for TEXT columns.
"""

from __future__ import annotations

import sqlite3

from sqlite_inproc.adapters.outbound.value_codec import decode_text
from sqlite_inproc.domain.value_objects import InMemory, Location, MEMORY_LOCATION, Path
from sqlite_inproc.ports.inbound import IoError


def open_handle(
    location: Location,
    *,
    cached_statements: int = 16,
    timeout: float = 5.0,
) -> sqlite3.Connection:
    """Open a new engine handle at ``location``.

    Args:
        location: In-memory or a filesystem path (created if missing).
        cached_statements: Size of the per-connection prepared statement cache.
        timeout: Seconds to wait when the database file is locked by another
            process.

    Returns:
        A configured sqlite3 connection.

    Raises:
        IoError: If the database cannot be opened or created.
    """
    if isinstance(location, InMemory):
        target = MEMORY_LOCATION
    elif isinstance(location, Path):
        if location.path.is_dir():
            raise IoError(f"unable to open database at {location.path}: path is a directory")
        target = str(location.path)
    else:
        raise TypeError(f"Not a Location: {location!r}")

    try:
        conn = sqlite3.connect(
            target,
            timeout=timeout,
            isolation_level=None,
            check_same_thread=False,
            cached_statements=cached_statements,
        )
    except (sqlite3.Error, OSError) as e:
        raise IoError(f"unable to open database at {target}: {e}") from e

    conn.text_factory = decode_text
    return conn
