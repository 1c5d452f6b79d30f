"""Value codec between portable values and sqlite3 native values.

Caller -> engine (parameter binding):
    Null -> None, Integer -> int, Real -> float, Text -> str, Blob -> bytes.
    Total; never fails.

Engine -> caller (result extraction):
    None -> Null, int -> Integer, float -> Real, str -> Text, bytes -> Blob.
    Text arrives through ``decode_text``, installed as the connection's
    ``text_factory``, so invalid UTF-8 fails the read instead of being
    replaced or truncated.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator

from sqlite_inproc.domain.value_objects import Blob, Integer, Null, Real, Text, Value
from sqlite_inproc.ports.inbound import ConversionError


NativeValue = None | int | float | str | bytes


def to_native(value: Value) -> NativeValue:
    """Convert a portable value to the native value bound as a parameter."""
    if isinstance(value, Null):
        return None
    if isinstance(value, (Integer, Real, Text, Blob)):
        return value.value
    raise TypeError(f"Not a Value: {value!r}")


def to_native_params(values: Iterable[Value]) -> list[NativeValue]:
    """Convert positional parameters, preserving order."""
    return [to_native(v) for v in values]


def from_native(obj: Any) -> Value:
    """Convert one native column value to a portable value.

    Raises:
        ConversionError: If the engine handed back a type outside the five
            storage classes.
    """
    if obj is None:
        return Null()
    # bool never comes from sqlite3, but it is an int subclass
    if isinstance(obj, int) and not isinstance(obj, bool):
        return Integer(obj)
    if isinstance(obj, float):
        return Real(obj)
    if isinstance(obj, str):
        return Text(obj)
    if isinstance(obj, (bytes, bytearray, memoryview)):
        # Copy so the buffered row owns its bytes
        return Blob(bytes(obj))
    raise ConversionError(f"Unsupported native value type: {type(obj).__name__}")


def from_native_row(row: Iterable[Any]) -> Iterator[Value]:
    """Convert every column of one native row, in column order."""
    for obj in row:
        yield from_native(obj)


def decode_text(raw: bytes) -> str:
    """Decode a TEXT column strictly as UTF-8.

    Raises:
        ConversionError: If ``raw`` is not valid UTF-8.
    """
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ConversionError(
            f"Invalid UTF-8 in text column at byte {e.start}: {raw[e.start:e.end]!r}"
        ) from e
