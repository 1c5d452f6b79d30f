"""Portable column values and database locations.

``Value`` is the only type that crosses the connection boundary in either
direction. The engine's native representation never leaks to callers; the
codec in ``sqlite_inproc.adapters.outbound.value_codec`` converts at the edge.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path as FsPath
from typing import Union


INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

MEMORY_LOCATION = ":memory:"


@dataclass(frozen=True, slots=True)
class Null:
    """SQL NULL."""

    def __repr__(self) -> str:
        return "Null()"


@dataclass(frozen=True, slots=True)
class Integer:
    """A 64-bit signed integer.

    Example:
        >>> Integer(42)
        Integer(42)
    """

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; reject it so True does not silently become 1
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"Integer requires int, got {type(self.value).__name__}")
        if not INT64_MIN <= self.value <= INT64_MAX:
            raise ValueError(f"Integer out of 64-bit range: {self.value}")

    def __repr__(self) -> str:
        return f"Integer({self.value})"


@dataclass(frozen=True, slots=True)
class Real:
    """A 64-bit IEEE float."""

    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, int) and not isinstance(self.value, bool):
            object.__setattr__(self, "value", float(self.value))
        elif not isinstance(self.value, float):
            raise TypeError(f"Real requires float, got {type(self.value).__name__}")

    def __repr__(self) -> str:
        return f"Real({self.value!r})"


@dataclass(frozen=True, slots=True)
class Text:
    """A UTF-8 string."""

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(f"Text requires str, got {type(self.value).__name__}")

    def __repr__(self) -> str:
        return f"Text({self.value!r})"


@dataclass(frozen=True, slots=True)
class Blob:
    """An opaque byte sequence.

    Bytes-like input (bytearray, memoryview) is copied into immutable bytes so
    the value never aliases a caller-owned or engine-owned buffer.
    """

    value: bytes

    def __post_init__(self) -> None:
        if isinstance(self.value, (bytearray, memoryview)):
            object.__setattr__(self, "value", bytes(self.value))
        elif not isinstance(self.value, bytes):
            raise TypeError(f"Blob requires bytes, got {type(self.value).__name__}")

    def __repr__(self) -> str:
        return f"Blob({self.value!r})"


Value = Union[Null, Integer, Real, Text, Blob]
"""A single column value: Null, Integer, Real, Text or Blob."""

VALUE_TYPES: tuple[type, ...] = (Null, Integer, Real, Text, Blob)


@dataclass(frozen=True, slots=True)
class InMemory:
    """A private in-memory database, destroyed with the handle."""

    def __str__(self) -> str:
        return MEMORY_LOCATION


@dataclass(frozen=True, slots=True)
class Path:
    """A database persisted in a file on disk."""

    path: FsPath

    def __post_init__(self) -> None:
        if not isinstance(self.path, FsPath):
            object.__setattr__(self, "path", FsPath(os.fspath(self.path)))

    def __str__(self) -> str:
        return str(self.path)


Location = Union[InMemory, Path]
"""Where a connection's database lives. Chosen once, immutable thereafter."""


def location_from_string(raw: str | os.PathLike[str]) -> Location:
    """Parse a location; ``":memory:"`` is in-memory, anything else a path.

    Example:
        >>> location_from_string(":memory:")
        InMemory()
        >>> location_from_string("/tmp/app.db")
        Path(path=PosixPath('/tmp/app.db'))
    """
    if isinstance(raw, str) and raw == MEMORY_LOCATION:
        return InMemory()
    return Path(FsPath(os.fspath(raw)))
