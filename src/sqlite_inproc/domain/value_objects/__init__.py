"""Value objects for the in-process SQLite bridge.

Value objects are immutable types that represent domain concepts.
They have no identity - two value objects with the same attributes are equal.

Exports:
    Values:
        - Null, Integer, Real, Text, Blob: The variants of a portable value
        - Value: Union of the five variants
        - INT64_MIN, INT64_MAX: Integer range bounds

    Locations:
        - InMemory: Private in-memory database
        - Path: File-backed database
        - Location: Union of the two
        - location_from_string: Parse ":memory:" or a filesystem path
"""

from sqlite_inproc.domain.value_objects.values import (
    INT64_MAX,
    INT64_MIN,
    MEMORY_LOCATION,
    VALUE_TYPES,
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

__all__ = [
    # Values
    "Null",
    "Integer",
    "Real",
    "Text",
    "Blob",
    "Value",
    "VALUE_TYPES",
    "INT64_MIN",
    "INT64_MAX",
    # Locations
    "InMemory",
    "Path",
    "Location",
    "MEMORY_LOCATION",
    "location_from_string",
]
