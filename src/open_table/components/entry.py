"""Slot entry: an owned key and an owned copy of the value bytes."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.errors import AllocationError
from ..core.types import Key, Value, ValueLike


@dataclass(frozen=True)
class Entry:
    """Immutable key/value pair stored in a single slot.

    The value is a private bytes copy of whatever buffer the caller passed,
    so later changes to a caller's bytearray never leak into the table.
    An entry is never mutated; updates install a new Entry.
    """

    key: Key
    value: Value

    @classmethod
    def create(cls, key: Key, value: ValueLike) -> Entry:
        """Copy value into a new entry.

        Raises:
            TypeError: value is not a bytes-like object
            AllocationError: the copy could not be allocated
        """
        if not isinstance(value, (bytes, bytearray, memoryview)):
            raise TypeError(f"value must be bytes-like, not {type(value).__name__}")
        try:
            data = bytes(value)
        except MemoryError as e:
            raise AllocationError(f"Failed to allocate {len(value)} bytes for {key!r}") from e
        return cls(key, data)
