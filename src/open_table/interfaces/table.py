"""Protocol definition for the hash table."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..core.types import Key, Value, ValueLike


@runtime_checkable
class HashTable(Protocol):
    """Public API of a string-to-bytes hash table."""

    def insert(self, key: Key, value: ValueLike) -> bool:
        """Insert or update key; return False if the table could not take it."""
        ...

    def put(self, key: Key, value: ValueLike) -> None:
        """Insert or update key, raising on failure."""
        ...

    def search(self, key: Key) -> Value | None:
        """Return the value stored for key, or None."""
        ...

    def delete(self, key: Key) -> None:
        """Remove key; a missing key is a no-op."""
        ...

    def expand(self) -> None:
        """Double the capacity."""
        ...

    def destroy(self) -> None:
        """Release every entry; the table is unusable afterwards."""
        ...

    def __len__(self) -> int:
        """Number of occupied slots."""
        ...
