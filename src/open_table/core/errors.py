"""Exception hierarchy for the hash table.

Every error the table reports derives from HashTableError; a missing key
is never an error.
"""

from __future__ import annotations


class HashTableError(Exception):
    """Base exception for all hash table errors."""
    pass


class AllocationError(HashTableError):
    """Raised when memory for the slot array or an entry cannot be obtained."""
    pass


class CapacityExhaustedError(HashTableError):
    """Raised when inserting into a table whose slots are all occupied."""
    pass


class InvalidCapacityError(HashTableError, ValueError):
    """Raised when a capacity is not a positive power of two."""
    pass


class InvalidKeyError(HashTableError, ValueError):
    """Raised when a key cannot be stored (it contains a NUL character)."""
    pass


class TableDestroyedError(HashTableError):
    """Raised when a table is used after destroy()."""
    pass
