"""Protocol definition for key hash functions."""

from __future__ import annotations

from typing import Protocol


class Hasher(Protocol):
    """Maps the encoded key bytes to an unsigned 64-bit hash."""

    def __call__(self, data: bytes) -> int:
        ...
