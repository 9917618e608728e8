"""FNV-1a hashing and home-index computation.

FNV-1a is deterministic and unkeyed, so it offers no protection against
hash-flooding: an attacker who controls the keys can force every insert
into the same probe cluster. Do not expose a table to untrusted keys.
"""

from __future__ import annotations

from ..core.errors import InvalidCapacityError, InvalidKeyError
from ..core.types import HashValue, Index, Key

# Start with FNV_OFFSET_BASIS; for each input byte, XOR the byte into the
# hash and then multiply by FNV_PRIME (modulo 2**64).
FNV_OFFSET_BASIS = 0xCBF29CE484222325
FNV_PRIME = 0x100000001B3
MASK_64 = 0xFFFFFFFFFFFFFFFF


def encode_key(key: Key) -> bytes:
    """Return the UTF-8 bytes of key, rejecting embedded NUL characters."""
    if not isinstance(key, str):
        raise TypeError(f"key must be str, not {type(key).__name__}")
    if "\x00" in key:
        raise InvalidKeyError(f"key contains a NUL character: {key!r}")
    return key.encode("utf-8")


def fnv1a_64(key: Key | bytes) -> HashValue:
    """64-bit FNV-1a hash of key (str keys are hashed as UTF-8)."""
    data = encode_key(key) if isinstance(key, str) else bytes(key)
    h = FNV_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV_PRIME) & MASK_64
    return h


def home_index(hash_value: HashValue, capacity: int) -> Index:
    """Slot index for hash_value; capacity must be a power of two."""
    return hash_value & (capacity - 1)


def is_power_of_two(n: int) -> bool:
    return n > 0 and n & (n - 1) == 0


def validate_capacity(capacity: int, round_up: bool = False) -> int:
    """Return a usable capacity or raise InvalidCapacityError.

    With round_up, a positive capacity that is not a power of two is raised
    to the next power of two.
    """
    if isinstance(capacity, bool) or not isinstance(capacity, int):
        raise InvalidCapacityError(f"capacity must be an int, got {capacity!r}")
    if capacity <= 0:
        raise InvalidCapacityError(f"capacity must be positive, got {capacity}")
    if is_power_of_two(capacity):
        return capacity
    if round_up:
        return 1 << (capacity - 1).bit_length()
    raise InvalidCapacityError(f"capacity must be a power of two, got {capacity}")
