"""Protocol definitions for the hash table."""

from .hasher import Hasher
from .table import HashTable

__all__ = ["Hasher", "HashTable"]
