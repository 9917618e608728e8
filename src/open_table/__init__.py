"""open_table - a minimal open-addressing hash table in Python."""

from .api import create_table, delete, destroy_table, expand_table, insert, search
from .components.entry import Entry
from .components.hashing import fnv1a_64, home_index
from .components.stats import TableStats, collect_stats
from .core.config import ProbeMode, TableConfig
from .core.errors import (
    AllocationError,
    CapacityExhaustedError,
    HashTableError,
    InvalidCapacityError,
    InvalidKeyError,
    TableDestroyedError,
)
from .core.table import Table
from .core.types import Key, Value

__all__ = [
    "Table",
    "TableConfig",
    "ProbeMode",
    "Entry",
    "TableStats",
    "collect_stats",
    "fnv1a_64",
    "home_index",
    "create_table",
    "destroy_table",
    "insert",
    "delete",
    "search",
    "expand_table",
    "HashTableError",
    "AllocationError",
    "CapacityExhaustedError",
    "InvalidCapacityError",
    "InvalidKeyError",
    "TableDestroyedError",
    "Key",
    "Value",
]
