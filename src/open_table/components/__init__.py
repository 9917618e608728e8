"""Building blocks of the hash table."""

from .entry import Entry
from .hashing import fnv1a_64, home_index
from .probing import probe_distance, probe_sequence
from .stats import TableStats, collect_stats

__all__ = [
    "Entry",
    "fnv1a_64",
    "home_index",
    "probe_sequence",
    "probe_distance",
    "TableStats",
    "collect_stats",
]
