"""Slot diagnostics for a hash table.

Summarises how entries are laid out: how many sit outside their home slot,
which keys a home-only lookup can no longer reach, and how long the probe
clusters have grown.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from sortedcontainers import SortedDict

from .hashing import home_index
from .probing import probe_distance

if TYPE_CHECKING:
    from ..core.table import Table


@dataclass
class TableStats:
    """Read-only snapshot of a table's slot layout.

    Attributes:
        capacity: Number of slots
        length: Number of occupied slots
        load_factor: length / capacity
        displaced: Entries not stored in their home slot
        unreachable: Keys a home-only search cannot find
        duplicates: Keys stored in more than one slot
        longest_cluster: Longest run of consecutive occupied slots (wrapping)
        displacement: Probe distance -> number of entries, in distance order
    """

    capacity: int
    length: int
    load_factor: float
    displaced: int = 0
    unreachable: list[str] = field(default_factory=list)
    duplicates: list[str] = field(default_factory=list)
    longest_cluster: int = 0
    displacement: SortedDict = field(default_factory=SortedDict)

    def as_row(self) -> dict[str, object]:
        """Flatten to a dict suitable for csv.DictWriter."""
        return {
            "capacity": self.capacity,
            "length": self.length,
            "load_factor": round(self.load_factor, 4),
            "displaced": self.displaced,
            "unreachable": len(self.unreachable),
            "duplicates": len(self.duplicates),
            "longest_cluster": self.longest_cluster,
            "max_displacement": self.displacement.keys()[-1] if self.displacement else 0,
        }


def _longest_cluster(occupied: list[bool]) -> int:
    if all(occupied):
        return len(occupied)
    # Start scanning just after an empty slot so a run that wraps is counted once
    start = occupied.index(False) + 1
    longest = run = 0
    for offset in range(len(occupied)):
        if occupied[(start + offset) % len(occupied)]:
            run += 1
            longest = max(longest, run)
        else:
            run = 0
    return longest


def collect_stats(table: Table) -> TableStats:
    """Walk every slot of table and summarise its layout."""
    slots = table.slots()
    capacity = len(slots)
    stats = TableStats(
        capacity=capacity,
        length=len(table),
        load_factor=table.load_factor,
    )

    seen: Counter[str] = Counter()
    unreachable: set[str] = set()
    for index, entry in enumerate(slots):
        if entry is None:
            continue
        seen[entry.key] += 1
        home = home_index(table.hash_key(entry.key), capacity)
        distance = probe_distance(home, index, capacity)
        stats.displacement[distance] = stats.displacement.get(distance, 0) + 1
        if distance:
            stats.displaced += 1
        home_entry = slots[home]
        if home_entry is None or home_entry.key != entry.key:
            unreachable.add(entry.key)

    stats.unreachable = sorted(unreachable)
    stats.duplicates = sorted(key for key, count in seen.items() if count > 1)
    stats.longest_cluster = _longest_cluster([entry is not None for entry in slots])
    return stats
