"""Configuration for the hash table.

Defines the tunable behaviour of a table instance.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProbeMode(str, Enum):
    """How far search and delete follow the linear probe sequence.

    HOME_ONLY: search/delete look at the home slot only, and insert does not
        compare keys past the home slot. Entries displaced by a collision
        cannot be found again, and a key can be stored twice.
    FULL: every operation walks the probe sequence, inserts deduplicate,
        and deletes backward-shift the following cluster.
    """

    HOME_ONLY = "home_only"
    FULL = "full"


@dataclass
class TableConfig:
    """Configuration parameters for a hash table.

    Attributes:
        capacity: Number of slots; must be a positive power of two. A table
            keeps its config in step with its current slot count.
        probe_mode: Probe behaviour of search/insert/delete
        expand_when_full: Expand instead of failing when inserting into a full table
        rehash_on_expand: Reinstall entries at their new home index on expansion
            (ProbeMode.FULL always does)
        round_up_capacity: Round a non-power-of-two capacity up instead of rejecting it
    """

    capacity: int
    probe_mode: ProbeMode = ProbeMode.HOME_ONLY
    expand_when_full: bool = False
    rehash_on_expand: bool = False  # without it, home-only expansion breaks lookups
    round_up_capacity: bool = False
