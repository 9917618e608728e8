"""Linear probing over a power-of-two slot array."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator

    from ..core.types import Index


def probe_sequence(home: Index, capacity: int) -> Iterator[Index]:
    """Yield every slot index once, starting at home and wrapping to 0.

    The sequence is finite (capacity steps) and a fresh generator is
    created per operation, so callers decide how many steps to consume.
    """
    mask = capacity - 1
    for step in range(capacity):
        yield (home + step) & mask


def probe_distance(home: Index, index: Index, capacity: int) -> int:
    """Number of probe steps from home to index, accounting for wraparound."""
    return (index - home) & (capacity - 1)
