"""Open-addressing hash table - main public API.

Maps str keys to bytes values in a power-of-two array of slots, resolving
collisions by linear probing.

In the default ProbeMode.HOME_ONLY, search and delete look only at a key's
home slot while insert probes forward past it without comparing keys. The
table therefore has known hazards, reproduced on purpose:
    - an entry displaced by a collision cannot be found by search
    - re-inserting that key stores it a second time
    - delete removes whatever entry sits in the home slot, even under
      a different key
ProbeMode.FULL walks the whole probe sequence for every operation and
keeps all entries reachable.
"""

from __future__ import annotations

import dataclasses
import itertools
import logging
from typing import TYPE_CHECKING

from ..components.entry import Entry
from ..components.hashing import encode_key, fnv1a_64, home_index, validate_capacity
from ..components.probing import probe_distance, probe_sequence
from .config import ProbeMode, TableConfig
from .errors import (
    AllocationError,
    CapacityExhaustedError,
    TableDestroyedError,
)

if TYPE_CHECKING:
    from ..interfaces.hasher import Hasher
    from .types import HashValue, Index, Key, Value, ValueLike

logger = logging.getLogger(__name__)


def _allocate_slots(capacity: int) -> list[Entry | None]:
    return [None] * capacity


class Table:
    """Open-addressing hash table with linear probing.

    Args:
        config: Table configuration (capacity and probe behaviour)
        hasher: Hash function over the UTF-8 key bytes; defaults to FNV-1a

    Public API:
        - insert(key, value): Insert or update, returning False on failure
        - put(key, value): Insert or update, raising on failure
        - search(key): Value bytes or None
        - delete(key): Remove an entry
        - expand(): Double the capacity
        - destroy(): Release every entry; the table is unusable afterwards

    Invariants:
        - 0 <= len(table) <= capacity, and len(table) counts occupied slots
        - capacity is a power of two
        - in ProbeMode.FULL every entry is reachable from its home slot
    """

    def __init__(self, config: TableConfig, hasher: Hasher | None = None):
        self._hasher = hasher or fnv1a_64
        capacity = validate_capacity(config.capacity, round_up=config.round_up_capacity)
        # config.capacity always reports the effective slot count
        self.config = dataclasses.replace(config, capacity=capacity)
        self._slots = self._allocate(capacity)
        self._length = 0
        self._destroyed = False

        logger.debug(f"Created table with {capacity} slots ({config.probe_mode.value})")

    def __repr__(self) -> str:
        return (
            f"Table(capacity={self.capacity}, length={self._length}, "
            f"probe_mode={self.config.probe_mode.value})"
        )

    def __len__(self) -> int:
        return self._length

    def __contains__(self, key: Key) -> bool:
        return self.search(key) is not None

    def __enter__(self) -> Table:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if not self._destroyed:
            self.destroy()

    @property
    def capacity(self) -> int:
        return len(self._slots)

    @property
    def load_factor(self) -> float:
        return self._length / self.capacity if self.capacity else 0.0

    @property
    def destroyed(self) -> bool:
        return self._destroyed

    def slots(self) -> tuple[Entry | None, ...]:
        """Snapshot of the slot array, in index order."""
        self._check_alive()
        return tuple(self._slots)

    def hash_key(self, key: Key) -> HashValue:
        """Hash key with this table's hash function."""
        return self._hasher(encode_key(key))

    def put(self, key: Key, value: ValueLike) -> None:
        """Insert or update key.

        Raises:
            CapacityExhaustedError: table is full and expansion is disabled
            AllocationError: the entry or an expanded slot array could not be allocated
            InvalidKeyError: key contains a NUL character
        """
        self._check_alive()
        hash_value = self.hash_key(key)
        entry = Entry.create(key, value)
        home_only = self.config.probe_mode is ProbeMode.HOME_ONLY

        # A full table rejects even an update of a key already at its home slot
        if home_only:
            self._ensure_room()

        index = self._locate(hash_value, key)
        if index is not None:
            self._slots[index] = entry
            return

        if not home_only:
            self._ensure_room()

        home = home_index(hash_value, self.capacity)
        index = self._first_empty(home)
        self._slots[index] = entry
        self._length += 1
        if index != home:
            logger.debug(f"Key {key!r} displaced from slot {home} to {index}")

    def insert(self, key: Key, value: ValueLike) -> bool:
        """Insert or update key; return False if the table could not take it."""
        try:
            self.put(key, value)
        except (CapacityExhaustedError, AllocationError) as e:
            logger.warning(f"Insertion of {key!r} failed: {e}")
            return False
        return True

    def search(self, key: Key) -> Value | None:
        """Return the value stored for key, or None."""
        self._check_alive()
        index = self._locate(self.hash_key(key), key)
        if index is None:
            return None
        return self._slots[index].value

    def delete(self, key: Key) -> None:
        """Remove key from the table; a missing key is a no-op.

        In ProbeMode.HOME_ONLY the entry in the key's home slot is removed
        whatever its key is.
        """
        self._check_alive()
        hash_value = self.hash_key(key)

        if self.config.probe_mode is ProbeMode.HOME_ONLY:
            home = home_index(hash_value, self.capacity)
            if self._slots[home] is None:
                return
            self._slots[home] = None
            self._length -= 1
            return

        index = self._locate(hash_value, key)
        if index is None:
            return
        self._slots[index] = None
        self._length -= 1
        self._backward_shift(index)

    def expand(self) -> None:
        """Double the capacity.

        In ProbeMode.HOME_ONLY without config.rehash_on_expand, entries keep
        their slot positions, so keys whose home index changes under the wider
        mask are no longer found by search. ProbeMode.FULL always rehashes.

        Raises:
            AllocationError: the new slot array could not be allocated
        """
        self._check_alive()
        old_capacity = self.capacity
        new_slots = self._allocate(old_capacity * 2)

        rehash = self.config.rehash_on_expand or self.config.probe_mode is ProbeMode.FULL
        if rehash:
            # self._slots is replaced only once the new array is fully populated
            for entry in self._slots:
                if entry is None:
                    continue
                home = home_index(self.hash_key(entry.key), len(new_slots))
                new_slots[self._first_empty(home, new_slots)] = entry
        else:
            new_slots[:old_capacity] = self._slots
        self._slots = new_slots
        self.config = dataclasses.replace(self.config, capacity=self.capacity)

        logger.info(
            f"Expanded table from {old_capacity} to {self.capacity} slots "
            f"({'rehashed' if rehash else 'not rehashed'})"
        )

    def destroy(self) -> None:
        """Release every entry and the slot array.

        Raises:
            TableDestroyedError: the table was already destroyed
        """
        self._check_alive()
        released = self._length
        for index in range(len(self._slots)):
            self._slots[index] = None
        self._slots = []
        self._length = 0
        self._destroyed = True

        logger.debug(f"Destroyed table, released {released} entries")

    def _check_alive(self) -> None:
        if self._destroyed:
            raise TableDestroyedError("Table has been destroyed")

    @staticmethod
    def _allocate(capacity: int) -> list[Entry | None]:
        try:
            return _allocate_slots(capacity)
        except MemoryError as e:
            raise AllocationError(f"Failed to allocate {capacity} slots") from e

    def _ensure_room(self) -> None:
        if self._length < self.capacity:
            return
        if not self.config.expand_when_full:
            raise CapacityExhaustedError(
                f"Insertion failed: hash table is full ({self.capacity} slots)"
            )
        self.expand()

    def _locate(self, hash_value: HashValue, key: Key) -> Index | None:
        """Slot holding key, or None.

        HOME_ONLY consumes one step of the probe sequence; FULL consumes it
        until the key or an empty slot turns up.
        """
        home = home_index(hash_value, self.capacity)
        steps = 1 if self.config.probe_mode is ProbeMode.HOME_ONLY else self.capacity
        for index in itertools.islice(probe_sequence(home, self.capacity), steps):
            entry = self._slots[index]
            if entry is None:
                return None
            if entry.key == key:
                return index
        return None

    def _first_empty(self, home: Index, slots: list[Entry | None] | None = None) -> Index:
        if slots is None:
            slots = self._slots
        for index in probe_sequence(home, len(slots)):
            if slots[index] is None:
                return index
        raise CapacityExhaustedError(f"No empty slot in {len(slots)} slots")

    def _backward_shift(self, hole: Index) -> None:
        """Pull later cluster members back into hole so none is orphaned."""
        capacity = self.capacity
        for index in itertools.islice(probe_sequence(hole, capacity), 1, None):
            entry = self._slots[index]
            if entry is None:
                return
            home = home_index(self.hash_key(entry.key), capacity)
            # The entry may move only if hole lies between its home and its slot
            if probe_distance(home, index, capacity) >= probe_distance(hole, index, capacity):
                self._slots[hole] = entry
                self._slots[index] = None
                hole = index
