"""Functional API over Table.

    table = create_table(16)
    insert(table, "key", b"value")
    search(table, "key")   # b"value"
    destroy_table(table)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core.config import ProbeMode, TableConfig
from .core.table import Table

if TYPE_CHECKING:
    from .core.types import Key, Value, ValueLike
    from .interfaces.hasher import Hasher


def create_table(
    capacity: int,
    *,
    probe_mode: ProbeMode = ProbeMode.HOME_ONLY,
    expand_when_full: bool = False,
    rehash_on_expand: bool = False,
    round_up_capacity: bool = False,
    hasher: Hasher | None = None,
) -> Table:
    """Create an empty table with capacity slots (a power of two)."""
    config = TableConfig(
        capacity=capacity,
        probe_mode=probe_mode,
        expand_when_full=expand_when_full,
        rehash_on_expand=rehash_on_expand,
        round_up_capacity=round_up_capacity,
    )
    return Table(config, hasher=hasher)


def destroy_table(table: Table) -> None:
    table.destroy()


def insert(table: Table, key: Key, value: ValueLike) -> bool:
    return table.insert(key, value)


def delete(table: Table, key: Key) -> None:
    table.delete(key)


def search(table: Table, key: Key) -> Value | None:
    return table.search(key)


def expand_table(table: Table) -> None:
    table.expand()
