"""Integration tests running mixed workloads against the table.

Covers:
1. Full-probe tables agree with a dict under inserts, updates and deletes
2. Growing tables keep every key reachable when rehashing
3. Home-only tables keep their slot bookkeeping consistent
"""

import random

import pytest

from open_table import (
    ProbeMode,
    Table,
    TableConfig,
    collect_stats,
    create_table,
    fnv1a_64,
    home_index,
)


def occupied(table):
    return sum(1 for entry in table.slots() if entry is not None)


@pytest.fixture
def rng():
    return random.Random(1234)


def test_full_probe_matches_dict(rng):
    """Test a full-probe table behaves like a dict under churn."""
    table = create_table(64, probe_mode=ProbeMode.FULL)
    model = {}
    key_space = [f"key{i:03d}" for i in range(48)]

    for step in range(5000):
        key = rng.choice(key_space)
        if rng.random() < 0.6:
            value = f"value{step}".encode()
            assert table.insert(key, value)
            model[key] = value
        else:
            table.delete(key)
            model.pop(key, None)

        assert len(table) == len(model) == occupied(table)

    for key in key_space:
        assert table.search(key) == model.get(key)

    stats = collect_stats(table)
    assert stats.duplicates == []


def test_growing_table_keeps_keys_reachable():
    """Test expansion with rehash keeps every key reachable."""
    table = create_table(
        2,
        probe_mode=ProbeMode.FULL,
        expand_when_full=True,
        rehash_on_expand=True,
    )
    for i in range(1000):
        assert table.insert(f"item-{i}", i.to_bytes(4, "little"))

    assert table.capacity == 1024
    assert len(table) == 1000
    for i in range(1000):
        assert table.search(f"item-{i}") == i.to_bytes(4, "little")


def test_home_only_bookkeeping(rng):
    """Test length and search stay consistent with the slot array."""
    table = Table(TableConfig(capacity=32))
    key_space = [f"k{i}" for i in range(40)]

    for step in range(3000):
        key = rng.choice(key_space)
        if rng.random() < 0.5:
            table.insert(key, f"{step}".encode())
        else:
            table.delete(key)

        assert 0 <= len(table) <= table.capacity
        assert len(table) == occupied(table)

    slots = table.slots()
    for key in key_space:
        home = slots[home_index(fnv1a_64(key), table.capacity)]
        expected = home.value if home is not None and home.key == key else None
        assert table.search(key) == expected


def test_fill_to_capacity_then_drain():
    """Test a table filled with non-colliding keys rejects one more and drains cleanly."""
    table = create_table(16)
    keys = []
    candidate = 0
    homes = set()
    while len(keys) < 16:
        key = f"c{candidate}"
        home = home_index(fnv1a_64(key), 16)
        if home not in homes:
            homes.add(home)
            keys.append(key)
        candidate += 1

    for key in keys:
        assert table.insert(key, key.encode())
    assert table.insert("one-more", b"x") is False
    assert len(table) == 16
    for key in keys:
        assert table.search(key) == key.encode()

    for key in keys:
        table.delete(key)
    assert len(table) == 0
    assert table.slots() == (None,) * 16
    table.destroy()
