"""Unit tests for Table with ProbeMode.FULL.

Home slots (FNV-1a): capacity 4: a -> 0, abc -> 3, key4 -> 0, key1 -> 3;
capacity 8: a -> 4, b -> 5.
"""

import pytest

from open_table.core.config import ProbeMode, TableConfig
from open_table.core.errors import CapacityExhaustedError
from open_table.core.table import Table


def make_table(capacity=4, **kwargs):
    return Table(TableConfig(capacity=capacity, probe_mode=ProbeMode.FULL, **kwargs))


def keys(table):
    return [entry.key if entry is not None else None for entry in table.slots()]


@pytest.fixture
def table():
    """Create an empty four-slot table that probes fully."""
    return make_table()


def test_displaced_key_is_found(table):
    """Test search follows the probe sequence past the home slot."""
    table.insert("key4", b"k4")
    table.insert("a", b"a")

    assert keys(table) == ["key4", "a", None, None]
    assert table.search("a") == b"a"
    assert table.search("key4") == b"k4"


def test_reinsert_displaced_key_updates(table):
    """Test insert deduplicates keys anywhere along the probe sequence."""
    table.insert("key4", b"k4")
    table.insert("a", b"first")
    table.insert("a", b"second")

    assert len(table) == 2
    assert keys(table) == ["key4", "a", None, None]
    assert table.search("a") == b"second"


def test_delete_checks_key(table):
    """Test delete leaves a different key in the home slot alone."""
    table.insert("key4", b"k4")
    table.delete("a")

    assert len(table) == 1
    assert table.search("key4") == b"k4"


def test_delete_shifts_displaced_entry_home(table):
    """Test deleting the home entry pulls the displaced entry back."""
    table.insert("key4", b"k4")
    table.insert("a", b"a")

    table.delete("key4")

    assert keys(table) == ["a", None, None, None]
    assert table.search("a") == b"a"
    assert len(table) == 1


def test_delete_shift_across_wraparound(table):
    """Test backward shift follows a cluster that wraps past the last slot."""
    table.insert("abc", b"abc")    # slot 3
    table.insert("key1", b"key1")  # home 3, wraps to slot 0
    table.insert("a", b"a")        # home 0, pushed to slot 1
    assert keys(table) == ["key1", "a", None, "abc"]

    table.delete("abc")

    assert keys(table) == ["a", None, None, "key1"]
    assert table.search("key1") == b"key1"
    assert table.search("a") == b"a"


def test_delete_does_not_move_entry_at_home():
    """Test an entry already in its home slot stays put."""
    table = make_table(8)
    table.insert("a", b"a")  # slot 4
    table.insert("b", b"b")  # slot 5

    table.delete("a")

    assert keys(table) == [None] * 5 + ["b", None, None]
    assert table.search("b") == b"b"


def test_full_table_allows_update(table):
    """Test a full table still accepts updates of existing keys."""
    for key in ["a", "b", "c", "abc"]:
        table.insert(key, b"old")

    assert table.insert("abc", b"new")
    assert table.search("abc") == b"new"
    assert len(table) == 4


def test_full_table_rejects_new_key(table):
    for key in ["a", "b", "c", "abc"]:
        table.insert(key, b"v")

    assert table.insert("key1", b"x") is False
    with pytest.raises(CapacityExhaustedError):
        table.put("key1", b"x")


def test_constant_hash_keeps_all_keys_reachable():
    """Test every key in one long cluster stays reachable through deletes."""
    table = Table(TableConfig(capacity=8, probe_mode=ProbeMode.FULL), hasher=lambda data: 5)
    names = [f"k{i}" for i in range(6)]
    for name in names:
        table.insert(name, name.encode())

    table.delete("k1")
    table.delete("k4")

    assert len(table) == 4
    for name in ["k0", "k2", "k3", "k5"]:
        assert table.search(name) == name.encode()
    assert table.search("k1") is None
    assert table.search("k4") is None


def test_search_missing_in_full_table(table):
    """Test a miss terminates when every slot is occupied."""
    for key in ["a", "b", "c", "abc"]:
        table.insert(key, b"v")
    assert table.search("key1") is None
