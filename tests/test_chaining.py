"""Tests for the separate chaining table."""

import pytest

from strongpw.hashing import dense_hash, sparse_hash
from strongpw.tables import ChainingTable, InsertResult


def constant_hash(s: str) -> int:
    return 7


def test_inserted_words_are_found():
    """Every inserted word is found with at least one probe."""
    words = ["account", "password", "dragon", "monkey", "letmein", ""]
    for hash_fn in (sparse_hash, dense_hash):
        table = ChainingTable(1000)
        for rank, w in enumerate(words, start=1):
            assert table.insert(w, rank, hash_fn) is InsertResult.INSERTED
        for w in words:
            found, probes = table.lookup(w, hash_fn)
            assert found
            assert probes >= 1


def test_absent_word_in_empty_bucket_costs_nothing():
    table = ChainingTable(1000)
    table.insert("account", 1, dense_hash)
    assert table.lookup("zebra", dense_hash) == (False, 0)


def test_probes_follow_insertion_order():
    """Colliding entries are scanned in insertion order."""
    table = ChainingTable(10)
    for rank, w in enumerate(["first", "second", "third"], start=1):
        table.insert(w, rank, constant_hash)

    assert table.lookup("first", constant_hash) == (True, 1)
    assert table.lookup("second", constant_hash) == (True, 2)
    assert table.lookup("third", constant_hash) == (True, 3)
    # A miss scans the whole bucket
    assert table.lookup("fourth", constant_hash) == (False, 3)


def test_negative_digest_maps_into_range():
    table = ChainingTable(10)
    table.insert("neg", 1, lambda s: -1)
    sizes = table.bucket_sizes()
    assert sizes[9] == 1
    assert sum(sizes) == 1


def test_duplicate_inserts_append():
    """No deduplication: the first copy is always the one found."""
    table = ChainingTable(10)
    table.insert("dup", 1, constant_hash)
    table.insert("dup", 2, constant_hash)
    assert len(table) == 2
    assert table.lookup("dup", constant_hash) == (True, 1)


def test_load_factor_and_sizes():
    table = ChainingTable(4)
    for i in range(8):
        table.insert(f"w{i}", i + 1, dense_hash)
    assert len(table) == 8
    assert table.load_factor == pytest.approx(2.0)
    assert sum(table.bucket_sizes()) == 8
    assert table.num_slots == 4


def test_invalid_bucket_count():
    with pytest.raises(ValueError):
        ChainingTable(0)
