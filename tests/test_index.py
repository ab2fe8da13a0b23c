"""Tests for the four-table dictionary index."""

import logging

import pytest

from strongpw import TABLE_NAMES, DictionaryIndex, LookupResult
from strongpw.tables import ChainingTable, InsertResult, ProbingTable


def test_every_word_found_in_every_table(small_dictionary, small_index):
    for word in small_dictionary:
        result = small_index.query(word)
        assert result.found
        for name in TABLE_NAMES:
            assert getattr(result, name) >= 1, name


def test_absent_word_not_found(small_index):
    result = small_index.query("accountability")
    assert not result.found


def test_query_is_idempotent(small_index):
    """Repeated queries yield identical probe counts."""
    first = small_index.query("dragon")
    second = small_index.query("dragon")
    assert first == second
    assert small_index.query("zzzzzzzz") == small_index.query("zzzzzzzz")


def test_costs_are_not_cumulative(small_index):
    small_index.query("account")
    small_index.query("account")
    assert all(cost == 1 for cost in small_index.costs.values())


def test_last_result_tracks_latest_query(small_index):
    assert small_index.last_result == LookupResult()
    result = small_index.query("password")
    assert small_index.last_result is result
    assert list(small_index.costs) == list(TABLE_NAMES)


def test_tables_layout(small_index):
    tables = small_index.tables
    assert list(tables) == list(TABLE_NAMES)
    assert isinstance(tables["chaining_sparse"], ChainingTable)
    assert isinstance(tables["probing_dense"], ProbingTable)
    assert tables["chaining_dense"].num_slots == 1000
    assert tables["probing_sparse"].num_slots == 20000
    assert all(len(t) == 3 for t in tables.values())


def test_len_and_contains(small_index):
    assert len(small_index) == 3
    assert "dragon" in small_index
    assert "dragon1" not in small_index


def test_build_report_counts(small_index):
    report = small_index.build_report
    assert report.inserted == dict.fromkeys(TABLE_NAMES, 3)
    assert report.total_dropped == 0


def test_full_probing_tables_drop_and_warn(caplog):
    """Overflowing the probing tables is reported, never raised."""
    words = {f"word{i}": i + 1 for i in range(6)}
    with caplog.at_level(logging.WARNING):
        index = DictionaryIndex(words, chain_buckets=2, probe_capacity=4)

    report = index.build_report
    assert report.dropped["probing_sparse"] == 2
    assert report.dropped["probing_dense"] == 2
    assert report.dropped["chaining_sparse"] == 0
    assert report.inserted["chaining_dense"] == 6
    assert "table is full" in caplog.text

    # Chaining still finds every word, so the index does too
    for word in words:
        assert index.query(word).found


def test_all_tables_searched_after_hit(small_index):
    """Every table contributes a probe count even once the word is found."""
    result = small_index.query("account")
    assert result.probing_dense >= 1
    assert result.chaining_dense >= 1


def test_invalid_sizes(small_dictionary):
    with pytest.raises(ValueError):
        DictionaryIndex(small_dictionary, chain_buckets=0)
    with pytest.raises(ValueError):
        DictionaryIndex(small_dictionary, probe_capacity=0)


def test_tables_share_one_interface(small_dictionary):
    index = DictionaryIndex(small_dictionary, chain_buckets=10, probe_capacity=10)
    for name, table in index.tables.items():
        hash_fn = index.hash_function(name)
        assert table.load_factor == pytest.approx(3 / table.num_slots)
        assert table.insert("zebra", 4, hash_fn) is InsertResult.INSERTED
        assert table.lookup("zebra", hash_fn)[0]
        assert len(table) == 4
