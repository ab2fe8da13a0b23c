"""Tests for probe-cost and packing summaries."""

import pytest

from strongpw import TABLE_NAMES, DictionaryIndex, LookupResult
from strongpw.metrics import (
    home_occupancy,
    mean_ci95,
    summarize_costs,
    table_summary,
)


def test_mean_ci95():
    assert mean_ci95([]) == (0.0, 0.0, 0.0, 0.0)
    assert mean_ci95([3.0]) == (3.0, 3.0, 3.0, 0.0)
    mean, low, high, std = mean_ci95([1.0, 2.0, 3.0])
    assert mean == pytest.approx(2.0)
    assert low < mean < high
    assert std == pytest.approx(1.0)


def test_summarize_costs():
    results = [
        LookupResult(found=True, chaining_sparse=1, chaining_dense=1, probing_sparse=1, probing_dense=1),
        LookupResult(found=True, chaining_sparse=3, chaining_dense=1, probing_sparse=5, probing_dense=1),
    ]
    summary = summarize_costs(results)
    assert list(summary) == list(TABLE_NAMES)
    assert summary["chaining_sparse"]["mean"] == pytest.approx(2.0)
    assert summary["probing_sparse"]["max"] == 5
    assert summary["probing_dense"]["std"] == pytest.approx(0.0)


def test_summarize_no_results():
    summary = summarize_costs([])
    assert summary["chaining_dense"]["mean"] == 0.0
    assert summary["chaining_dense"]["max"] == 0


def test_table_summary(small_index):
    summary = table_summary(small_index)
    assert summary["chaining_sparse"]["entries"] == 3
    assert summary["chaining_sparse"]["empty_buckets"] >= 997
    assert summary["probing_dense"]["load_factor"] == pytest.approx(3 / 20000)
    assert summary["probing_dense"]["max_displacement"] >= 0


def test_table_summary_crowded_probing():
    index = DictionaryIndex({f"w{i}": i + 1 for i in range(8)}, chain_buckets=2, probe_capacity=8)
    summary = table_summary(index)
    assert summary["probing_sparse"]["load_factor"] == pytest.approx(1.0)
    assert summary["chaining_dense"]["max_bucket"] >= 4


def test_home_occupancy(small_dictionary, small_index):
    occupancy = home_occupancy(small_index, small_dictionary)
    assert list(occupancy) == list(TABLE_NAMES)
    for summary in occupancy.values():
        assert summary["total_keys"] == 3
        assert summary["max_load"] >= 1
