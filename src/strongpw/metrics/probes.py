"""Probe-cost summaries over batches of dictionary queries."""

from typing import Dict, Iterable, Sequence

import numpy as np

from strongpw.hashing.diagnostics import gini_of_load, home_indices, occupancy_summary
from strongpw.index import TABLE_NAMES, DictionaryIndex, LookupResult
from strongpw.metrics.stats import mean_ci95
from strongpw.tables.chaining import ChainingTable


def summarize_costs(results: Sequence[LookupResult]) -> Dict[str, Dict[str, float]]:
    """Summarize probe counts per table.

    Args:
        results: Lookup results of a batch of queries

    Returns:
        {table_name: {mean, ci95_low, ci95_high, std, max}} in TABLE_NAMES order
    """
    summary = {}
    for name in TABLE_NAMES:
        values = [getattr(r, name) for r in results]
        mean, ci_low, ci_high, std = mean_ci95(values)
        summary[name] = {
            "mean": mean,
            "ci95_low": ci_low,
            "ci95_high": ci_high,
            "std": std,
            "max": max(values) if values else 0,
        }
    return summary


def table_summary(index: DictionaryIndex) -> Dict[str, Dict[str, float]]:
    """Describe how each table of an index is packed after construction.

    Chaining tables report bucket length statistics, probing tables report
    the distance of entries from their home slot (cluster cost).
    """
    summary = {}
    for name, table in index.tables.items():
        if isinstance(table, ChainingTable):
            sizes = table.bucket_sizes()
            summary[name] = {
                "entries": len(table),
                "load_factor": table.load_factor,
                "empty_buckets": sum(1 for s in sizes if s == 0),
                "max_bucket": max(sizes),
                "bucket_gini": gini_of_load(np.array(sizes), skip_empty=False),
            }
        else:
            displacements = table.displacements(index.hash_function(name))
            summary[name] = {
                "entries": len(table),
                "load_factor": table.load_factor,
                "mean_displacement": float(np.mean(displacements)) if displacements else 0.0,
                "max_displacement": max(displacements) if displacements else 0,
            }
    return summary


def home_occupancy(index: DictionaryIndex, words: Iterable[str]) -> Dict[str, Dict]:
    """Occupancy summary of the words' home slots for every table of an index."""
    words = list(words)
    occupancy = {}
    for name, table in index.tables.items():
        indices = home_indices(words, index.hash_function(name), table.num_slots)
        occupancy[name] = occupancy_summary(indices, table.num_slots)
    return occupancy
