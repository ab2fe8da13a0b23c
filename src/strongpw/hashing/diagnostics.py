"""Diagnostic functions for hash function analysis.

These work on the home indices a hash function assigns to a word list,
before any collision resolution happens. They show how evenly a hash spreads
the dictionary over a table of a given size.
"""

from typing import Callable, Dict, Iterable

import numpy as np
import torch

from strongpw.tables.base import normalize_index


def home_indices(
    words: Iterable[str], hash_fn: Callable[[str], int], D: int
) -> torch.Tensor:
    """
    Compute the home index of every word in a table of size D.

    Args:
        words: Words to hash
        hash_fn: String hash function
        D: Number of table slots (buckets or probing capacity)

    Returns:
        Flat int64 tensor of indices in [0, D)
    """
    return torch.tensor(
        [normalize_index(hash_fn(w), D) for w in words], dtype=torch.int64
    )


def slot_loads(indices: torch.Tensor, D: int) -> np.ndarray:
    """
    Compute slot loads (number of words whose home is each slot).

    Args:
        indices: Flat tensor of indices [N]
        D: Total number of slots

    Returns:
        Array of counts per slot, shape [D]
    """
    indices_np = indices.cpu().numpy()
    hist, _ = np.histogram(indices_np, bins=D, range=(0, D))
    return hist


def occupancy_summary(indices: torch.Tensor, D: int, topk: int = 10) -> Dict:
    """
    Compute a compact occupancy summary.

    Args:
        indices: Flat tensor of indices [N]
        D: Total number of slots
        topk: Number of most loaded slots to report

    Returns:
        Dictionary with:
        - total_keys: int
        - unique_slots_touched: int
        - mean_load: float (over all D slots)
        - std_load: float
        - max_load: int
        - top_slots: List[Tuple[int, int]] of (slot, load) pairs
        - q2_estimate: float
        - collision_rate: float
        - gini: float (over non-empty slots)
    """
    indices_flat = indices.flatten()
    total_keys = indices_flat.numel()

    if total_keys == 0:
        return {
            "total_keys": 0,
            "unique_slots_touched": 0,
            "mean_load": 0.0,
            "std_load": 0.0,
            "max_load": 0,
            "top_slots": [],
            "q2_estimate": 0.0,
            "collision_rate": 0.0,
            "gini": 0.0,
        }

    hist = slot_loads(indices_flat, D)

    top_indices = np.argsort(hist, kind="stable")[-topk:][::-1]
    top_slots = [(int(slot), int(hist[slot])) for slot in top_indices if hist[slot] > 0]

    return {
        "total_keys": int(total_keys),
        "unique_slots_touched": int(np.sum(hist > 0)),
        "mean_load": float(hist.mean()),
        "std_load": float(hist.std()),
        "max_load": int(hist.max()),
        "top_slots": top_slots,
        "q2_estimate": estimate_q2(indices_flat, D),
        "collision_rate": collision_rate(indices_flat),
        "gini": gini_of_load(hist),
    }


def gini_of_load(loads: np.ndarray, skip_empty: bool = True) -> float:
    """
    Compute Gini coefficient from load array.

    Args:
        loads: Array of load values
        skip_empty: Ignore zero loads (slots nothing hashes to). Pass False to
            count empty buckets as part of the inequality.

    Returns:
        Gini coefficient (0 to 1)
    """
    loads = np.asarray(loads, dtype=float)
    if skip_empty:
        loads = loads[loads > 0]

    if len(loads) == 0 or loads.sum() == 0:
        return 0.0

    sorted_loads = np.sort(loads)
    n = len(sorted_loads)
    cumsum = np.cumsum(sorted_loads)
    gini = (2 * np.sum((np.arange(1, n + 1)) * sorted_loads)) / (n * cumsum[-1]) - (
        n + 1
    ) / n

    return float(gini)


def max_load(indices: torch.Tensor, D: int) -> int:
    """
    Compute maximum load (number of words whose home is the busiest slot).

    For a chaining table this is the longest bucket.
    """
    if indices.numel() == 0:
        return 0
    return int(slot_loads(indices, D).max())


def gini_load(indices: torch.Tensor, D: int) -> float:
    """
    Compute Gini coefficient of load distribution.

    Measures inequality in slot occupancy (0 = uniform, 1 = maximum inequality).
    """
    return gini_of_load(slot_loads(indices, D))


def collision_rate(indices: torch.Tensor) -> float:
    """
    Fraction of keys whose home slot is already claimed by another key.

    Args:
        indices: Flat tensor of indices [N]

    Returns:
        Collision rate (0 to 1)
    """
    flat = indices.flatten()
    total_count = flat.numel()

    if total_count == 0:
        return 0.0

    unique_count = torch.unique(flat).numel()
    return 1.0 - (unique_count / total_count)


def estimate_q2(indices: torch.Tensor, D: int) -> float:
    """
    Estimate sum of squared slot probabilities (proxy for collision probability).

    Computes sum_i (c_i / total)^2 where c_i is count for slot i. For a
    perfectly uniform hash this approaches 1/D.
    """
    total = indices.numel()

    if total == 0:
        return 0.0

    probs = slot_loads(indices, D) / total
    return float(np.sum(probs ** 2))
