"""Hashing modules for strongpw."""

from .base import HashFunction
from .string_hash import (
    HASH_FUNCTIONS,
    dense_hash,
    get_hash_function,
    sparse_hash,
    to_int32,
)
from .diagnostics import (
    collision_rate,
    estimate_q2,
    gini_load,
    gini_of_load,
    home_indices,
    max_load,
    occupancy_summary,
    slot_loads,
)

__all__ = [
    "HashFunction",
    "HASH_FUNCTIONS",
    "sparse_hash",
    "dense_hash",
    "get_hash_function",
    "to_int32",
    "home_indices",
    "slot_loads",
    "occupancy_summary",
    "max_load",
    "gini_load",
    "gini_of_load",
    "collision_rate",
    "estimate_q2",
]
