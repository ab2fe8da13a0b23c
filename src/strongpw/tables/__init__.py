"""Instrumented hash tables."""

from .base import Entry, HashTable, InsertResult, normalize_index
from .chaining import ChainingTable
from .probing import ProbingTable

__all__ = [
    "Entry",
    "HashTable",
    "InsertResult",
    "normalize_index",
    "ChainingTable",
    "ProbingTable",
]
