"""Shared table types: entries, insertion results and index normalization."""

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, Tuple

from strongpw.hashing.base import HashFunction


@dataclass(frozen=True)
class Entry:
    """A dictionary word and its rank.

    Attributes:
        word: Dictionary word, already trimmed
        rank: 1-based line number of the word in the word list
    """

    word: str
    rank: int


class InsertResult(Enum):
    """Outcome of a table insertion."""

    INSERTED = "inserted"
    DROPPED_FULL = "dropped_full"


def normalize_index(digest: int, size: int) -> int:
    """Map a signed digest into [0, size).

    Python's ``%`` already floors toward negative infinity, so this equals
    ``((digest % size) + size) % size`` under truncating remainder.
    """
    return digest % size


class HashTable(Protocol):
    """
    Protocol for the instrumented tables.

    Both tables take the hash function per call so the same table type can be
    built once per hash variant.
    """

    def insert(self, word: str, rank: int, hash_fn: HashFunction) -> InsertResult:
        """Store ``Entry(word, rank)``."""
        ...

    def lookup(self, word: str, hash_fn: HashFunction) -> Tuple[bool, int]:
        """Return (found, probes) for an exact-match search."""
        ...

    @property
    def num_slots(self) -> int:
        """Bucket count or capacity."""
        ...

    @property
    def load_factor(self) -> float:
        """Stored entries per slot."""
        ...

    def __len__(self) -> int:
        ...
