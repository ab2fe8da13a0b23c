"""Separate chaining hash table."""

from typing import List, Optional, Tuple

from strongpw.hashing.base import HashFunction
from strongpw.tables.base import Entry, InsertResult, normalize_index

DEFAULT_NUM_BUCKETS = 1000


class ChainingTable:
    """
    Fixed bucket count table with one ordered list of entries per bucket.

    Insertion appends to the end of the bucket, lookup scans from the front.
    Buckets are created lazily and never shrink, reorder or resize.
    """

    def __init__(self, num_buckets: int = DEFAULT_NUM_BUCKETS):
        """
        Initialize an empty table.

        Args:
            num_buckets: Number of buckets (M)

        Raises:
            ValueError: If num_buckets is not positive
        """
        if num_buckets <= 0:
            raise ValueError(f"num_buckets must be positive, got {num_buckets}")
        self.num_buckets = num_buckets
        self._buckets: List[Optional[List[Entry]]] = [None] * num_buckets
        self._size = 0

    def insert(self, word: str, rank: int, hash_fn: HashFunction) -> InsertResult:
        """
        Append ``Entry(word, rank)`` to the bucket the word hashes to.

        Chaining never runs out of room, so the result is always INSERTED.
        """
        index = normalize_index(hash_fn(word), self.num_buckets)
        bucket = self._buckets[index]
        if bucket is None:
            bucket = self._buckets[index] = []
        bucket.append(Entry(word, rank))
        self._size += 1
        return InsertResult.INSERTED

    def lookup(self, word: str, hash_fn: HashFunction) -> Tuple[bool, int]:
        """
        Scan the word's bucket for an exact match.

        Args:
            word: Word to search for
            hash_fn: Hash function the table was built with

        Returns:
            (found, probes) where probes counts every entry examined,
            including the match. An empty bucket costs 0 probes.
        """
        bucket = self._buckets[normalize_index(hash_fn(word), self.num_buckets)]
        probes = 0
        if bucket is None:
            return False, probes
        for entry in bucket:
            probes += 1
            if entry.word == word:
                return True, probes
        return False, probes

    def bucket_sizes(self) -> List[int]:
        """Length of every bucket, in bucket order (0 for absent buckets)."""
        return [len(b) if b is not None else 0 for b in self._buckets]

    @property
    def num_slots(self) -> int:
        return self.num_buckets

    @property
    def load_factor(self) -> float:
        """Average entries per bucket."""
        return self._size / self.num_buckets

    def __len__(self) -> int:
        return self._size
