"""Open addressing hash table with linear probing."""

from typing import List, Optional, Tuple

from strongpw.hashing.base import HashFunction
from strongpw.tables.base import Entry, InsertResult, normalize_index

DEFAULT_CAPACITY = 20000


class ProbingTable:
    """
    Fixed capacity open addressing table.

    Each slot holds at most one entry. Collisions walk forward one slot at a
    time, wrapping at the end of the array. There is no deletion, so an empty
    slot always terminates a search.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        """
        Initialize an empty table.

        Args:
            capacity: Number of slots (M)

        Raises:
            ValueError: If capacity is not positive
        """
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._slots: List[Optional[Entry]] = [None] * capacity
        self._size = 0

    def insert(self, word: str, rank: int, hash_fn: HashFunction) -> InsertResult:
        """
        Place ``Entry(word, rank)`` in the first empty slot from its home index.

        Returns:
            INSERTED, or DROPPED_FULL when the probe sequence wraps back to the
            home slot without finding room. A dropped entry is not stored.
        """
        home = normalize_index(hash_fn(word), self.capacity)
        index = home
        while True:
            if self._slots[index] is None:
                self._slots[index] = Entry(word, rank)
                self._size += 1
                return InsertResult.INSERTED
            index = (index + 1) % self.capacity
            if index == home:
                return InsertResult.DROPPED_FULL

    def lookup(self, word: str, hash_fn: HashFunction) -> Tuple[bool, int]:
        """
        Walk the probe sequence for an exact match.

        The walk stops at the match, at the first empty slot, or after
        examining every slot once.

        Returns:
            (found, probes) where probes counts occupied slots examined
        """
        home = normalize_index(hash_fn(word), self.capacity)
        index = home
        probes = 0
        while self._slots[index] is not None:
            probes += 1
            if self._slots[index].word == word:
                return True, probes
            index = (index + 1) % self.capacity
            if index == home:
                break
        return False, probes

    def displacements(self, hash_fn: HashFunction) -> List[int]:
        """
        Distance of every stored entry from its home slot, in slot order.

        A successful lookup of an entry costs its displacement plus one probe.
        """
        result = []
        for index, entry in enumerate(self._slots):
            if entry is None:
                continue
            home = normalize_index(hash_fn(entry.word), self.capacity)
            result.append((index - home) % self.capacity)
        return result

    @property
    def num_slots(self) -> int:
        return self.capacity

    @property
    def load_factor(self) -> float:
        """Fraction of occupied slots."""
        return self._size / self.capacity

    def __len__(self) -> int:
        return self._size
