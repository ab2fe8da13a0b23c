"""Dictionary index: four instrumented tables built from one word list.

The same dictionary is stored in a chaining table and a probing table under
each of the two hash functions. Every query runs against all four so their
probe costs can be compared side by side.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional, Tuple

from strongpw.hashing.base import HashFunction
from strongpw.hashing.string_hash import dense_hash, sparse_hash
from strongpw.tables.base import HashTable, InsertResult
from strongpw.tables.chaining import DEFAULT_NUM_BUCKETS, ChainingTable
from strongpw.tables.probing import DEFAULT_CAPACITY, ProbingTable
from strongpw.utils.logging import get_logger

TABLE_NAMES = ("chaining_sparse", "chaining_dense", "probing_sparse", "probing_dense")


@dataclass(frozen=True)
class LookupResult:
    """Outcome of one dictionary query.

    Attributes:
        found: True if any table holds the word
        chaining_sparse: Probes in the chaining table under the sparse hash
        chaining_dense: Probes in the chaining table under the dense hash
        probing_sparse: Probes in the probing table under the sparse hash
        probing_dense: Probes in the probing table under the dense hash
    """

    found: bool = False
    chaining_sparse: int = 0
    chaining_dense: int = 0
    probing_sparse: int = 0
    probing_dense: int = 0

    def costs(self) -> Dict[str, int]:
        """Probe counts keyed by table name, in TABLE_NAMES order."""
        return OrderedDict((name, getattr(self, name)) for name in TABLE_NAMES)


@dataclass
class BuildReport:
    """Per-table insertion counts from index construction."""

    inserted: Dict[str, int] = field(default_factory=lambda: dict.fromkeys(TABLE_NAMES, 0))
    dropped: Dict[str, int] = field(default_factory=lambda: dict.fromkeys(TABLE_NAMES, 0))

    @property
    def total_dropped(self) -> int:
        return sum(self.dropped.values())


class DictionaryIndex:
    """
    Owns the four tables and answers word queries against all of them.

    All tables are fully built in the constructor; there is no way to insert
    afterwards.
    """

    def __init__(
        self,
        words: Mapping[str, int],
        chain_buckets: int = DEFAULT_NUM_BUCKETS,
        probe_capacity: int = DEFAULT_CAPACITY,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Build all four tables from a word -> rank mapping.

        Args:
            words: Dictionary words mapped to their 1-based rank. Insertion
                follows the mapping's iteration order.
            chain_buckets: Bucket count of both chaining tables
            probe_capacity: Slot count of both probing tables
            logger: Logger for build progress and dropped insertions

        Raises:
            ValueError: If a table size is not positive
        """
        self.logger = logger if logger is not None else get_logger("index")
        self._tables: Dict[str, Tuple[HashTable, HashFunction]] = {
            "chaining_sparse": (ChainingTable(chain_buckets), sparse_hash),
            "chaining_dense": (ChainingTable(chain_buckets), dense_hash),
            "probing_sparse": (ProbingTable(probe_capacity), sparse_hash),
            "probing_dense": (ProbingTable(probe_capacity), dense_hash),
        }
        self.build_report = BuildReport()
        self._num_words = len(words)
        self.last_result = LookupResult()

        for word, rank in words.items():
            for name, (table, hash_fn) in self._tables.items():
                if table.insert(word, rank, hash_fn) is InsertResult.DROPPED_FULL:
                    self.build_report.dropped[name] += 1
                    self.logger.warning(f"{name}: table is full, dropped {word!r}")
                else:
                    self.build_report.inserted[name] += 1

        self.logger.info(
            f"Built index over {self._num_words} words "
            f"(chain_buckets={chain_buckets}, probe_capacity={probe_capacity}, "
            f"dropped={self.build_report.total_dropped})"
        )

    def query(self, word: str) -> LookupResult:
        """
        Look a word up in all four tables.

        Every table is searched even after an earlier one found the word; the
        probe counts are independent measurements.

        Args:
            word: Word to look up

        Returns:
            LookupResult with the found flag and the four probe counts
        """
        probes = {}
        found = False
        for name, (table, hash_fn) in self._tables.items():
            hit, probes[name] = table.lookup(word, hash_fn)
            found = found or hit
        self.last_result = LookupResult(found=found, **probes)
        return self.last_result

    @property
    def costs(self) -> Dict[str, int]:
        """Probe counts of the most recent query."""
        return self.last_result.costs()

    @property
    def tables(self) -> Dict[str, HashTable]:
        """Tables keyed by name, in TABLE_NAMES order."""
        return {name: table for name, (table, _) in self._tables.items()}

    def hash_function(self, name: str) -> HashFunction:
        """Hash function the named table was built with."""
        return self._tables[name][1]

    def __contains__(self, word: str) -> bool:
        """Run a full query; last_result is updated like any other query."""
        return self.query(word).found

    def __len__(self) -> int:
        return self._num_words
