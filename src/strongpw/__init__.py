"""strongpw: dictionary-based password strength checks with instrumented hash tables."""

from .config import CheckerConfig, load_config
from .hashing import (
    HASH_FUNCTIONS,
    HashFunction,
    collision_rate,
    dense_hash,
    estimate_q2,
    get_hash_function,
    gini_load,
    home_indices,
    max_load,
    occupancy_summary,
    sparse_hash,
)
from .tables import ChainingTable, Entry, InsertResult, ProbingTable
from .index import TABLE_NAMES, BuildReport, DictionaryIndex, LookupResult
from .evaluator import PasswordEvaluator, Rule, Verdict
from .wordlist import load_wordlist, parse_wordlist
from .utils import Timer, get_logger, seed_everything

__version__ = "0.1.0"

__all__ = [
    # Policy
    "PasswordEvaluator",
    "Rule",
    "Verdict",
    # Index
    "DictionaryIndex",
    "LookupResult",
    "BuildReport",
    "TABLE_NAMES",
    # Tables
    "ChainingTable",
    "ProbingTable",
    "Entry",
    "InsertResult",
    # Hashing
    "HashFunction",
    "HASH_FUNCTIONS",
    "sparse_hash",
    "dense_hash",
    "get_hash_function",
    # Diagnostics
    "home_indices",
    "occupancy_summary",
    "max_load",
    "gini_load",
    "collision_rate",
    "estimate_q2",
    # Config and I/O
    "CheckerConfig",
    "load_config",
    "load_wordlist",
    "parse_wordlist",
    # Utils
    "get_logger",
    "Timer",
    "seed_everything",
]
