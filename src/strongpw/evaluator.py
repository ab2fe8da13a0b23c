"""Password strength policy on top of the dictionary index."""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple

from strongpw.index import DictionaryIndex, LookupResult

DEFAULT_MIN_LENGTH = 8


class Rule(Enum):
    """The rule that decided a verdict."""

    TOO_SHORT = "too_short"
    DICTIONARY_WORD = "dictionary_word"
    WORD_PLUS_DIGIT = "word_plus_digit"
    STRONG = "strong"


@dataclass(frozen=True)
class Verdict:
    """Result of evaluating one password.

    Attributes:
        strong: True if the password passed every rule
        rule: Rule that decided the verdict
        lookups: Dictionary queries issued, in order (empty for TOO_SHORT)
    """

    strong: bool
    rule: Rule
    lookups: Tuple[LookupResult, ...] = ()


class PasswordEvaluator:
    """
    Applies the strength rules in order, stopping at the first failure:

    1. shorter than ``min_length`` characters
    2. the password itself is a dictionary word
    3. a dictionary word followed by a single trailing digit

    The probe costs of the last query issued stay readable through
    ``last_result`` and ``costs`` until the next evaluation.
    """

    def __init__(self, index: DictionaryIndex, min_length: int = DEFAULT_MIN_LENGTH):
        if min_length <= 0:
            raise ValueError(f"min_length must be positive, got {min_length}")
        self.index = index
        self.min_length = min_length
        self.last_result = LookupResult()

    def evaluate(self, password: str) -> Verdict:
        """
        Evaluate a password and report which rule decided.

        Args:
            password: Candidate password

        Returns:
            Verdict with the deciding rule and the lookups performed
        """
        self.last_result = LookupResult()

        if len(password) < self.min_length:
            return Verdict(strong=False, rule=Rule.TOO_SHORT)

        full = self._query(password)
        if full.found:
            return Verdict(strong=False, rule=Rule.DICTIONARY_WORD, lookups=(full,))

        if len(password) >= 2 and password[-1].isdecimal():
            base = self._query(password[:-1])
            if base.found:
                return Verdict(strong=False, rule=Rule.WORD_PLUS_DIGIT, lookups=(full, base))
            return Verdict(strong=True, rule=Rule.STRONG, lookups=(full, base))

        return Verdict(strong=True, rule=Rule.STRONG, lookups=(full,))

    def is_strong(self, password: str) -> bool:
        """Return True if the password passes every rule."""
        return self.evaluate(password).strong

    @property
    def costs(self) -> Dict[str, int]:
        """Probe counts of the most recent query (all zero if none was issued)."""
        return self.last_result.costs()

    def _query(self, word: str) -> LookupResult:
        self.last_result = self.index.query(word)
        return self.last_result
