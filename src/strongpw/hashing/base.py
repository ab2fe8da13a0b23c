"""Base hash function interface."""

from typing import Protocol


class HashFunction(Protocol):
    """
    Protocol for string hash functions used by the tables.

    A hash function maps a word to a signed 32-bit integer. It must be
    deterministic; tables normalize the (possibly negative) digest into an
    index themselves.
    """

    def __call__(self, s: str) -> int:
        """
        Hash a string.

        Args:
            s: Input string

        Returns:
            Signed 32-bit digest
        """
        ...
