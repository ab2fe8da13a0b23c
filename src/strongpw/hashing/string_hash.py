"""String hash functions with 32-bit signed wraparound.

Both functions reproduce fixed-width integer overflow exactly. The point of
comparing them is to observe how hash quality shapes bucket and probe-chain
lengths, so the wraparound must not be replaced by Python's unbounded ints.
"""

from typing import Callable, Dict

MASK32 = 0xFFFFFFFF
INT32_SIGN = 0x80000000


def to_int32(x: int) -> int:
    """Force integer into the signed 32-bit two's complement domain.

    Args:
        x: Input integer (can be negative or any size)

    Returns:
        Signed 32-bit integer in [-2^31, 2^31)
    """
    x &= MASK32
    if x & INT32_SIGN:
        return x - (MASK32 + 1)
    return x


def sparse_hash(s: str) -> int:
    """Coarse sampling hash.

    Samples roughly eight evenly spaced characters instead of the whole
    string: ``skip = max(1, len(s) // 8)`` and every ``skip``-th character is
    folded in with multiplier 37. Cheap, but strings that only differ between
    sampled positions collide.

    Args:
        s: Input string

    Returns:
        Signed 32-bit hash value
    """
    h = 0
    skip = max(1, len(s) // 8)
    for i in range(0, len(s), skip):
        h = to_int32(h * 37 + ord(s[i]))
    return h


def dense_hash(s: str) -> int:
    """Polynomial rolling hash over every character (multiplier 31).

    Args:
        s: Input string

    Returns:
        Signed 32-bit hash value
    """
    h = 0
    for ch in s:
        h = to_int32(h * 31 + ord(ch))
    return h


HASH_FUNCTIONS: Dict[str, Callable[[str], int]] = {
    "sparse": sparse_hash,
    "dense": dense_hash,
}


def get_hash_function(name: str) -> Callable[[str], int]:
    """Look up a hash function by name ("sparse" or "dense")."""
    if name not in HASH_FUNCTIONS:
        raise ValueError(
            f"hash function must be one of {list(HASH_FUNCTIONS.keys())}, got {name}"
        )
    return HASH_FUNCTIONS[name]
