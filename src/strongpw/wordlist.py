"""Word list loading.

A word list is a plain text file with one word per line. The rank of a word
is its 1-based line number.
"""

from pathlib import Path
from typing import Dict, Iterable, Union


def parse_wordlist(lines: Iterable[str]) -> Dict[str, int]:
    """
    Build a word -> rank mapping from lines of text.

    Lines are stripped and blank lines skipped, but line numbering still
    counts them. A word that appears twice keeps its later rank.

    Args:
        lines: Lines of a word list

    Returns:
        Mapping in first-appearance order
    """
    words: Dict[str, int] = {}
    for line_number, line in enumerate(lines, start=1):
        word = line.strip()
        if word:
            words[word] = line_number
    return words


def load_wordlist(path: Union[str, Path]) -> Dict[str, int]:
    """
    Read a word list file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Word list not found: {path}")

    with open(path, "r", encoding="utf-8") as f:
        return parse_wordlist(f)
