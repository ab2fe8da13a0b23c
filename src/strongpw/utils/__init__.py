"""Utilities module for strongpw."""

from strongpw.utils.logging import get_logger
from strongpw.utils.seeds import seed_everything
from strongpw.utils.timing import Timer

__all__ = [
    "get_logger",
    "seed_everything",
    "Timer",
]
