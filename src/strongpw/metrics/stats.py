"""Statistical utilities for experiments."""

from typing import Sequence, Tuple

import numpy as np


def mean_ci95(values: Sequence[float]) -> Tuple[float, float, float, float]:
    """Compute mean and 95% confidence interval using normal approximation.

    Args:
        values: Array of float values

    Returns:
        (mean, ci_low, ci_high, std)
    """
    if len(values) == 0:
        return (0.0, 0.0, 0.0, 0.0)

    arr = np.array(values, dtype=float)
    n = len(arr)
    mean = float(np.mean(arr))

    if n == 1:
        return (mean, mean, mean, 0.0)

    std = float(np.std(arr, ddof=1))  # Sample standard deviation
    margin = 1.96 * std / np.sqrt(n)

    return (mean, float(mean - margin), float(mean + margin), std)
