"""Seed management for determinism."""

import random

import numpy as np
import torch


def seed_everything(seed: int) -> None:
    """Set all random seeds for deterministic behavior.

    Sets seeds for Python random, NumPy, and PyTorch.

    Args:
        seed: Random seed value (should be non-negative integer)
    """
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
