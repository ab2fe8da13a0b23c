"""Shared plotting utilities for experiments."""

from pathlib import Path
from typing import Dict, Sequence

import matplotlib
# Use Agg backend (non-interactive, PDF-compatible)
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np


def save_pdf(fig, path: Path) -> None:
    """Save figure as PDF with tight layout.

    Args:
        fig: Matplotlib figure
        path: Output PDF path
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.tight_layout()
    fig.savefig(path, bbox_inches="tight", dpi=150)
    plt.close(fig)


def plot_grouped_bars_with_ci(
    ax, labels: Sequence[str], groups: Dict[str, Dict[str, Dict[str, float]]]
) -> None:
    """Plot one bar per label for each group, with 95% CI error bars.

    Args:
        ax: Matplotlib axes
        labels: Bar labels (table names), in plotting order
        groups: {group_name: {label: {"mean", "ci95_low", "ci95_high"}}}
    """
    x = np.arange(len(labels))
    width = 0.8 / max(1, len(groups))
    for i, (group, stats) in enumerate(groups.items()):
        means = np.array([stats[label]["mean"] for label in labels])
        lows = np.array([stats[label]["ci95_low"] for label in labels])
        highs = np.array([stats[label]["ci95_high"] for label in labels])
        ax.bar(
            x + i * width,
            means,
            width,
            yerr=[means - lows, highs - means],
            capsize=3,
            label=group,
        )
    ax.set_xticks(x + width * (len(groups) - 1) / 2)
    ax.set_xticklabels(labels, rotation=15)
