"""Common utilities for experiments."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import numpy as np


def make_output_paths(out_dir: Path, exp_id: str) -> tuple[Path, Path]:
    """Create standardized output paths.

    Args:
        out_dir: Base output directory
        exp_id: Experiment ID (e.g., "probe_costs")

    Returns:
        (metrics_path, figure_path)
        - metrics_path: <out_dir>/metrics/<exp_id>.json
        - figure_path: <out_dir>/figures/<exp_id>.pdf
    """
    metrics_dir = out_dir / "metrics"
    figures_dir = out_dir / "figures"
    metrics_dir.mkdir(parents=True, exist_ok=True)
    figures_dir.mkdir(parents=True, exist_ok=True)

    return metrics_dir / f"{exp_id}.json", figures_dir / f"{exp_id}.pdf"


def make_rng(seed: int) -> np.random.Generator:
    """Create a local NumPy random number generator with given seed."""
    return np.random.default_rng(seed)


def write_metrics_json(
    path: Path,
    experiment_id: str,
    config: Dict[str, Any],
    summary: Dict[str, Any],
    extra_info: Optional[Dict[str, Any]] = None,
) -> None:
    """Write standardized metrics JSON.

    Args:
        path: Output JSON path
        experiment_id: Experiment identifier
        config: Experiment configuration
        summary: Summary statistics with CI
        extra_info: Optional additional info to include
    """
    metrics = {
        "experiment_id": experiment_id,
        "timestamp": datetime.now().isoformat(),
        "config": config,
        "summary": summary,
    }

    if extra_info:
        metrics["extra_info"] = extra_info

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(metrics, f, indent=2)


def random_strings(
    rng: np.random.Generator, n: int, min_len: int, max_len: int, alphabet: str
) -> List[str]:
    """Draw n random strings with lengths in [min_len, max_len]."""
    chars = np.array(list(alphabet))
    lengths = rng.integers(min_len, max_len + 1, size=n)
    return ["".join(rng.choice(chars, size=int(k))) for k in lengths]
