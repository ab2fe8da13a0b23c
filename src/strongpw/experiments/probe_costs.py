"""Probe-cost experiment: hash quality versus collision strategy.

Builds a DictionaryIndex from a word list, then measures the probe count of
every table for successful lookups (dictionary words) and unsuccessful ones
(random strings and word+digit variants that are not in the dictionary).
"""

import argparse
import string
from pathlib import Path
from typing import Any, Dict, Mapping

import matplotlib.pyplot as plt

from strongpw.config import CheckerConfig
from strongpw.experiments.common import (
    make_output_paths,
    make_rng,
    random_strings,
    write_metrics_json,
)
from strongpw.experiments.plotting import plot_grouped_bars_with_ci, save_pdf
from strongpw.index import TABLE_NAMES, DictionaryIndex
from strongpw.metrics.probes import home_occupancy, summarize_costs, table_summary
from strongpw.utils import Timer, get_logger, seed_everything

EXP_ID = "probe_costs"
MISS_ALPHABET = string.ascii_letters + string.digits + "!@#$%^&*"


def add_args(parser: argparse.ArgumentParser) -> None:
    """Add experiment-specific arguments."""
    parser.add_argument(
        "--num_misses",
        type=int,
        default=2000,
        help="Number of random absent strings to look up",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Seed for generating absent strings",
    )


def run_experiment(
    words: Mapping[str, int],
    out_dir: Path,
    config: CheckerConfig = CheckerConfig(),
    num_misses: int = 2000,
    seed: int = 42,
) -> Dict[str, Any]:
    """Run the probe-cost comparison.

    Args:
        words: Dictionary words mapped to rank
        out_dir: Base output directory for metrics and figures
        config: Table sizes
        num_misses: Number of random absent strings to query
        seed: Seed for the random strings

    Returns:
        Dictionary with metrics_path, figure_path and summary
    """
    logger = get_logger(EXP_ID, level=config.log_level)
    seed_everything(seed)
    metrics_path, figure_path = make_output_paths(out_dir, EXP_ID)

    with Timer("Index construction", logger=logger) as build_timer:
        index = DictionaryIndex(
            words,
            chain_buckets=config.chain_buckets,
            probe_capacity=config.probe_capacity,
            logger=logger,
        )

    hits = [index.query(w) for w in words]

    rng = make_rng(seed)
    candidates = random_strings(rng, num_misses, 8, 16, MISS_ALPHABET)
    candidates += [f"{w}{int(rng.integers(0, 10))}" for w in words]
    misses = [r for r in (index.query(c) for c in candidates) if not r.found]
    logger.info(f"Queried {len(hits)} hits and {len(misses)} misses")

    summary = {
        "hit": summarize_costs(hits),
        "miss": summarize_costs(misses),
        "tables": table_summary(index),
        "home_occupancy": home_occupancy(index, words),
    }

    fig, ax = plt.subplots(figsize=(8, 4))
    plot_grouped_bars_with_ci(
        ax, TABLE_NAMES, {"hit": summary["hit"], "miss": summary["miss"]}
    )
    ax.set_ylabel("Probes per lookup")
    ax.set_title(f"Probe cost over {len(words)} words")
    ax.legend()
    save_pdf(fig, figure_path)

    write_metrics_json(
        metrics_path,
        EXP_ID,
        config={
            "num_words": len(words),
            "chain_buckets": config.chain_buckets,
            "probe_capacity": config.probe_capacity,
            "num_misses": num_misses,
            "seed": seed,
        },
        summary=summary,
        extra_info={
            "build_seconds": build_timer.elapsed,
            "dropped": index.build_report.dropped,
        },
    )
    logger.info(f"Wrote {metrics_path} and {figure_path}")

    return {
        "metrics_path": metrics_path,
        "figure_path": figure_path,
        "summary": summary,
    }
