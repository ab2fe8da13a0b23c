"""Metrics module for strongpw."""

from strongpw.metrics.probes import home_occupancy, summarize_costs, table_summary
from strongpw.metrics.stats import mean_ci95

__all__ = [
    "home_occupancy",
    "summarize_costs",
    "table_summary",
    "mean_ci95",
]
