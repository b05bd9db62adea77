"""Aggregation and presentation of simulated batches."""

from .formatting import format_game_table, format_summary_table
from .summary import (
    PROPORTION_DECIMALS,
    OutcomeSummary,
    StrategySummary,
    round_proportion,
    summarize_observations,
)

__all__ = [
    "OutcomeSummary",
    "PROPORTION_DECIMALS",
    "StrategySummary",
    "format_game_table",
    "format_summary_table",
    "round_proportion",
    "summarize_observations",
]
