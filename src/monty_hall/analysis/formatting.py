"""Plain-text tables for single games and batch summaries."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING

from monty_hall.analysis.summary import PROPORTION_DECIMALS, OutcomeSummary
from monty_hall.core.labels import OUTCOME_COLUMN_ORDER

if TYPE_CHECKING:
    from monty_hall.runtime.engine import TrialRecord


def format_game_table(record: TrialRecord) -> str:
    """Render one trial as a two-row ``strategy``/``outcome`` table."""

    rows = [(item.strategy.value, item.outcome.value) for item in record.observations()]
    return _render(("strategy", "outcome"), rows)


def format_summary_table(summary: OutcomeSummary) -> str:
    """Render the strategy-by-outcome proportion table.

    Parameters
    ----------
    summary : OutcomeSummary
        Batch summary to render.

    Returns
    -------
    str
        Table with rows ``stay``/``switch`` and columns ``LOSE``/``WIN``.
    """

    header = ("strategy", *(outcome.value for outcome in OUTCOME_COLUMN_ORDER))
    rows = [
        (
            row.strategy.value,
            *(f"{row.proportion(outcome):.{PROPORTION_DECIMALS}f}" for outcome in OUTCOME_COLUMN_ORDER),
        )
        for row in summary.rows
    ]
    return _render(header, rows)


def _render(header: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Left-align columns separated by two spaces."""

    widths = [len(cell) for cell in header]
    for row in rows:
        widths = [max(width, len(cell)) for width, cell in zip(widths, row)]

    lines = []
    for row in (header, *rows):
        lines.append("  ".join(cell.ljust(width) for cell, width in zip(row, widths)).rstrip())
    return "\n".join(lines)


__all__ = ["format_game_table", "format_summary_table"]
