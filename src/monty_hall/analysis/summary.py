"""Per-strategy outcome proportions for a simulated batch.

Proportions are rounded half-to-even on the exact rational ``count / total``
rather than on a binary float. WIN and LOSE proportions of one strategy are
complementary, so a rounding tie on one side always pairs with a tie whose
integer part has the opposite parity, and every row sums to exactly ``1.00``.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from fractions import Fraction

from monty_hall.core.data import StrategyObservation
from monty_hall.core.labels import STRATEGY_ORDER, Outcome, Strategy, coerce_outcome, coerce_strategy

PROPORTION_DECIMALS = 2


def round_proportion(count: int, total: int, *, decimals: int = PROPORTION_DECIMALS) -> float:
    """Return ``count / total`` rounded half-to-even to ``decimals`` places.

    Parameters
    ----------
    count : int
        Number of matching observations.
    total : int
        Number of observations. Must be positive.
    decimals : int, optional
        Number of decimal places.

    Returns
    -------
    float
        Rounded proportion in ``[0, 1]``.

    Raises
    ------
    ValueError
        If ``total`` is not positive or ``count`` is outside ``[0, total]``.

    Examples
    --------
    >>> round_proportion(1, 200)
    0.0
    >>> round_proportion(3, 200)
    0.02
    """

    if total <= 0:
        raise ValueError(f"total must be > 0, got {total}")
    if count < 0 or count > total:
        raise ValueError(f"count must be within [0, {total}], got {count}")
    return float(round(Fraction(count, total), decimals))


@dataclass(frozen=True, slots=True)
class StrategySummary:
    """Outcome counts and rounded proportions for one strategy.

    Parameters
    ----------
    strategy : Strategy
        Strategy the row describes.
    n_wins : int
        Number of winning observations.
    n_losses : int
        Number of losing observations.
    win_proportion : float
        ``n_wins / n_observations`` rounded to two decimals.
    lose_proportion : float
        ``n_losses / n_observations`` rounded to two decimals.
    """

    strategy: Strategy
    n_wins: int
    n_losses: int
    win_proportion: float
    lose_proportion: float

    @property
    def n_observations(self) -> int:
        """Total number of observations for the strategy."""

        return self.n_wins + self.n_losses

    def proportion(self, outcome: Outcome | str) -> float:
        """Return the rounded proportion for ``outcome``.

        Raises
        ------
        ValueError
            If ``outcome`` is not ``"WIN"`` or ``"LOSE"``.
        """

        if coerce_outcome(outcome) is Outcome.WIN:
            return self.win_proportion
        return self.lose_proportion


@dataclass(frozen=True, slots=True)
class OutcomeSummary:
    """Row-normalized strategy-by-outcome cross-tabulation.

    Parameters
    ----------
    rows : tuple[StrategySummary, ...]
        One row per strategy, ordered ``stay`` then ``switch``.
    """

    rows: tuple[StrategySummary, ...]

    def row(self, strategy: Strategy | str) -> StrategySummary:
        """Return the summary row for ``strategy``.

        Raises
        ------
        KeyError
            If the summary has no row for ``strategy``.
        """

        resolved = coerce_strategy(strategy)
        for row in self.rows:
            if row.strategy is resolved:
                return row
        raise KeyError(resolved.value)

    def as_table(self) -> dict[str, dict[str, float]]:
        """Return ``{strategy: {outcome: proportion}}`` with plain string keys."""

        return {
            row.strategy.value: {
                Outcome.LOSE.value: row.lose_proportion,
                Outcome.WIN.value: row.win_proportion,
            }
            for row in self.rows
        }


def summarize_observations(observations: Iterable[StrategyObservation]) -> OutcomeSummary:
    """Cross-tabulate observations into per-strategy proportions.

    Parameters
    ----------
    observations : Iterable[StrategyObservation]
        Flat (strategy, outcome) rows. Order does not affect the result.

    Returns
    -------
    OutcomeSummary
        One row per strategy in ``STRATEGY_ORDER``.

    Raises
    ------
    ValueError
        If any strategy has no observations.
    """

    counts: Counter[tuple[Strategy, Outcome]] = Counter(
        (item.strategy, item.outcome) for item in observations
    )

    rows: list[StrategySummary] = []
    for strategy in STRATEGY_ORDER:
        n_wins = counts[(strategy, Outcome.WIN)]
        n_losses = counts[(strategy, Outcome.LOSE)]
        total = n_wins + n_losses
        if total == 0:
            raise ValueError(f"no observations for strategy {strategy.value!r}")
        rows.append(
            StrategySummary(
                strategy=strategy,
                n_wins=n_wins,
                n_losses=n_losses,
                win_proportion=round_proportion(n_wins, total),
                lose_proportion=round_proportion(n_losses, total),
            )
        )
    return OutcomeSummary(rows=tuple(rows))


__all__ = [
    "OutcomeSummary",
    "PROPORTION_DECIMALS",
    "StrategySummary",
    "round_proportion",
    "summarize_observations",
]
