"""Trial and batch runners for the Monty Hall game.

This module provides the orchestration entry points:

- :func:`run_trial`: play one trial from a given arrangement and initial pick.
- :func:`play_game`: draw a fresh game and play one trial.
- :func:`play_n_games`: play ``n_games`` independent trials and summarize.
- :func:`run_simulation`: seed a generator from :class:`SimulationConfig`
  and run a batch.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from monty_hall.analysis.summary import OutcomeSummary, summarize_observations
from monty_hall.core.config_validation import validate_positive_int
from monty_hall.core.data import Arrangement, StrategyObservation
from monty_hall.core.labels import Outcome, Strategy, coerce_strategy
from monty_hall.game import change_door, create_game, determine_winner, open_decoy_door, select_door
from monty_hall.runtime.config import DEFAULT_N_TRIALS, SimulationConfig


@dataclass(frozen=True, slots=True)
class TrialRecord:
    """Everything that happened in one trial.

    Parameters
    ----------
    arrangement : Arrangement
        Hidden door contents.
    initial_pick : int
        Contestant's first door.
    opened_door : int
        Decoy door opened by the host.
    stay_pick : int
        Final door under ``Strategy.STAY``.
    switch_pick : int
        Final door under ``Strategy.SWITCH``.
    stay_outcome : Outcome
        Result of staying.
    switch_outcome : Outcome
        Result of switching.

    Notes
    -----
    Both strategies share the same arrangement, initial pick and opened door,
    so the stay/switch decision is the only difference between the outcomes.
    """

    arrangement: Arrangement
    initial_pick: int
    opened_door: int
    stay_pick: int
    switch_pick: int
    stay_outcome: Outcome
    switch_outcome: Outcome

    def outcome(self, strategy: Strategy | str) -> Outcome:
        """Return the outcome recorded for ``strategy``.

        Raises
        ------
        ValueError
            If ``strategy`` does not name a known strategy.
        """

        if coerce_strategy(strategy) is Strategy.STAY:
            return self.stay_outcome
        return self.switch_outcome

    def observations(self, trial_index: int = 0) -> tuple[StrategyObservation, ...]:
        """Return the ``stay`` and ``switch`` rows for this trial."""

        return (
            StrategyObservation(trial_index=trial_index, strategy=Strategy.STAY, outcome=self.stay_outcome),
            StrategyObservation(trial_index=trial_index, strategy=Strategy.SWITCH, outcome=self.switch_outcome),
        )


@dataclass(frozen=True, slots=True)
class BatchResult:
    """Trials played by :func:`play_n_games`.

    Parameters
    ----------
    trials : tuple[TrialRecord, ...]
        Trial records in play order.
    """

    trials: tuple[TrialRecord, ...]

    def __post_init__(self) -> None:
        if len(self.trials) == 0:
            raise ValueError("trials must contain at least one trial")

    @property
    def n_trials(self) -> int:
        """Number of trials in the batch."""

        return len(self.trials)

    def observations(self) -> tuple[StrategyObservation, ...]:
        """Return all ``2 * n_trials`` (strategy, outcome) rows in trial order."""

        rows: list[StrategyObservation] = []
        for trial_index, trial in enumerate(self.trials):
            rows.extend(trial.observations(trial_index))
        return tuple(rows)

    @property
    def summary(self) -> OutcomeSummary:
        """Row-normalized win/lose proportions per strategy."""

        return summarize_observations(self.observations())


def run_trial(
    arrangement: Arrangement,
    initial_pick: int,
    *,
    rng: np.random.Generator,
) -> TrialRecord:
    """Play one trial from a known arrangement and initial pick.

    Parameters
    ----------
    arrangement : Arrangement
        Hidden door contents.
    initial_pick : int
        Contestant's first door.
    rng : numpy.random.Generator
        Random generator for the host's choice between two decoys.

    Returns
    -------
    TrialRecord
        Shared setup plus the outcome of each strategy.

    Raises
    ------
    ValueError
        If ``initial_pick`` is not a valid door position.
    """

    opened_door = open_decoy_door(arrangement, initial_pick, rng=rng)
    stay_pick = change_door(Strategy.STAY, initial_pick, opened_door)
    switch_pick = change_door(Strategy.SWITCH, initial_pick, opened_door)

    return TrialRecord(
        arrangement=arrangement,
        initial_pick=int(initial_pick),
        opened_door=opened_door,
        stay_pick=stay_pick,
        switch_pick=switch_pick,
        stay_outcome=determine_winner(stay_pick, arrangement),
        switch_outcome=determine_winner(switch_pick, arrangement),
    )


def play_game(*, rng: np.random.Generator) -> TrialRecord:
    """Create a fresh game, draw the initial pick and play one trial."""

    arrangement = create_game(rng=rng)
    initial_pick = select_door(rng=rng)
    return run_trial(arrangement, initial_pick, rng=rng)


def play_n_games(n_games: int = DEFAULT_N_TRIALS, *, rng: np.random.Generator) -> BatchResult:
    """Play ``n_games`` independent trials.

    Parameters
    ----------
    n_games : int, optional
        Number of trials. Defaults to ``100``.
    rng : numpy.random.Generator
        Random generator consumed sequentially by every trial.

    Returns
    -------
    BatchResult
        Exactly ``n_games`` trial records; see :attr:`BatchResult.summary`
        for per-strategy proportions.

    Raises
    ------
    ValueError
        If ``n_games`` is not a positive integer.
    """

    count = validate_positive_int(n_games, field_name="n_games")
    trials = tuple(play_game(rng=rng) for _ in range(count))
    return BatchResult(trials=trials)


def run_simulation(config: SimulationConfig) -> BatchResult:
    """Run a batch from :class:`SimulationConfig`.

    Parameters
    ----------
    config : SimulationConfig
        Trial count and optional seed.

    Returns
    -------
    BatchResult
        Simulated batch. Equal seeds give identical batches.
    """

    rng = np.random.default_rng(config.seed)
    return play_n_games(config.n_trials, rng=rng)


__all__ = [
    "BatchResult",
    "TrialRecord",
    "play_game",
    "play_n_games",
    "run_simulation",
    "run_trial",
]
