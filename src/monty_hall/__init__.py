"""Top-level package for ``monty_hall``.

Each simulated trial runs a fixed pipeline:

1. :func:`~monty_hall.game.create_game` hides one prize behind three doors,
2. :func:`~monty_hall.game.select_door` draws the contestant's first pick,
3. :func:`~monty_hall.game.open_decoy_door` has the host reveal a decoy,
4. :func:`~monty_hall.game.change_door` resolves the ``stay`` and ``switch``
   final picks,
5. :func:`~monty_hall.game.determine_winner` scores each final pick.

:func:`~monty_hall.runtime.play_n_games` repeats the pipeline and
summarizes win/lose proportions per strategy.

Notes
-----
All randomness comes from an explicitly passed ``numpy.random.Generator``.
"""

from .analysis import OutcomeSummary, StrategySummary, format_game_table, format_summary_table
from .core import Arrangement, DoorContent, Outcome, Strategy, StrategyObservation
from .game import change_door, create_game, determine_winner, open_decoy_door, select_door
from .runtime import (
    BatchResult,
    SimulationConfig,
    TrialRecord,
    play_game,
    play_n_games,
    run_simulation,
    run_trial,
)

__all__ = [
    "Arrangement",
    "BatchResult",
    "DoorContent",
    "Outcome",
    "OutcomeSummary",
    "SimulationConfig",
    "Strategy",
    "StrategyObservation",
    "StrategySummary",
    "TrialRecord",
    "change_door",
    "create_game",
    "determine_winner",
    "format_game_table",
    "format_summary_table",
    "open_decoy_door",
    "play_game",
    "play_n_games",
    "run_simulation",
    "run_trial",
    "select_door",
]
