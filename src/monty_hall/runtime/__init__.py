"""Runtime entry points for single games and batches."""

from .config import (
    DEFAULT_N_TRIALS,
    SimulationConfig,
    load_simulation_config,
    simulation_config_from_mapping,
)
from .engine import BatchResult, TrialRecord, play_game, play_n_games, run_simulation, run_trial

__all__ = [
    "BatchResult",
    "DEFAULT_N_TRIALS",
    "SimulationConfig",
    "TrialRecord",
    "load_simulation_config",
    "play_game",
    "play_n_games",
    "run_simulation",
    "run_trial",
    "simulation_config_from_mapping",
]
