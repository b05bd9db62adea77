"""Per-trial game operations: setup, pick, host reveal, resolution."""

from .host import open_decoy_door
from .resolution import change_door, determine_winner
from .setup import create_game, select_door

__all__ = [
    "change_door",
    "create_game",
    "determine_winner",
    "open_decoy_door",
    "select_door",
]
