"""Core labels, data containers and validation helpers for the game pipeline."""

from .config_validation import validate_allowed_keys, validate_optional_seed, validate_positive_int
from .data import DOORS, Arrangement, StrategyObservation, validate_door
from .labels import (
    OUTCOME_COLUMN_ORDER,
    STRATEGY_ORDER,
    DoorContent,
    Outcome,
    Strategy,
    coerce_outcome,
    coerce_strategy,
)

__all__ = [
    "Arrangement",
    "DOORS",
    "DoorContent",
    "OUTCOME_COLUMN_ORDER",
    "Outcome",
    "STRATEGY_ORDER",
    "Strategy",
    "StrategyObservation",
    "coerce_outcome",
    "coerce_strategy",
    "validate_allowed_keys",
    "validate_door",
    "validate_optional_seed",
    "validate_positive_int",
]
