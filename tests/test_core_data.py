"""Tests for door validation, labels and the arrangement container."""

from __future__ import annotations

import numpy as np
import pytest

from monty_hall.core import (
    DOORS,
    Arrangement,
    DoorContent,
    Outcome,
    Strategy,
    coerce_outcome,
    coerce_strategy,
    validate_door,
)

PRIZE = DoorContent.PRIZE
DECOY = DoorContent.DECOY


def test_validate_door_accepts_python_and_numpy_integers() -> None:
    """Door validation should accept every position as int or NumPy int."""

    for door in DOORS:
        assert validate_door(door) == door
        assert validate_door(np.int64(door)) == door


@pytest.mark.parametrize("door", [0, 4, -1, 1.0, "1", True, None])
def test_validate_door_rejects_invalid_positions(door) -> None:
    """Out-of-range or non-integer doors should fail fast."""

    with pytest.raises(ValueError, match="initial_pick"):
        validate_door(door, field_name="initial_pick")


def test_arrangement_exposes_contents_by_door() -> None:
    """Door ``1`` maps to the first entry of ``contents``."""

    arrangement = Arrangement(contents=(DECOY, PRIZE, DECOY))

    assert arrangement.content(1) is DECOY
    assert arrangement.content(2) is PRIZE
    assert arrangement.prize_door == 2
    assert arrangement.doors_with(DECOY) == (1, 3)


def test_arrangement_normalizes_string_labels() -> None:
    """String labels should be coerced into enum members."""

    arrangement = Arrangement(contents=("DECOY", "DECOY", "PRIZE"))

    assert arrangement.contents == (DECOY, DECOY, PRIZE)
    assert arrangement.prize_door == 3


@pytest.mark.parametrize(
    ("contents", "message"),
    [
        ((DECOY, DECOY, DECOY), "exactly one prize"),
        ((PRIZE, PRIZE, DECOY), "exactly one prize"),
        ((PRIZE, DECOY), "must cover 3 doors"),
        ((PRIZE, DECOY, DECOY, DECOY), "must cover 3 doors"),
    ],
)
def test_arrangement_rejects_invalid_contents(contents, message) -> None:
    """Arrangements must hold one prize and two decoys."""

    with pytest.raises(ValueError, match=message):
        Arrangement(contents=contents)


def test_arrangement_content_rejects_invalid_door() -> None:
    """Looking up a door outside 1..3 should raise."""

    arrangement = Arrangement(contents=(PRIZE, DECOY, DECOY))

    with pytest.raises(ValueError, match="door must be one of"):
        arrangement.content(0)


def test_coerce_strategy_accepts_enum_and_strings() -> None:
    """Strategy coercion should accept enum members and their values."""

    assert coerce_strategy(Strategy.STAY) is Strategy.STAY
    assert coerce_strategy("switch") is Strategy.SWITCH
    assert coerce_strategy("stay") is Strategy.STAY


def test_coerce_strategy_rejects_unknown_values() -> None:
    """Unknown strategy names should raise with the allowed values."""

    with pytest.raises(ValueError, match="unknown strategy 'swap'"):
        coerce_strategy("swap")


@pytest.mark.parametrize("value", [" Stay ", "STAY", "Switch", "", None])
def test_coerce_strategy_requires_exact_values(value) -> None:
    """Only the exact enum values should resolve; no case or space folding."""

    with pytest.raises(ValueError, match="unknown strategy"):
        coerce_strategy(value)


def test_coerce_outcome_accepts_enum_and_exact_strings() -> None:
    """Outcome coercion should accept enum members and their exact values."""

    assert coerce_outcome(Outcome.WIN) is Outcome.WIN
    assert coerce_outcome("LOSE") is Outcome.LOSE


@pytest.mark.parametrize("value", ["win", "DRAW", "stay"])
def test_coerce_outcome_rejects_unknown_values(value) -> None:
    """Anything other than ``"WIN"``/``"LOSE"`` should raise."""

    with pytest.raises(ValueError, match="unknown outcome"):
        coerce_outcome(value)
