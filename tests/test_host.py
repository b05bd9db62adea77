"""Tests for the host revealing a decoy door."""

from __future__ import annotations

from collections import Counter
from itertools import product

import numpy as np
import pytest

from monty_hall.core import DOORS, Arrangement, DoorContent
from monty_hall.game import open_decoy_door

PRIZE = DoorContent.PRIZE
DECOY = DoorContent.DECOY


def _arrangement_with_prize_at(door: int) -> Arrangement:
    """Build the arrangement whose prize sits behind ``door``."""

    return Arrangement(contents=tuple(PRIZE if position == door else DECOY for position in DOORS))


def test_host_never_opens_pick_or_prize_door() -> None:
    """Opened door must differ from the pick and hide a decoy in all cases."""

    rng = np.random.default_rng(3)

    for prize_door, pick in product(DOORS, DOORS):
        arrangement = _arrangement_with_prize_at(prize_door)
        for _ in range(50):
            opened = open_decoy_door(arrangement, pick, rng=rng)
            assert opened in DOORS
            assert opened != pick
            assert arrangement.content(opened) is DECOY


def test_host_opens_single_remaining_decoy_deterministically() -> None:
    """When the pick is a decoy, the other decoy is the only option."""

    arrangement = Arrangement(contents=(DECOY, DECOY, PRIZE))

    opened = {open_decoy_door(arrangement, 1, rng=np.random.default_rng(seed)) for seed in range(25)}

    assert opened == {2}


def test_host_deterministic_branch_does_not_consume_randomness() -> None:
    """A decoy pick should leave the generator state untouched."""

    arrangement = Arrangement(contents=(DECOY, PRIZE, DECOY))
    rng = np.random.default_rng(8)
    reference = np.random.default_rng(8)

    assert open_decoy_door(arrangement, 3, rng=rng) == 1
    assert rng.random() == reference.random()


def test_host_picks_either_decoy_when_pick_is_prize() -> None:
    """With the prize picked, each other door is opened about half the time."""

    arrangement = Arrangement(contents=(PRIZE, DECOY, DECOY))
    rng = np.random.default_rng(21)
    n_games = 10_000

    counts = Counter(open_decoy_door(arrangement, 1, rng=rng) for _ in range(n_games))

    assert set(counts) == {2, 3}
    assert abs(counts[2] / n_games - 0.5) < 0.03


@pytest.mark.parametrize("pick", [0, 4, -2, 2.5, "2"])
def test_host_rejects_invalid_initial_pick(pick) -> None:
    """Invalid initial picks should raise instead of returning a door."""

    arrangement = Arrangement(contents=(PRIZE, DECOY, DECOY))

    with pytest.raises(ValueError, match="initial_pick"):
        open_decoy_door(arrangement, pick, rng=np.random.default_rng(0))
