"""Host behavior: open one decoy door the contestant did not pick."""

from __future__ import annotations

import numpy as np

from monty_hall.core.data import Arrangement, validate_door
from monty_hall.core.labels import DoorContent


def open_decoy_door(
    arrangement: Arrangement,
    initial_pick: int,
    *,
    rng: np.random.Generator,
) -> int:
    """Return the door the host opens after the initial pick.

    Parameters
    ----------
    arrangement : Arrangement
        Hidden door contents for the current game.
    initial_pick : int
        Contestant's first door.
    rng : numpy.random.Generator
        Random generator used when the host has two decoys to choose from.

    Returns
    -------
    int
        A decoy door different from ``initial_pick``.

    Raises
    ------
    ValueError
        If ``initial_pick`` is not a valid door position.

    Notes
    -----
    When the initial pick holds the prize, both other doors are decoys and
    one is chosen uniformly at random. Otherwise exactly one other door is a
    decoy and it is returned without consuming randomness.
    """

    pick = validate_door(initial_pick, field_name="initial_pick")
    candidates = tuple(door for door in arrangement.doors_with(DoorContent.DECOY) if door != pick)

    if arrangement.content(pick) is DoorContent.PRIZE:
        return int(rng.choice(candidates))
    return candidates[0]


__all__ = ["open_decoy_door"]
