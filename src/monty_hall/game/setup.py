"""Game setup and the contestant's initial pick.

Both operations draw from an explicitly supplied NumPy generator so callers
control seeding.
"""

from __future__ import annotations

import numpy as np

from monty_hall.core.data import DOORS, Arrangement
from monty_hall.core.labels import DoorContent

_GAME_CONTENTS: tuple[DoorContent, ...] = (
    DoorContent.DECOY,
    DoorContent.DECOY,
    DoorContent.PRIZE,
)


def create_game(*, rng: np.random.Generator) -> Arrangement:
    """Create a fresh arrangement with one prize and two decoys.

    Parameters
    ----------
    rng : numpy.random.Generator
        Random generator used to permute the door contents.

    Returns
    -------
    Arrangement
        Uniformly permuted arrangement; each door holds the prize with
        probability 1/3.
    """

    order = rng.permutation(len(_GAME_CONTENTS))
    return Arrangement(contents=tuple(_GAME_CONTENTS[int(index)] for index in order))


def select_door(*, rng: np.random.Generator) -> int:
    """Return the contestant's initial pick, uniform over ``DOORS``.

    Parameters
    ----------
    rng : numpy.random.Generator
        Random generator used for the draw.

    Returns
    -------
    int
        Door position ``1``, ``2`` or ``3``.
    """

    return int(rng.choice(DOORS))


__all__ = ["create_game", "select_door"]
