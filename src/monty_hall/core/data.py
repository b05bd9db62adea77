"""Door positions and the hidden arrangement of one game.

Doors are identified by the integers ``1``, ``2`` and ``3``. Every public
operation that accepts a door validates it with :func:`validate_door`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from monty_hall.core.labels import DoorContent, Outcome, Strategy

DOORS: tuple[int, ...] = (1, 2, 3)


def validate_door(door: Any, *, field_name: str = "door") -> int:
    """Validate one door position and return it as ``int``.

    Parameters
    ----------
    door : Any
        Candidate door position.
    field_name : str, optional
        Name used in error messages.

    Returns
    -------
    int
        Validated door position in ``DOORS``.

    Raises
    ------
    ValueError
        If ``door`` is not an integer in ``DOORS``.
    """

    if isinstance(door, bool) or not isinstance(door, (int, np.integer)):
        raise ValueError(f"{field_name} must be an integer door position, got {door!r}")
    position = int(door)
    if position not in DOORS:
        raise ValueError(f"{field_name} must be one of {DOORS}, got {position}")
    return position


@dataclass(frozen=True, slots=True)
class Arrangement:
    """Hidden assignment of contents to the three doors.

    Parameters
    ----------
    contents : tuple[DoorContent, ...]
        Door contents in door order; ``contents[0]`` is behind door ``1``.

    Raises
    ------
    ValueError
        If the arrangement does not hold exactly one prize among three doors.
    """

    contents: tuple[DoorContent, ...]

    def __post_init__(self) -> None:
        normalized = tuple(DoorContent(item) for item in self.contents)
        if len(normalized) != len(DOORS):
            raise ValueError(f"arrangement must cover {len(DOORS)} doors, got {len(normalized)}")
        n_prizes = sum(1 for item in normalized if item is DoorContent.PRIZE)
        if n_prizes != 1:
            raise ValueError(f"arrangement must contain exactly one prize, got {n_prizes}")
        object.__setattr__(self, "contents", normalized)

    def content(self, door: int) -> DoorContent:
        """Return the content behind ``door``."""

        return self.contents[validate_door(door) - 1]

    @property
    def prize_door(self) -> int:
        """Door position holding the prize."""

        return self.contents.index(DoorContent.PRIZE) + 1

    def doors_with(self, content: DoorContent) -> tuple[int, ...]:
        """Return door positions holding ``content`` in ascending order."""

        return tuple(door for door, item in zip(DOORS, self.contents) if item is content)


@dataclass(frozen=True, slots=True)
class StrategyObservation:
    """One (strategy, outcome) row of a simulated batch.

    Parameters
    ----------
    trial_index : int
        Zero-based index of the trial that produced the row.
    strategy : Strategy
        Strategy that was applied.
    outcome : Outcome
        Result of applying ``strategy`` in that trial.
    """

    trial_index: int
    strategy: Strategy
    outcome: Outcome


__all__ = ["Arrangement", "DOORS", "StrategyObservation", "validate_door"]
