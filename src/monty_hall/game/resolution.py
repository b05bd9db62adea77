"""Strategy resolution and outcome scoring.

Both functions are deterministic; they only validate their inputs and apply
the game rules.
"""

from __future__ import annotations

from monty_hall.core.data import DOORS, Arrangement, validate_door
from monty_hall.core.labels import DoorContent, Outcome, Strategy, coerce_strategy


def change_door(strategy: Strategy | str, initial_pick: int, opened_door: int) -> int:
    """Return the final pick for one strategy.

    Parameters
    ----------
    strategy : Strategy | str
        ``Strategy.STAY`` keeps ``initial_pick``; ``Strategy.SWITCH`` moves to
        the door that is neither picked nor opened.
    initial_pick : int
        Contestant's first door.
    opened_door : int
        Door opened by the host.

    Returns
    -------
    int
        Final door position.

    Raises
    ------
    ValueError
        If either door is invalid, the two doors coincide, or the strategy is
        unknown.
    """

    resolved = coerce_strategy(strategy)
    pick = validate_door(initial_pick, field_name="initial_pick")
    opened = validate_door(opened_door, field_name="opened_door")
    if pick == opened:
        raise ValueError(f"opened_door must differ from initial_pick, both are {pick}")

    if resolved is Strategy.STAY:
        return pick
    (remaining,) = (door for door in DOORS if door not in (pick, opened))
    return remaining


def determine_winner(final_pick: int, arrangement: Arrangement) -> Outcome:
    """Return ``Outcome.WIN`` if ``final_pick`` hides the prize.

    Raises
    ------
    ValueError
        If ``final_pick`` is not a valid door position.
    """

    door = validate_door(final_pick, field_name="final_pick")
    if arrangement.content(door) is DoorContent.PRIZE:
        return Outcome.WIN
    return Outcome.LOSE


__all__ = ["change_door", "determine_winner"]
