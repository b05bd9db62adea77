"""Enumerated labels used throughout the game pipeline.

Door contents, contestant strategies and trial outcomes are explicit enum
members so every branch of the pipeline can be checked exhaustively.
"""

from __future__ import annotations

from enum import Enum


class DoorContent(str, Enum):
    """Content hidden behind one door.

    Attributes
    ----------
    PRIZE
        The single winning door (the car).
    DECOY
        A losing door (a goat).
    """

    PRIZE = "PRIZE"
    DECOY = "DECOY"


class Strategy(str, Enum):
    """Contestant strategy applied after the host opens a door.

    Attributes
    ----------
    STAY
        Keep the initial pick.
    SWITCH
        Move to the remaining unopened door.
    """

    STAY = "stay"
    SWITCH = "switch"


class Outcome(str, Enum):
    """Result of one strategy in one trial."""

    WIN = "WIN"
    LOSE = "LOSE"


STRATEGY_ORDER: tuple[Strategy, ...] = (Strategy.STAY, Strategy.SWITCH)
OUTCOME_COLUMN_ORDER: tuple[Outcome, ...] = (Outcome.LOSE, Outcome.WIN)


def coerce_strategy(strategy: Strategy | str) -> Strategy:
    """Return ``strategy`` as a :class:`Strategy` member.

    Parameters
    ----------
    strategy : Strategy | str
        Enum member or its exact string value (``"stay"`` or ``"switch"``).

    Returns
    -------
    Strategy
        Matching enum member.

    Raises
    ------
    ValueError
        If ``strategy`` does not name a known strategy.
    """

    try:
        return Strategy(strategy)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in Strategy)
        raise ValueError(f"unknown strategy {strategy!r}; expected one of {allowed}") from exc


def coerce_outcome(outcome: Outcome | str) -> Outcome:
    """Return ``outcome`` as an :class:`Outcome` member.

    Raises
    ------
    ValueError
        If ``outcome`` is not exactly ``"WIN"`` or ``"LOSE"``.
    """

    try:
        return Outcome(outcome)
    except ValueError as exc:
        allowed = ", ".join(item.value for item in Outcome)
        raise ValueError(f"unknown outcome {outcome!r}; expected one of {allowed}") from exc


__all__ = [
    "DoorContent",
    "OUTCOME_COLUMN_ORDER",
    "Outcome",
    "STRATEGY_ORDER",
    "Strategy",
    "coerce_outcome",
    "coerce_strategy",
]
