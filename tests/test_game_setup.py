"""Tests for game creation and the contestant's initial pick."""

from __future__ import annotations

from collections import Counter

import numpy as np

from monty_hall.core import DOORS, DoorContent
from monty_hall.game import create_game, select_door


def test_create_game_always_hides_exactly_one_prize() -> None:
    """Every generated arrangement should hold one prize and two decoys."""

    rng = np.random.default_rng(0)

    for _ in range(500):
        arrangement = create_game(rng=rng)
        assert len(arrangement.contents) == 3
        assert arrangement.contents.count(DoorContent.PRIZE) == 1
        assert arrangement.contents.count(DoorContent.DECOY) == 2


def test_create_game_prize_position_is_uniform() -> None:
    """Each door should hold the prize about one third of the time."""

    rng = np.random.default_rng(11)
    n_games = 30_000

    counts = Counter(create_game(rng=rng).prize_door for _ in range(n_games))

    assert set(counts) == set(DOORS)
    for door in DOORS:
        assert abs(counts[door] / n_games - 1 / 3) < 0.02


def test_select_door_is_uniform_over_doors() -> None:
    """Initial picks should cover all doors with equal frequency."""

    rng = np.random.default_rng(5)
    n_picks = 30_000

    picks = [select_door(rng=rng) for _ in range(n_picks)]
    counts = Counter(picks)

    assert all(isinstance(pick, int) for pick in picks[:10])
    assert set(counts) == set(DOORS)
    for door in DOORS:
        assert abs(counts[door] / n_picks - 1 / 3) < 0.02


def test_setup_is_reproducible_with_equal_seeds() -> None:
    """Equal seeds should produce identical games and picks."""

    first = np.random.default_rng(42)
    second = np.random.default_rng(42)

    for _ in range(20):
        assert create_game(rng=first) == create_game(rng=second)
        assert select_door(rng=first) == select_door(rng=second)
