"""Tests for difficulty shaping and the player profile."""

import random

import pytest

from xobot.ai import MoveCandidate
from xobot.difficulty import Difficulty, PlayerProfile, classify_style, select_move

CANDIDATES = [
    MoveCandidate(cell=4, score=0),
    MoveCandidate(cell=0, score=0),
    MoveCandidate(cell=1, score=-8),
    MoveCandidate(cell=7, score=-8),
]


class StubRng:
    """Returns fixed rolls and always picks the last candidate when asked."""

    def __init__(self, roll):
        self.roll = roll

    def random(self):
        return self.roll

    def choice(self, seq):
        return seq[-1]


def test_empty_candidates_mean_no_move():
    for level in Difficulty:
        assert select_move([], level) is None


def test_hard_always_takes_top_candidate():
    for roll in (0.0, 0.3, 0.99):
        assert select_move(CANDIDATES, Difficulty.HARD, StubRng(roll)) == 4


@pytest.mark.parametrize(
    "roll, expected",
    [(0.0, 7), (0.69, 7), (0.7, 4), (0.95, 4)],
)
def test_easy_thresholds(roll, expected):
    assert select_move(CANDIDATES, Difficulty.EASY, StubRng(roll)) == expected


@pytest.mark.parametrize(
    "roll, expected",
    [(0.1, 7), (0.2, 0), (0.49, 0), (0.5, 4), (0.9, 4)],
)
def test_medium_thresholds(roll, expected):
    assert select_move(CANDIDATES, Difficulty.MEDIUM, StubRng(roll)) == expected


def test_medium_second_best_falls_back_to_top_with_one_candidate():
    only = [MoveCandidate(cell=5, score=9)]
    assert select_move(only, Difficulty.MEDIUM, StubRng(0.3)) == 5


def test_accepts_plain_string_level():
    assert select_move(CANDIDATES, "hard") == 4
    with pytest.raises(ValueError):
        select_move(CANDIDATES, "impossible")


def test_easy_distribution_over_many_trials():
    rng = random.Random(1234)
    trials = 20000
    top = sum(
        1 for _ in range(trials) if select_move(CANDIDATES, Difficulty.EASY, rng) == 4
    )
    # 30% deliberate best plus a quarter of the 70% uniform picks.
    expected = 0.3 + 0.7 / len(CANDIDATES)
    assert abs(top / trials - expected) < 0.02


def test_classify_style():
    assert classify_style([4, 4, 1]) == "aggressive"
    assert classify_style([0, 2, 4]) == "defensive"
    assert classify_style([4, 0, 1]) == "balanced"
    assert classify_style([1, 3, 5]) == "balanced"


def test_profile_tracks_openings_corners_and_style():
    profile = PlayerProfile()
    profile.record(0)
    profile.record(4)
    assert profile.opening_moves == [0, 4]
    assert profile.style == "balanced"

    profile.record(0)
    assert profile.opening_moves == [0, 4]
    assert profile.favorite_corners == [0]
    assert profile.style == "defensive"

    profile.record(4)
    profile.record(4)
    assert profile.style == "aggressive"

    profile.record(8)
    profile.record(6)
    assert profile.favorite_corners == [0, 8, 6]
    assert profile.style == "defensive"


def test_profile_reset():
    profile = PlayerProfile()
    for cell in (0, 2, 6):
        profile.record(cell)
    profile.reset()
    assert profile.as_dict() == {
        "openingMoves": [],
        "favoriteCorners": [],
        "style": "balanced",
    }
    assert profile.move_history == []
