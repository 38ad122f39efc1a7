"""Difficulty shaping over ranked moves, plus opponent pattern tracking."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from .board import CENTER, CORNERS

logger = logging.getLogger("xobot.ai")

EASY_RANDOM_CHANCE = 0.7
MEDIUM_RANDOM_CHANCE = 0.2
MEDIUM_SECOND_BEST_CHANCE = 0.3
STYLE_WINDOW = 3
OPENING_MOVES = 2


class Difficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


def select_move(
    candidates: Sequence[Any],
    difficulty: Difficulty,
    rng: Any = random,
) -> Optional[int]:
    """Pick a cell from ``candidates`` (best first) according to ``difficulty``.

    ``candidates`` are objects with a ``cell`` attribute, as produced by
    :func:`xobot.ai.rank_moves`. ``rng`` needs ``random()`` and ``choice()``.
    Returns ``None`` when there is nothing to choose from.
    """
    if not candidates:
        return None

    difficulty = Difficulty(difficulty)
    best = candidates[0].cell

    if difficulty is Difficulty.HARD:
        logger.debug("hard: best move %s", best)
        return best

    roll = rng.random()
    if difficulty is Difficulty.EASY:
        if roll < EASY_RANDOM_CHANCE:
            cell = rng.choice(candidates).cell
            logger.debug("easy: roll=%.3f random move %s", roll, cell)
            return cell
        logger.debug("easy: roll=%.3f best move %s", roll, best)
        return best

    if roll < MEDIUM_RANDOM_CHANCE:
        cell = rng.choice(candidates).cell
        logger.debug("medium: roll=%.3f random move %s", roll, cell)
        return cell
    if roll < MEDIUM_RANDOM_CHANCE + MEDIUM_SECOND_BEST_CHANCE and len(candidates) > 1:
        cell = candidates[1].cell
        logger.debug("medium: roll=%.3f second best %s", roll, cell)
        return cell
    logger.debug("medium: roll=%.3f best move %s", roll, best)
    return best


def classify_style(moves: Sequence[int]) -> str:
    center = sum(1 for m in moves if m == CENTER)
    corner = sum(1 for m in moves if m in CORNERS)
    if center > corner:
        return "aggressive"
    if corner > center:
        return "defensive"
    return "balanced"


@dataclass
class PlayerProfile:
    """Running summary of the human's moves in a bot game.

    Kept for display only; move selection never reads it.
    """

    move_history: List[int] = field(default_factory=list)
    opening_moves: List[int] = field(default_factory=list)
    favorite_corners: List[int] = field(default_factory=list)
    style: str = "balanced"

    def record(self, cell: int) -> None:
        self.move_history.append(cell)
        if len(self.opening_moves) < OPENING_MOVES:
            self.opening_moves.append(cell)
        if cell in CORNERS and cell not in self.favorite_corners:
            self.favorite_corners.append(cell)
        if len(self.move_history) >= STYLE_WINDOW:
            self.style = classify_style(self.move_history[-STYLE_WINDOW:])

    def reset(self) -> None:
        self.move_history.clear()
        self.opening_moves.clear()
        self.favorite_corners.clear()
        self.style = "balanced"

    def as_dict(self) -> Dict[str, object]:
        return {
            "openingMoves": list(self.opening_moves),
            "favoriteCorners": list(self.favorite_corners),
            "style": self.style,
        }
