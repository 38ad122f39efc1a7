"""Full-depth alpha-beta minimax and the bot's move orchestration."""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass, field
from typing import Any, List, Optional

from .board import (
    Board,
    Player,
    empty_cells,
    evaluate_outcome,
    other_player,
    place,
    score_board,
)
from .difficulty import Difficulty, select_move

logger = logging.getLogger("xobot.ai")

WIN_SCORE = 10


@dataclass(frozen=True)
class MoveCandidate:
    cell: int
    score: int


# ---- core search ----


def best_move_value(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    bot: Player = "O",
) -> int:
    """Minimax value of ``board`` from ``bot``'s point of view.

    Wins are worth ``10 - depth`` and losses ``-10 + depth`` so that quicker
    wins and slower losses rank higher.
    """
    score = score_board(board)
    if bot == "O":
        score = -score
    if score == WIN_SCORE:
        return WIN_SCORE - depth
    if score == -WIN_SCORE:
        return -WIN_SCORE + depth

    moves = empty_cells(board)
    if not moves:
        return 0

    opp = other_player(bot)
    if maximizing:
        value = -math.inf
        for cell in moves:
            child = place(board, cell, bot)
            value = max(value, best_move_value(child, depth + 1, alpha, beta, False, bot))
            alpha = max(alpha, value)
            if beta <= alpha:
                break
    else:
        value = math.inf
        for cell in moves:
            child = place(board, cell, opp)
            value = min(value, best_move_value(child, depth + 1, alpha, beta, True, bot))
            beta = min(beta, value)
            if beta <= alpha:
                break
    return int(value)


def rank_moves(board: Board, bot: Player = "O") -> List[MoveCandidate]:
    """Score every empty cell for ``bot``, best first (stable on ties)."""
    candidates = []
    for cell in empty_cells(board):
        child = place(board, cell, bot)
        value = best_move_value(child, 0, -math.inf, math.inf, False, bot)
        candidates.append(MoveCandidate(cell=cell, score=value))
    candidates.sort(key=lambda c: c.score, reverse=True)
    return candidates


# ---- orchestration ----


def find_winning_move(board: Board, player: Player) -> Optional[int]:
    for cell in empty_cells(board):
        if evaluate_outcome(place(board, cell, player)).winner == player:
            return cell
    return None


def choose_bot_move(
    board: Board,
    difficulty: Difficulty,
    bot: Player = "O",
    rng: Any = random,
) -> Optional[int]:
    """Tactical overrides first, then search shaped by ``difficulty``.

    An immediate win or a forced block is returned at every difficulty;
    only the remaining, strategic choices are randomized.
    """
    if not empty_cells(board):
        return None

    winning = find_winning_move(board, bot)
    if winning is not None:
        logger.debug("bot %s takes winning move %s", bot, winning)
        return winning

    blocking = find_winning_move(board, other_player(bot))
    if blocking is not None:
        logger.debug("bot %s blocks at %s", bot, blocking)
        return blocking

    ranked = rank_moves(board, bot)
    logger.debug(
        "bot %s ranked moves: %s",
        bot,
        ", ".join(f"{c.cell}:{c.score}" for c in ranked),
    )
    cell = select_move(ranked, difficulty, rng)
    logger.debug("bot %s (%s) selected %s", bot, Difficulty(difficulty).value, cell)
    return cell


@dataclass
class BotPlayer:
    """The computer opponent attached to a single game."""

    player: Player = "O"
    difficulty: Difficulty = Difficulty.MEDIUM
    rng: Any = field(default=random, repr=False)

    def choose(self, board: Board) -> Optional[int]:
        return choose_bot_move(board, self.difficulty, self.player, self.rng)
