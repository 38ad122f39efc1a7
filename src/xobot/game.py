"""Game state for one tic-tac-toe session: board, turns, tallies, bot turn."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from .ai import choose_bot_move
from .board import (
    EMPTY,
    Board,
    GameOutcome,
    Player,
    evaluate_outcome,
    new_board,
    other_player,
)
from .difficulty import Difficulty, PlayerProfile

logger = logging.getLogger("xobot.game")

HUMAN: Player = "X"
BOT: Player = "O"


class GameMode(str, Enum):
    PVP = "pvp"
    PVE = "pve"


class TurnState(str, Enum):
    AWAITING_HUMAN = "awaiting-human"
    AWAITING_BOT = "awaiting-bot"
    WON = "won"
    DRAW = "draw"


@dataclass
class Scores:
    x: int = 0
    o: int = 0
    draws: int = 0

    def record(self, outcome: GameOutcome) -> None:
        if outcome.winner == "X":
            self.x += 1
        elif outcome.winner == "O":
            self.o += 1
        elif outcome.drawn:
            self.draws += 1

    def as_dict(self) -> Dict[str, int]:
        return {"X": self.x, "O": self.o, "draws": self.draws}


@dataclass(frozen=True)
class MoveResult:
    board: Board
    outcome: GameOutcome
    cell: int
    player: Player


@dataclass(frozen=True, eq=False)
class PendingBotMove:
    """A bot move computed up front and waiting out the thinking delay."""

    cell: int
    player: Player = BOT


def apply_human_move(
    board: Board, cell: int, player: Player
) -> Optional[Tuple[Board, GameOutcome]]:
    """Pure move application: ``None`` if the cell is taken or the game is over."""
    if not 0 <= cell < len(board) or board[cell] != EMPTY:
        return None
    if not evaluate_outcome(board).in_progress:
        return None
    new = board.copy()
    new[cell] = player
    return new, evaluate_outcome(new)


@dataclass
class TicTacToeGame:
    mode: GameMode = GameMode.PVE
    difficulty: Difficulty = Difficulty.MEDIUM
    board: Board = field(default_factory=new_board)
    current_player: Player = HUMAN
    scores: Scores = field(default_factory=Scores)
    profile: PlayerProfile = field(default_factory=PlayerProfile)
    move_log: List[Dict[str, object]] = field(default_factory=list)
    thinking: bool = False
    pending: Optional[PendingBotMove] = field(default=None, repr=False)
    rng: Any = field(default=random, repr=False)

    def __post_init__(self) -> None:
        self.mode = GameMode(self.mode)
        self.difficulty = Difficulty(self.difficulty)

    # ---- derived state ----

    @property
    def outcome(self) -> GameOutcome:
        return evaluate_outcome(self.board)

    @property
    def turn_state(self) -> TurnState:
        outcome = self.outcome
        if outcome.winner:
            return TurnState.WON
        if outcome.drawn:
            return TurnState.DRAW
        if self.mode is GameMode.PVE and self.current_player == BOT:
            return TurnState.AWAITING_BOT
        return TurnState.AWAITING_HUMAN

    # ---- transitions ----

    def apply_human_move(self, cell: int) -> Optional[MoveResult]:
        if self.thinking or self.turn_state is not TurnState.AWAITING_HUMAN:
            return None
        player = self.current_player
        applied = apply_human_move(self.board, cell, player)
        if applied is None:
            return None
        if self.mode is GameMode.PVE:
            self.profile.record(cell)
        return self._commit(cell, player, applied[0], applied[1])

    def begin_bot_turn(self) -> Optional[PendingBotMove]:
        """Compute the bot's reply and hold it until :meth:`apply_bot_move`."""
        if self.thinking or self.turn_state is not TurnState.AWAITING_BOT:
            return None
        cell = choose_bot_move(self.board, self.difficulty, BOT, self.rng)
        if cell is None:
            return None
        self.pending = PendingBotMove(cell=cell)
        self.thinking = True
        logger.debug("bot (%s) will play %s", self.difficulty.value, cell)
        return self.pending

    def apply_bot_move(self, pending: PendingBotMove) -> Optional[MoveResult]:
        if pending is not self.pending:
            logger.debug("discarding stale bot move %s", pending.cell)
            return None
        self.pending = None
        self.thinking = False
        applied = apply_human_move(self.board, pending.cell, pending.player)
        if applied is None:
            return None
        return self._commit(pending.cell, pending.player, applied[0], applied[1])

    def play_bot_turn(self) -> Optional[MoveResult]:
        pending = self.begin_bot_turn()
        if pending is None:
            return None
        return self.apply_bot_move(pending)

    def set_difficulty(self, difficulty: Difficulty) -> None:
        self.difficulty = Difficulty(difficulty)
        logger.info("difficulty set to %s", self.difficulty.value)

    def reset_game(self) -> None:
        self.board = new_board()
        self.current_player = HUMAN
        self.profile.reset()
        self.move_log.clear()
        self.thinking = False
        self.pending = None
        logger.info("new %s game (difficulty %s)", self.mode.value, self.difficulty.value)

    def reset_scores(self) -> None:
        self.scores = Scores()

    # ---- helpers ----

    def _commit(
        self, cell: int, player: Player, board: Board, outcome: GameOutcome
    ) -> MoveResult:
        self.board = board
        self.move_log.append({"player": player, "cellIndex": cell})
        if outcome.in_progress:
            self.current_player = other_player(player)
        else:
            self.scores.record(outcome)
            if outcome.winner:
                logger.info("%s wins on %s", outcome.winner, list(outcome.pattern))
            else:
                logger.info("game drawn")
        return MoveResult(board=board, outcome=outcome, cell=cell, player=player)
