"""Board primitives and win/draw evaluation for 3x3 tic-tac-toe."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

Player = str  # "X" or "O"
Board = List[str]
Line = Tuple[int, int, int]

EMPTY = " "
PLAYERS: Tuple[Player, Player] = ("X", "O")
CENTER = 4
CORNERS: Tuple[int, ...] = (0, 2, 6, 8)

WINNING_LINES: Tuple[Line, ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)


@dataclass(frozen=True)
class GameOutcome:
    winner: Optional[Player] = None
    pattern: Optional[Line] = None
    drawn: bool = False

    @property
    def in_progress(self) -> bool:
        return self.winner is None and not self.drawn

    @property
    def status(self) -> str:
        if self.winner:
            return "won"
        if self.drawn:
            return "draw"
        return "playing"


def new_board() -> Board:
    return [EMPTY] * 9


def other_player(player: Player) -> Player:
    return "O" if player == "X" else "X"


def empty_cells(board: Board) -> List[int]:
    return [i for i, c in enumerate(board) if c == EMPTY]


def place(board: Board, cell: int, player: Player) -> Board:
    """Return a copy of ``board`` with ``player`` written into ``cell``."""
    if board[cell] != EMPTY:
        raise ValueError("Cell already occupied")
    child = board.copy()
    child[cell] = player
    return child


def evaluate_outcome(board: Board) -> GameOutcome:
    """Derive winner/draw/in-progress from the cells alone.

    Lines are scanned in table order, so the first completed line is the
    reported pattern. Every caller (human moves, search, bot overrides) goes
    through here.
    """
    for line in WINNING_LINES:
        a, b, c = line
        v = board[a]
        if v != EMPTY and v == board[b] == board[c]:
            return GameOutcome(winner=v, pattern=line)
    if EMPTY not in board:
        return GameOutcome(drawn=True)
    return GameOutcome()


def score_board(board: Board) -> int:
    """Signed static score: +10 for an X line, -10 for an O line, else 0."""
    winner = evaluate_outcome(board).winner
    if winner == "X":
        return 10
    if winner == "O":
        return -10
    return 0


def count_threats(board: Board, cell: int, player: Player) -> int:
    """How strongly playing ``cell`` threatens for ``player``.

    10 if the move wins outright, otherwise the number of lines through
    ``cell`` left with two of ``player``'s marks and one empty square.
    """
    if board[cell] != EMPTY:
        return 0
    child = place(board, cell, player)
    if evaluate_outcome(child).winner == player:
        return 10
    threats = 0
    for line in WINNING_LINES:
        if cell not in line:
            continue
        trio = [child[i] for i in line]
        if trio.count(player) == 2 and trio.count(EMPTY) == 1:
            threats += 1
    return threats
