"""FastAPI service that lets a browser client play tic-tac-toe against a bot."""

from __future__ import annotations

import logging
import threading
import time
import uuid
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from fastapi import BackgroundTasks, FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from . import config
from .ai import rank_moves
from .board import count_threats, other_player
from .difficulty import Difficulty
from .game import GameMode, PendingBotMove, TicTacToeGame, TurnState

logger = logging.getLogger("xobot.ui")


@dataclass
class GameSession:
    """Container for an active game and the lock guarding it."""

    game: TicTacToeGame
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False)


SESSIONS: Dict[str, GameSession] = {}
app = FastAPI(title="xobot", description="Tic-tac-toe against a minimax bot")

BOT_THINK_DELAY: float = config.BOT_THINK_DELAY


class NewGameRequest(BaseModel):
    """Request payload for starting a new game."""

    mode: GameMode = GameMode.PVE
    difficulty: Difficulty = Field(
        default=config.DEFAULT_DIFFICULTY,
        description="Bot strength; ignored in pvp games",
    )


class MoveRequest(BaseModel):
    """Request payload for submitting a move on an existing game."""

    model_config = ConfigDict(populate_by_name=True)

    cell_index: int = Field(alias="cellIndex", ge=0, le=8)


class DifficultyRequest(BaseModel):
    difficulty: Difficulty


def _create_session(mode: GameMode, difficulty: Difficulty) -> Tuple[str, GameSession]:
    """Create a new game session and register it for later access."""

    session = GameSession(game=TicTacToeGame(mode=mode, difficulty=difficulty))
    session_id = uuid.uuid4().hex
    SESSIONS[session_id] = session
    logger.info("session %s: new %s game (%s)", session_id, mode.value, difficulty.value)
    return session_id, session


def _get_session(game_id: str) -> GameSession:
    try:
        return SESSIONS[game_id]
    except KeyError as exc:
        raise HTTPException(status_code=404, detail="Game not found") from exc


def _run_bot_turn(game_id: str, pending: PendingBotMove) -> None:
    session = SESSIONS.get(game_id)
    if not session:
        return

    # The move is already decided; the pause only delays showing it.
    time.sleep(max(0.0, BOT_THINK_DELAY))

    with session.lock:
        if session.game.apply_bot_move(pending) is None:
            logger.debug("session %s: bot move %s dropped", game_id, pending.cell)


def _serialize_session(game_id: str, session: GameSession) -> Dict[str, object]:
    with session.lock:
        game = session.game
        outcome = game.outcome
        state: Dict[str, object] = {
            "id": game_id,
            "mode": game.mode.value,
            "difficulty": game.difficulty.value,
            "board": [c if c in ("X", "O") else "" for c in game.board],
            "currentPlayer": game.current_player,
            "status": outcome.status,
            "turnState": game.turn_state.value,
            "winner": outcome.winner,
            "winningPattern": list(outcome.pattern) if outcome.pattern else None,
            "scores": game.scores.as_dict(),
            "botThinking": game.thinking,
            "moveLog": list(game.move_log),
            "profile": game.profile.as_dict() if game.mode is GameMode.PVE else None,
        }
        if game.move_log:
            state["lastMove"] = game.move_log[-1]
        return state


def _rejection_reason(game: TicTacToeGame, cell_index: int) -> str:
    if not game.outcome.in_progress:
        return "Game already finished"
    if game.thinking or game.turn_state is TurnState.AWAITING_BOT:
        return "Bot is completing its move"
    if game.board[cell_index] in ("X", "O"):
        return "Cell already occupied"
    return "Move is not allowed on this turn"


def _apply_player_move(
    game_id: str,
    session: GameSession,
    cell_index: int,
    background_tasks: Optional[BackgroundTasks] = None,
) -> None:
    pending: Optional[PendingBotMove] = None
    with session.lock:
        game = session.game
        if game.apply_human_move(cell_index) is None:
            raise HTTPException(
                status_code=400, detail=_rejection_reason(game, cell_index)
            )
        if game.turn_state is TurnState.AWAITING_BOT:
            pending = game.begin_bot_turn()

    if pending is not None:
        if background_tasks is not None:
            background_tasks.add_task(_run_bot_turn, game_id, pending)
        else:
            _run_bot_turn(game_id, pending)


@app.post("/api/game")
def create_game(request: NewGameRequest) -> Dict[str, object]:
    game_id, session = _create_session(request.mode, request.difficulty)
    return _serialize_session(game_id, session)


@app.get("/api/game/{game_id}")
def get_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/move")
def make_move(
    game_id: str, request: MoveRequest, background_tasks: BackgroundTasks
) -> Dict[str, object]:
    session = _get_session(game_id)
    _apply_player_move(game_id, session, request.cell_index, background_tasks)
    return _serialize_session(game_id, session)


@app.put("/api/game/{game_id}/difficulty")
def change_difficulty(game_id: str, request: DifficultyRequest) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        session.game.set_difficulty(request.difficulty)
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/reset")
def reset_game(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        session.game.reset_game()
    return _serialize_session(game_id, session)


@app.post("/api/game/{game_id}/reset-scores")
def reset_scores(game_id: str) -> Dict[str, object]:
    session = _get_session(game_id)
    with session.lock:
        session.game.reset_scores()
    return _serialize_session(game_id, session)


@app.get("/api/game/{game_id}/analysis")
def analyse_game(game_id: str) -> Dict[str, object]:
    """Rank the open cells for whoever is to move."""

    session = _get_session(game_id)
    with session.lock:
        game = session.game
        board = list(game.board)
        player = game.current_player
        in_progress = game.outcome.in_progress

    moves: List[Dict[str, object]] = []
    if in_progress:
        opponent = other_player(player)
        for candidate in rank_moves(board, player):
            moves.append(
                {
                    "cellIndex": candidate.cell,
                    "score": candidate.score,
                    "winningThreats": count_threats(board, candidate.cell, player),
                    "blockingThreats": count_threats(board, candidate.cell, opponent),
                }
            )
    return {"id": game_id, "player": player, "moves": moves}
