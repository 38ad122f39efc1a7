"""xobot package exposing game logic, the bot, and the web application."""

from .ai import BotPlayer, choose_bot_move, rank_moves
from .board import evaluate_outcome
from .difficulty import Difficulty
from .game import GameMode, TicTacToeGame, apply_human_move
from .ui import app

__all__ = [
    "BotPlayer",
    "Difficulty",
    "GameMode",
    "TicTacToeGame",
    "app",
    "apply_human_move",
    "choose_bot_move",
    "evaluate_outcome",
    "rank_moves",
]
