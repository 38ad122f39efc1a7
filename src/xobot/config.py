"""Runtime settings read from the environment."""

from __future__ import annotations

import os

from .difficulty import Difficulty


def _env(name: str, default: str) -> str:
    value = os.environ.get(name)
    if value is not None and value.strip() != "":
        return value.strip()
    return default


def _env_float(name: str, default: float) -> float:
    try:
        return float(_env(name, str(default)))
    except ValueError:
        return default


def _env_int(name: str, default: int) -> int:
    try:
        return int(_env(name, str(default)))
    except ValueError:
        return default


def _env_difficulty(name: str, default: Difficulty) -> Difficulty:
    try:
        return Difficulty(_env(name, default.value).lower())
    except ValueError:
        return default


HOST = _env("XOBOT_HOST", "0.0.0.0")
PORT = _env_int("XOBOT_PORT", 8000)
LOG_LEVEL = _env("XOBOT_LOG_LEVEL", "INFO").upper()
# Pause before the bot's already-chosen move is shown.
BOT_THINK_DELAY = max(0.0, _env_float("XOBOT_THINK_DELAY", 0.5))
DEFAULT_DIFFICULTY = _env_difficulty("XOBOT_DEFAULT_DIFFICULTY", Difficulty.MEDIUM)
