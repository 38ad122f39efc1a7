import logging
from typing import Optional

from . import config

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel((level or config.LOG_LEVEL).upper())

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)

    # Per-request access lines are noise next to game events.
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
