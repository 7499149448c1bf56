"""Environment-driven defaults for the command line.

TTT_BOARD_SIZE sets the board size used when --size is omitted.
TTT_LOG_LEVEL sets the log level used when --verbose is not given.
"""

from __future__ import annotations

import logging
import os

from .errors import InvalidSize
from .game_basics import validate_size

DEFAULT_BOARD_SIZE = 3
DEFAULT_LOG_LEVEL = "INFO"


def default_board_size() -> int:
    raw = os.getenv("TTT_BOARD_SIZE")
    if not raw:
        return DEFAULT_BOARD_SIZE
    try:
        value = int(raw.strip())
    except ValueError:
        raise InvalidSize(raw) from None
    return validate_size(value)


def default_log_level() -> int:
    name = (os.getenv("TTT_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    # getLevelName returns "Level X" for names it does not know
    return level if isinstance(level, int) else logging.INFO
