from __future__ import annotations

import logging
import os
from typing import Optional

# Defaults
_DEFAULT_LOG_LEVEL = "WARNING"
_DEFAULT_RECURSION_LIMIT: Optional[int] = None


def int_from_env(var: str, default: Optional[int]) -> Optional[int]:
    raw = os.environ.get(var)
    if not raw:
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        return default
    return value if value > 0 else default


def get_log_level() -> int:
    raw = os.environ.get("ETA_LOG_LEVEL", _DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    # getLevelName maps unknown names to the string "Level <name>"
    return level if isinstance(level, int) else logging.getLevelName(_DEFAULT_LOG_LEVEL)


def get_recursion_limit() -> Optional[int]:
    """Interpreter recursion limit for running programs; None keeps Python's default."""
    return int_from_env("ETA_RECURSION_LIMIT", _DEFAULT_RECURSION_LIMIT)
