from __future__ import annotations

import logging
import os


DEFAULT_LOG_LEVEL = "INFO"


def log_level() -> int:
    name = os.getenv("DEAL_PAYMENTS_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)

    if not isinstance(level, int):
        raise RuntimeError(f"DEAL_PAYMENTS_LOG_LEVEL has an unknown level: {name}")

    return level
