"""Shared logger configuration for the cart bot."""
from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str | None = None) -> logging.Logger:
    """Configure root logging once and return the application logger."""
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    level_value = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(level=level_value, format=LOG_FORMAT)
    # basicConfig is a no-op once handlers exist; keep the level in sync anyway
    logging.getLogger().setLevel(level_value)

    # aiogram is chatty on DEBUG
    logging.getLogger("aiogram.event").setLevel(logging.WARNING)

    return logging.getLogger("cartbot")


logger = setup_logging()

__all__ = ["logger", "setup_logging", "LOG_FORMAT"]
