"""Logging setup for the usage parser service."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int | str = logging.INFO) -> None:
    """Configure root logging with a single stream handler.

    Args:
        level: A ``logging`` level number or name such as ``"DEBUG"``.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)
