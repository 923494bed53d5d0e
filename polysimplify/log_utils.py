from __future__ import annotations
import logging

from polysimplify.config import LOG_FORMAT, DEFAULT_LOG_LEVEL


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> logging.Logger:
    """Configure root logging for scripts and return the package logger."""
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
    )
    return logging.getLogger("polysimplify")
