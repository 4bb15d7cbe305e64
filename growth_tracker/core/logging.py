"""
Logging setup.

Usage:
    from growth_tracker.core.logging import get_logger

    logger = get_logger(__name__)
    logger.info("Goal %s approved by %s", goal.id, actor.id)
"""
import logging
import sys

from growth_tracker.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

_configured = False


def configure_logging(level: str | None = None) -> None:
    """Install a single stdout handler on the package logger. Safe to call twice."""
    global _configured
    if _configured:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger("growth_tracker")
    root.setLevel((level or settings.LOG_LEVEL).upper())
    root.addHandler(handler)
    root.propagate = False
    _configured = True


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
