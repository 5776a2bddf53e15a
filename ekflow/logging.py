"""Logging for ekflow.

Every module logs through ``get_logger(__name__)``, so all records end up
under the ``ekflow`` logger. That logger gets one stderr handler, which keeps
stdout free for rendered flow reports. Flow computations only log at DEBUG,
so the library is silent at the default INFO level.

The initial level comes from the ``EKFLOW_LOG_LEVEL`` environment variable
(a level name such as ``DEBUG``) and falls back to INFO.
"""

import logging
import os
import sys
from typing import Optional

ROOT_LOGGER_NAME = "ekflow"
LOG_LEVEL_ENV = "EKFLOW_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s: %(message)s"

_configured = False


def level_from_env(default: int = logging.INFO) -> int:
    """Return the level named by ``EKFLOW_LOG_LEVEL``, or ``default``."""
    name = os.getenv(LOG_LEVEL_ENV)
    if not name:
        return default
    level = getattr(logging, name.strip().upper(), None)
    return level if isinstance(level, int) else default


def setup_root_logger(
    level: Optional[int] = None,
    format_string: str = DEFAULT_FORMAT,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach the single ekflow handler; later calls do nothing.

    Args:
        level: Logging level. Taken from ``EKFLOW_LOG_LEVEL`` when omitted.
        format_string: Record format for the handler.
        handler: Handler to install instead of a stderr ``StreamHandler``.
    """
    global _configured
    if _configured:
        return

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level_from_env() if level is None else level)
    root.handlers.clear()

    handler = handler or logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(format_string))
    root.addHandler(handler)
    # Propagate so pytest's caplog sees ekflow records
    root.propagate = True

    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger whose level is decided by the ``ekflow`` logger."""
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def set_global_log_level(level: int) -> None:
    """Set the level of the ``ekflow`` logger and its handlers."""
    setup_root_logger()
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    for handler in root.handlers:
        handler.setLevel(level)


def enable_debug_logging() -> None:
    """Show every augmenting path and flow summary."""
    set_global_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    set_global_log_level(logging.INFO)


def reset_logging() -> None:
    """Drop the ekflow handler so the next call configures it again."""
    global _configured
    _configured = False
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.handlers.clear()
    root.setLevel(logging.NOTSET)


setup_root_logger()
