"""
confetti logger module

The loader logs through the ``Logger`` interface. By default that is a
``StdLogger`` on the stdlib ``"confetti"`` logger, which stays silent and
propagates to the host application's handlers like any library logger.

Usage:
    import logging
    from confetti.logger import get_logger

    logging.getLogger("confetti").setLevel(logging.DEBUG)
    logger = get_logger()
    logger.debug("Applied config file", path=".env")

Environment Variables:
    {PREFIX}_LOG_LEVEL: Level for the logger (DEBUG, INFO, WARNING, ...)
    {PREFIX}_LOG_FILE: Write records to this file instead of stderr

    Where {PREFIX} is derived from the logger name (e.g., CONFETTI for "confetti").
    When either is set, one handler is attached to the named logger; when
    neither is set, the logger's configuration is left untouched.
"""

import logging
import os
import sys
from typing import Optional

from .interface import Logger
from .std_logger import StdLogger

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"

# Set on handlers attached by configure_from_env so they are added only once.
_HANDLER_MARK = "_confetti_env_handler"


def _get_env_prefix(name: str) -> str:
    """Convert logger name to environment variable prefix.

    Examples:
        "confetti" -> "CONFETTI"
        "my-app.config" -> "MY_APP_CONFIG"
    """
    return name.upper().replace("-", "_").replace(".", "_")


def configure_from_env(name: str = "confetti") -> Optional[logging.Handler]:
    """Attach a handler to the named logger if {PREFIX}_LOG_* asks for one.

    Returns:
        The env-configured handler, or None when no variable is set
    """
    env_prefix = _get_env_prefix(name)
    level_name = os.environ.get(f"{env_prefix}_LOG_LEVEL", "").strip().upper()
    log_file = os.environ.get(f"{env_prefix}_LOG_FILE", "").strip()
    if not level_name and not log_file:
        return None

    logger = logging.getLogger(name)
    if level_name:
        level = logging.getLevelName(level_name)
        logger.setLevel(level if isinstance(level, int) else logging.WARNING)

    for existing in logger.handlers:
        if getattr(existing, _HANDLER_MARK, False):
            return existing

    file_error: Optional[OSError] = None
    handler: Optional[logging.Handler] = None
    if log_file:
        try:
            handler = logging.FileHandler(log_file)
        except OSError as e:
            file_error = e
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_MARK, True)
    logger.addHandler(handler)

    if file_error is not None:
        logger.warning("Failed to open log file %s, logging to stderr: %s", log_file, file_error)
    return handler


def get_logger(name: str = "confetti") -> Logger:
    """Get the default loader logger for ``name``."""
    configure_from_env(name)
    return StdLogger(name)


__all__ = [
    "Logger",
    "StdLogger",
    "configure_from_env",
    "get_logger",
]
