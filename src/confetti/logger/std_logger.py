"""
``Logger`` implementation that forwards to the standard ``logging`` module.

Records go to ``logging.getLogger(name)`` and follow whatever handlers,
level and propagation the host application configured for it. The adapter
never changes that configuration.
"""

import logging
from typing import Any

from .interface import Logger


class StdLogger(Logger):
    """Forward loader records to a stdlib logger.

    Keyword arguments are appended to the message as ``key=value`` pairs and
    attached to the record as ``record.context``.

    Example:
        logging.getLogger("confetti").setLevel(logging.DEBUG)
        StdLogger("confetti").debug("Applied config file", path=".env", pairs=4)
    """

    def __init__(self, name: str = "confetti") -> None:
        self._logger = logging.getLogger(name)

    @property
    def name(self) -> str:
        return self._logger.name

    def debug(self, message: str, **kwargs: Any) -> None:
        if not self._logger.isEnabledFor(logging.DEBUG):
            return

        if kwargs:
            message = message + " " + " ".join(f"{k}={v}" for k, v in kwargs.items())
        self._logger.debug(message, extra={"context": dict(kwargs)})
