"""
Logger interface for confetti.

The loader only emits debug records: one per assigned or skipped field,
one per applied file and one per applied source. Any object implementing
``debug`` can be handed to ``confetti.set_logger`` to receive them.
"""

from abc import ABC, abstractmethod
from typing import Any


class Logger(ABC):
    """Sink for loader debug records.

    Example:
        class PrintLogger(Logger):
            def debug(self, message: str, **kwargs: Any) -> None:
                print(f"DEBUG: {message} {kwargs}")
    """

    @abstractmethod
    def debug(self, message: str, **kwargs: Any) -> None:
        """Record a debug event.

        Args:
            message: Short event name, e.g. "Assigned field"
            **kwargs: Event context (field name, key, path); never raw values
        """
