"""Configuration of the confetti library itself.

Example:
    from confetti.config import get_settings

    if get_settings().strict:
        ...
"""

from confetti.config.settings import Settings, get_settings, reset_settings

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
]
