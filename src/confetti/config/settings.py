"""Library settings for confetti.

The settings dataclass is hydrated by confetti itself, from environment
variables scoped by a prefix (default: CONFETTI).

Environment variables:
    {prefix}_STRICT: Reject unsupported field types and negative unsigned
        values instead of skipping/wrapping them (default: false)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from confetti.exceptions import CoercionError
from confetti.fields import conf_field, describe


@dataclass
class Settings:
    """Library-wide defaults

    Attributes:
        strict: Default for the ``strict`` argument of the apply functions
    """

    strict: bool = conf_field("STRICT", default=False)

    @classmethod
    def from_env(
        cls,
        prefix: str = "CONFETTI",
        env: Optional[Mapping[str, str]] = None,
    ) -> "Settings":
        """Load settings from ``{prefix}_*`` environment variables

        Args:
            prefix: Environment variable prefix
            env: Environment snapshot (default: ``os.environ``)

        Raises:
            CoercionError: If a variable holds an invalid value; the message
                and ``details["setting"]`` name the variable
        """
        from confetti.loader import from_env

        env = os.environ if env is None else env
        scope = f"{prefix}_"
        scoped = {
            key[len(scope):]: value
            for key, value in env.items()
            if key.startswith(scope)
        }
        try:
            return from_env(cls, env=scoped, strict=True)
        except CoercionError as err:
            variables = {d.name: f"{scope}{d.effective_key}" for d in describe(cls)}
            variable = variables.get(err.details.get("field"), f"{scope}*")
            raise err.wrap(f"invalid confetti setting {variable}", setting=variable) from err


_global_settings: Optional[Settings] = None


def get_settings(reload: bool = False) -> Settings:
    """Get or create the settings instance

    Args:
        reload: If True, reload settings from environment
    """
    global _global_settings

    if _global_settings is None or reload:
        _global_settings = Settings.from_env()

    return _global_settings


def reset_settings() -> None:
    """Reset settings (primarily for testing)"""
    global _global_settings
    _global_settings = None
