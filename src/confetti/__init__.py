"""confetti - hydrate dataclasses from environment variables and .env files.

This package provides:
- loader: apply_env / apply_files / from_env / from_files and layered sources
- fields: field discovery, ``conf_field`` key mapping and the ``Uint`` type
- coerce: string-to-field conversion
- sources: ``key=value`` file parsing and ``.env`` reading
- exceptions: structured errors (shape, source read, coercion)
- logger: logging interface and stdlib adapter
- config: library settings
"""

__version__ = "1.0.0"

from confetti.coerce import coerce_value
from confetti.config import Settings, get_settings, reset_settings
from confetti.exceptions import (
    CoercionError,
    ConfettiError,
    ShapeError,
    SourceReadError,
)
from confetti.fields import (
    FieldDescriptor,
    FieldKind,
    Uint,
    conf_field,
    describe,
)
from confetti.loader import (
    EnvSource,
    FileSource,
    apply_env,
    apply_files,
    apply_key_value,
    apply_sources,
    from_env,
    from_files,
    set_logger,
)
from confetti.logger import Logger, StdLogger, get_logger
from confetti.sources import parse_line, parse_lines, read_dotenv, read_pairs

__all__ = [
    "__version__",
    # Loader
    "apply_env",
    "apply_files",
    "apply_key_value",
    "apply_sources",
    "from_env",
    "from_files",
    "EnvSource",
    "FileSource",
    "set_logger",
    # Fields
    "FieldDescriptor",
    "FieldKind",
    "Uint",
    "conf_field",
    "describe",
    "coerce_value",
    # Sources
    "parse_line",
    "parse_lines",
    "read_pairs",
    "read_dotenv",
    # Config
    "Settings",
    "get_settings",
    "reset_settings",
    # Exceptions
    "ConfettiError",
    "ShapeError",
    "SourceReadError",
    "CoercionError",
    # Logger
    "Logger",
    "StdLogger",
    "get_logger",
]
