"""Exceptions raised by confetti.

All exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Additional context (record, field, value, path)

Usage:
    from confetti.exceptions import (
        ConfettiError,
        ShapeError,
        SourceReadError,
        CoercionError,
    )
"""

from confetti.exceptions.base import (
    CoercionError,
    ConfettiError,
    ShapeError,
    SourceReadError,
)

__all__ = [
    "ConfettiError",
    "ShapeError",
    "SourceReadError",
    "CoercionError",
]
