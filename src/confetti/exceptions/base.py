"""Exception classes for confetti.

All confetti exceptions include structured error information:
- code: Machine-readable error identifier
- message: Human-readable error description
- details: Context identifying the record, field, raw value and source
"""

from typing import Any, Dict, Optional


class ConfettiError(Exception):
    """Base exception for all confetti errors.

    Attributes:
        code: Machine-readable error code (e.g., "COERCION_FAILED")
        message: Human-readable error message
        details: Optional additional context for debugging
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with structured information.

        Args:
            code: Machine-readable error code
            message: Human-readable error message
            details: Optional additional context
        """
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return formatted error string."""
        if self.details:
            return f"{self.code}: {self.message} (details: {self.details})"
        return f"{self.code}: {self.message}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON serialization.

        Returns:
            Dictionary with code, message, and details keys.
        """
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }

    def wrap(self, prefix: str, **details: Any) -> "ConfettiError":
        """Return a copy of this error with a prefixed message and extra details.

        The copy keeps the concrete class and code, so callers catching
        ``CoercionError`` still see one after each layer of context is added.

        Example:
            except CoercionError as err:
                raise err.wrap(f"applying {path!r}", path=path) from err
        """
        wrapped = self.__class__.__new__(self.__class__)
        ConfettiError.__init__(
            wrapped,
            code=self.code,
            message=f"{prefix}: {self.message}",
            details={**self.details, **details},
        )
        return wrapped


class ShapeError(ConfettiError):
    """Raised when the hydration target is not a mutable dataclass instance."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="INVALID_TARGET", message=message, details=details)


class SourceReadError(ConfettiError):
    """Raised when a config file cannot be opened or read."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="SOURCE_READ_FAILED", message=message, details=details)


class CoercionError(ConfettiError):
    """Raised when a raw string cannot be converted to a field's declared type."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(code="COERCION_FAILED", message=message, details=details)
