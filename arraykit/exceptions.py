# =============================================================================
# arraykit/exceptions.py - Exception Types
# =============================================================================
# Handlers degrade to sentinel values rather than raising. The exceptions
# below cover the few cases that have no sensible sentinel: registry misuse,
# unknown handler names, and reducing an empty sequence without a seed.
# =============================================================================

from typing import Any


class ArrayKitError(Exception):
    """
    Base exception for arraykit.

    Attributes:
        code: Error code for categorization
        message: Human-readable error message
        suggestion: Actionable suggestion for fixing the error
        details: Additional context for debugging
    """

    def __init__(
        self,
        message: str,
        code: str = "ARRAYKIT_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.code = code
        self.message = message
        self.suggestion = suggestion
        self.details = details or {}

    def __str__(self) -> str:
        result = f"[{self.code}] {self.message}"
        if self.suggestion:
            result += f"\n  Suggestion: {self.suggestion}"
        return result

    def to_dict(self) -> dict[str, Any]:
        """Convert error to a plain dictionary."""
        return {
            "code": self.code,
            "message": self.message,
            "suggestion": self.suggestion,
            "details": self.details,
        }


# =============================================================================
# Registry Exceptions
# =============================================================================

class UnknownHandlerError(ArrayKitError, LookupError):
    """Raised when a handler name is not registered."""

    def __init__(self, name: str):
        super().__init__(
            message=f"Unknown handler: {name}",
            code="UNKNOWN_HANDLER",
            suggestion="Use list_handlers() to see the registered names",
            details={"name": name},
        )


class HandlerAlreadyRegisteredError(ArrayKitError, ValueError):
    """Raised when two handlers claim the same name."""

    def __init__(self, name: str):
        super().__init__(
            message=f"Handler '{name}' is already registered",
            code="HANDLER_ALREADY_REGISTERED",
            suggestion="Pick a different name or unregister the existing handler first",
            details={"name": name},
        )


# =============================================================================
# Handler Exceptions
# =============================================================================

class EmptyReductionError(ArrayKitError, TypeError):
    """Raised when reducing an empty sequence without an initial value."""

    def __init__(self, from_right: bool = False):
        super().__init__(
            message="Reduce of empty sequence with no initial value",
            code="EMPTY_REDUCTION",
            suggestion="Pass an initial value to reduce empty sequences",
            details={"from_right": from_right},
        )
