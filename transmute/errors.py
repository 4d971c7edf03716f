# =============================================================================
# transmute/errors.py - Exception Hierarchy
# =============================================================================
# All errors raised by the composition, registry and compiler layers.
# Errors carry a machine-readable code and a suggestion on how to fix them.
# =============================================================================

from __future__ import annotations

from typing import Any


class TransmuteError(Exception):
    """
    Base exception for transmute.

    Every custom exception inherits from this class and provides a
    structured payload through to_dict().
    """

    def __init__(
        self,
        message: str,
        code: str = "TRANSMUTE_ERROR",
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to a plain dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Registry Exceptions
# =============================================================================

class UnregisteredFunctionError(TransmuteError):
    """Raised when a name has no binding in a registry."""

    def __init__(self, name: str):
        super().__init__(
            message=f"No registered function for {name!r}",
            code="UNREGISTERED_FUNCTION",
            suggestion="Register the function or import a registry that provides it",
            details={"name": name},
        )
        self.name = name


# =============================================================================
# Compiler Exceptions
# =============================================================================

class InvalidFunctionNameError(TransmuteError):
    """Raised when a definition references a function that cannot be resolved."""

    def __init__(self, name: str, scope: tuple[str, ...] = ()):
        where = f" (in {' > '.join(scope)})" if scope else ""
        super().__init__(
            message=f"Invalid function name {name!r}{where}",
            code="INVALID_FUNCTION_NAME",
            suggestion="Check the spelling or import the registry that defines it",
            details={"name": name, "scope": list(scope)},
        )
        self.name = name
        self.scope = scope


class DefinitionError(TransmuteError):
    """Raised when an instruction is structurally invalid."""

    def __init__(self, message: str, **details: Any):
        super().__init__(
            message=message,
            code="INVALID_DEFINITION",
            details=details,
        )


# =============================================================================
# Pipe Exceptions
# =============================================================================

class UnboundPipeError(TransmuteError):
    """Raised when a registry operation is used on a pipe with no registry."""

    def __init__(self, pipe: str, operation: str):
        super().__init__(
            message=f"{pipe} is not bound to a registry; cannot {operation}",
            code="UNBOUND_PIPE",
            suggestion="Subclass it with a registry (class X(Pipe, registry=...)) or use Pipe.bind(registry)",
            details={"pipe": pipe, "operation": operation},
        )
        self.pipe = pipe
