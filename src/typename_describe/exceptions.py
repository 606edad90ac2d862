"""Custom exception hierarchy for typename-describe.

All exceptions raised by this package inherit from
:class:`TypeNameError`.  Raw exceptions from an injected formatter
must NEVER propagate beyond :class:`~typename_describe.core.describe_service.TypeNameService`
— they are caught and re-raised as :class:`TypeFormattingError`.

The default parse path raises nothing at all; the errors below only
appear in strict mode, at the formatter seam, or in the CLI.

Hierarchy
---------
TypeNameError
├── MalformedTypeNameError
├── TypeFormattingError
└── EnvironmentError
"""

from __future__ import annotations


class TypeNameError(Exception):
    """Base exception for all typename-describe errors.

    The CLI error boundary renders any subclass as a clean message
    (plus optional hint) instead of a stack trace.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parsing ---------------------------------------------------------------

class MalformedTypeNameError(TypeNameError):
    """Raised in strict mode when brackets in a type name do not balance."""

    def __init__(
        self,
        message: str,
        *,
        type_name: str,
        position: int | None = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.type_name: str = type_name
        """The offending input string."""
        self.position: int | None = position
        """Character offset where the problem was detected, if known."""


# --- Formatting ------------------------------------------------------------

class TypeFormattingError(TypeNameError):
    """Raised when a formatter fails to produce a type-name string."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TypeNameError):
    """Raised when an optional runtime dependency is not available."""


STRICT_MODE_HINT: str = "Drop --strict to get a best-effort split instead."
