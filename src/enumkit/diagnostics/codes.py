"""Diagnostic codes and data structures.

Defines error codes and the structured diagnostic carried by every enumkit
exception.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Value errors (construction from raw input)
        2000-2999: Dispatch errors (dynamic accessors and predicates)
        3000-3999: Definition errors (malformed enum definitions)
    """

    # Value errors (1000-1999)
    UNKNOWN_VARIANT = 1001
    MISSING_VALUE = 1002

    # Dispatch errors (2000-2999)
    PREDICATE_ARITY = 2001
    NO_SUCH_METHOD = 2002

    # Definition errors (3000-3999)
    DUPLICATE_VARIANT = 3001
    SHADOWED_VARIANT = 3002
    ABSTRACT_DEFINITION = 3003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        definition: Qualified name of the enum definition involved
        variant: Raw value or dynamic name that triggered the error
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    definition: str | None = None
    variant: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like a compiler error.

        Example output:
            error[UNKNOWN_VARIANT]: Value 'purple' not available in enum Color
              --> Color
              = variant: purple
              = help: Use one of: red, green

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
