"""Exception hierarchy with structured diagnostics.

Every exception stores an optional Diagnostic. Each concrete error also
derives from the built-in exception a caller would naturally expect, so
``except ValueError`` around a construction keeps working.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ArityError",
    "DefinitionError",
    "EnumError",
    "MissingValueError",
    "NoSuchMethodError",
    "UnknownVariantAttributeError",
    "UnknownVariantError",
]


class EnumError(Exception):
    """Base exception for all enumkit errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize EnumError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class UnknownVariantError(EnumError, ValueError):
    """Raw or dynamically named value is not in the definition's table.

    Raised by construction, by string coercion during comparison and by
    dynamic accessors on the definition.
    """


class UnknownVariantAttributeError(UnknownVariantError, AttributeError):
    """Unknown dynamic name looked up on a definition (``Status.nonexistent``).

    Derives from AttributeError so ``hasattr`` and ``getattr(definition, name,
    default)`` behave as usual.
    """


class MissingValueError(EnumError, ValueError):
    """Construction attempted without a raw value."""


class ArityError(EnumError, TypeError):
    """Static predicate (``Definition.is_foo(raw)``) called without its argument."""


class NoSuchMethodError(EnumError, AttributeError):
    """Dynamic name on an instance is neither a predicate nor a variant.

    Derives from AttributeError so ``getattr(value, name, default)`` and
    ``hasattr`` behave as usual.
    """


class DefinitionError(EnumError, TypeError):
    """Enum definition is malformed.

    Examples:
    - Two members whose names differ only by case
    - Docstring declaration shadowed by a concrete member (strict mode)
    - Instantiating the abstract ``Enum`` base
    """
