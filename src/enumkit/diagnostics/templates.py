"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


def _qualname(definition: type) -> str:
    return f"{definition.__module__}.{definition.__qualname__}"


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here, never inline in exception
    constructors.
    """

    # Keep hints readable for enums with many variants
    _MAX_LISTED = 10

    @staticmethod
    def _listing(names: Iterable[str]) -> str:
        names = list(names)
        shown = ", ".join(names[: ErrorTemplate._MAX_LISTED])
        if len(names) > ErrorTemplate._MAX_LISTED:
            shown += f", ... ({len(names)} total)"
        return shown or "(no variants declared)"

    @staticmethod
    def unknown_variant(definition: type, value: object, names: Iterable[str]) -> Diagnostic:
        """Raw value or dynamic name not found in a definition's table.

        Args:
            definition: The enum definition
            value: The offending raw value or name
            names: Lowercase variant names of the definition

        Returns:
            Diagnostic for UNKNOWN_VARIANT
        """
        msg = f"Value {value!r} not available in enum {definition.__name__}"
        return Diagnostic(
            code=DiagnosticCode.UNKNOWN_VARIANT,
            message=msg,
            hint=f"Use one of: {ErrorTemplate._listing(names)}",
            definition=_qualname(definition),
            variant=str(value),
        )

    @staticmethod
    def missing_value(definition: type) -> Diagnostic:
        """Construction without a raw value.

        Args:
            definition: The enum definition

        Returns:
            Diagnostic for MISSING_VALUE
        """
        msg = f"Value of enum {definition.__name__} can't be None"
        return Diagnostic(
            code=DiagnosticCode.MISSING_VALUE,
            message=msg,
            hint=f"Pass a raw value, e.g. {definition.__name__}.from_value('...')",
            definition=_qualname(definition),
        )

    @staticmethod
    def predicate_arity(definition: type, name: str) -> Diagnostic:
        """Static predicate called without its argument.

        Args:
            definition: The enum definition
            name: The predicate name (e.g. ``is_draft``)

        Returns:
            Diagnostic for PREDICATE_ARITY
        """
        msg = f"Calling {definition.__name__}.{name}() in static context requires one argument"
        return Diagnostic(
            code=DiagnosticCode.PREDICATE_ARITY,
            message=msg,
            hint=f"Call {definition.__name__}.{name}(raw) or {definition.__name__}(raw).{name}()",
            definition=_qualname(definition),
            variant=name,
        )

    @staticmethod
    def no_such_method(definition: type, name: str) -> Diagnostic:
        """Dynamic instance name matches neither a predicate nor a variant.

        Args:
            definition: The enum definition
            name: The attribute name

        Returns:
            Diagnostic for NO_SUCH_METHOD
        """
        msg = f"Call to undefined method {definition.__name__}.{name}()"
        return Diagnostic(
            code=DiagnosticCode.NO_SUCH_METHOD,
            message=msg,
            definition=_qualname(definition),
            variant=name,
        )

    @staticmethod
    def duplicate_variant(definition: type, first: str, second: str) -> Diagnostic:
        """Two concrete members differ only by case.

        Args:
            definition: The enum definition
            first: Name registered first
            second: Colliding name

        Returns:
            Diagnostic for DUPLICATE_VARIANT
        """
        msg = (
            f"Variants '{first}' and '{second}' of enum {definition.__name__} "
            "differ only by case"
        )
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_VARIANT,
            message=msg,
            hint="Variant names are matched case-insensitively; rename one of them",
            definition=_qualname(definition),
            variant=second,
        )

    @staticmethod
    def shadowed_variant(definition: type, concrete: str, documented: str) -> Diagnostic:
        """Docstring declaration collides with a concrete member.

        Args:
            definition: The enum definition
            concrete: Concrete member name
            documented: Documented name that is shadowed

        Returns:
            Diagnostic for SHADOWED_VARIANT
        """
        msg = (
            f"Documented variant '{documented}' of enum {definition.__name__} "
            f"is shadowed by member '{concrete}'"
        )
        return Diagnostic(
            code=DiagnosticCode.SHADOWED_VARIANT,
            message=msg,
            hint=f"Spell the declaration '{concrete}' or remove it",
            definition=_qualname(definition),
            variant=documented,
        )

    @staticmethod
    def abstract_definition(definition: type) -> Diagnostic:
        """The abstract base was instantiated.

        Args:
            definition: The abstract base

        Returns:
            Diagnostic for ABSTRACT_DEFINITION
        """
        msg = f"{definition.__name__} is abstract and has no variants"
        return Diagnostic(
            code=DiagnosticCode.ABSTRACT_DEFINITION,
            message=msg,
            hint=f"Subclass {definition.__name__} and declare variants",
            definition=_qualname(definition),
        )
