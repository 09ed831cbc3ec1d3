"""Tests for diagnostic codes, templates, formatting and the exception hierarchy."""

from __future__ import annotations

import json

import pytest

from enumkit import (
    ArityError,
    DefinitionError,
    EnumError,
    MissingValueError,
    NoSuchMethodError,
    UnknownVariantAttributeError,
    UnknownVariantError,
)
from enumkit.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
)
from tests.helpers.definitions import MyEnum


class TestExceptionHierarchy:
    """Every error is an EnumError and the matching built-in."""

    @pytest.mark.parametrize(
        ("error_type", "builtin"),
        [
            (UnknownVariantError, ValueError),
            (UnknownVariantAttributeError, ValueError),
            (UnknownVariantAttributeError, AttributeError),
            (MissingValueError, ValueError),
            (ArityError, TypeError),
            (NoSuchMethodError, AttributeError),
            (DefinitionError, TypeError),
        ],
    )
    def test_bases(self, error_type: type[EnumError], builtin: type[Exception]) -> None:
        assert issubclass(error_type, EnumError)
        assert issubclass(error_type, builtin)

    def test_plain_message(self) -> None:
        error = EnumError("plain")

        assert error.diagnostic is None
        assert str(error) == "plain"

    def test_diagnostic_message_is_formatted(self) -> None:
        diagnostic = ErrorTemplate.missing_value(MyEnum)
        error = MissingValueError(diagnostic)

        assert error.diagnostic is diagnostic
        assert str(error).startswith("error[MISSING_VALUE]: Value of enum MyEnum can't be None")

    def test_raised_errors_carry_diagnostics(self) -> None:
        with pytest.raises(UnknownVariantError) as exc_info:
            MyEnum("purple")

        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code is DiagnosticCode.UNKNOWN_VARIANT
        assert diagnostic.variant == "purple"
        assert diagnostic.definition == "tests.helpers.definitions.MyEnum"
        assert diagnostic.hint == "Use one of: foo, bar, hello, world"


class TestErrorTemplate:
    """Message templates."""

    def test_unknown_variant_lists_are_truncated(self) -> None:
        names = [f"v{i}" for i in range(15)]

        diagnostic = ErrorTemplate.unknown_variant(MyEnum, "x", names)

        assert diagnostic.hint is not None
        assert diagnostic.hint.endswith("v9, ... (15 total)")

    def test_unknown_variant_without_variants(self) -> None:
        diagnostic = ErrorTemplate.unknown_variant(MyEnum, "x", [])

        assert diagnostic.hint == "Use one of: (no variants declared)"

    def test_predicate_arity(self) -> None:
        diagnostic = ErrorTemplate.predicate_arity(MyEnum, "isFoo")

        assert diagnostic.code is DiagnosticCode.PREDICATE_ARITY
        assert diagnostic.message == (
            "Calling MyEnum.isFoo() in static context requires one argument"
        )

    def test_codes_are_unique(self) -> None:
        values = [code.value for code in DiagnosticCode]

        assert len(values) == len(set(values))


class TestDiagnosticFormatter:
    """Output formats."""

    @pytest.fixture
    def diagnostic(self) -> Diagnostic:
        return ErrorTemplate.unknown_variant(MyEnum, "purple", ["foo", "bar"])

    def test_rust_format(self, diagnostic: Diagnostic) -> None:
        output = DiagnosticFormatter().format(diagnostic)

        assert output.splitlines() == [
            "error[UNKNOWN_VARIANT]: Value 'purple' not available in enum MyEnum",
            "  --> tests.helpers.definitions.MyEnum",
            "  = variant: purple",
            "  = help: Use one of: foo, bar",
        ]

    def test_simple_format(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(diagnostic) == (
            "UNKNOWN_VARIANT: Value 'purple' not available in enum MyEnum"
        )

    def test_hand_built_diagnostic(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.UNKNOWN_VARIANT,
            message="Value 'purple' not available in enum Color",
            hint="Use one of: red, green",
        )

        assert DiagnosticFormatter().format(diagnostic).splitlines() == [
            "error[UNKNOWN_VARIANT]: Value 'purple' not available in enum Color",
            "  = help: Use one of: red, green",
        ]

    def test_json_format(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)

        data = json.loads(formatter.format(diagnostic))

        assert data == {
            "code": "UNKNOWN_VARIANT",
            "code_value": 1001,
            "message": "Value 'purple' not available in enum MyEnum",
            "severity": "error",
            "definition": "tests.helpers.definitions.MyEnum",
            "variant": "purple",
            "hint": "Use one of: foo, bar",
        }

    def test_color(self, diagnostic: Diagnostic) -> None:
        output = DiagnosticFormatter(color=True).format(diagnostic)

        assert output.startswith("\033[1;31merror\033[0m[UNKNOWN_VARIANT]")

    def test_warning_severity(self) -> None:
        diagnostic = Diagnostic(
            code=DiagnosticCode.SHADOWED_VARIANT, message="shadowed", severity="warning"
        )

        assert DiagnosticFormatter().format(diagnostic) == "warning[SHADOWED_VARIANT]: shadowed"

    def test_sanitize_truncates(self) -> None:
        diagnostic = Diagnostic(code=DiagnosticCode.UNKNOWN_VARIANT, message="x" * 50)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )

        assert formatter.format(diagnostic) == "UNKNOWN_VARIANT: " + "x" * 10 + "..."

    def test_format_all(self, diagnostic: Diagnostic) -> None:
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        output = formatter.format_all([diagnostic, diagnostic])

        assert output.count("UNKNOWN_VARIANT") == 2
        assert "\n\n" in output

    def test_str_is_message(self, diagnostic: Diagnostic) -> None:
        assert str(diagnostic) == diagnostic.message
