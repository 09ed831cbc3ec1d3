"""Diagnostic system for enumkit errors.

Provides structured error diagnostics with codes and hints, the exception
hierarchy that carries them, and a formatter for rendering.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ArityError,
    DefinitionError,
    EnumError,
    MissingValueError,
    NoSuchMethodError,
    UnknownVariantAttributeError,
    UnknownVariantError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArityError",
    "DefinitionError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "EnumError",
    "ErrorTemplate",
    "MissingValueError",
    "NoSuchMethodError",
    "OutputFormat",
    "UnknownVariantAttributeError",
    "UnknownVariantError",
]
