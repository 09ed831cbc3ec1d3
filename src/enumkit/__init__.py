"""enumkit - enumerated value objects derived from class declarations.

A definition is a subclass of ``Enum``; its variants come from the
zero-argument static and class methods it declares, an explicit
``_variants_`` list, and ``.. classmethod:: name()`` lines in its docstring.
Variant tables are resolved once per definition and cached for the lifetime
of the process.

Public API:
    Enum - Abstract base of enum definitions
    VariantRegistry - Cache of resolved variant tables
    RegistryConfig - Resolution options
    configure - Configure the default registry before first use
    json_default, EnumJSONEncoder - JSON integration

Exceptions:
    EnumError - Base exception class
    UnknownVariantError - Raw value or name matches no variant
    UnknownVariantAttributeError - Unknown dynamic name on a definition
    MissingValueError - Construction without a value
    ArityError - Static predicate called without its argument
    NoSuchMethodError - Unknown dynamic name on a value
    DefinitionError - Malformed definition

Submodules:
    enumkit.introspection - Declaration discovery
    enumkit.resolver - Variant table resolution
    enumkit.dispatch - Dynamic accessors and predicates
    enumkit.diagnostics - Diagnostic codes, templates and formatter
"""

from .config import RegistryConfig
from .diagnostics import (
    ArityError,
    DefinitionError,
    EnumError,
    MissingValueError,
    NoSuchMethodError,
    UnknownVariantAttributeError,
    UnknownVariantError,
)
from .registry import VariantRegistry, configure, get_registry
from .serialization import EnumJSONEncoder, json_default
from .value import Enum

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("enumkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArityError",
    "DefinitionError",
    "Enum",
    "EnumError",
    "EnumJSONEncoder",
    "MissingValueError",
    "NoSuchMethodError",
    "RegistryConfig",
    "UnknownVariantAttributeError",
    "UnknownVariantError",
    "VariantRegistry",
    "__version__",
    "configure",
    "get_registry",
    "json_default",
]
