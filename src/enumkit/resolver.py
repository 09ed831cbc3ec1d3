"""Definition resolver.

Turns the declarations collected by ``enumkit.introspection`` into the
canonical variant table of a definition: lowercase variant name mapped to
canonical value, in declaration order.

Merge rules:
    1. Concrete zero-argument members (enum ancestors base-first) are
       registered first. Two spellings of the same lowercase name are a
       definition error.
    2. ``_variants_`` entries, then docstring declarations, are added only when
       their lowercase name is not registered yet. Concrete members win;
       two declarations spelled differently are a definition error.

Python 3.13+.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TypeAlias

from enumkit.config import RegistryConfig
from enumkit.diagnostics import DefinitionError, ErrorTemplate
from enumkit.introspection import introspect

__all__ = ["Scalar", "VariantTable", "resolve"]

logger = logging.getLogger(__name__)

Scalar: TypeAlias = str | int

# Read-only view; the registry hands the same object to every caller.
VariantTable: TypeAlias = MappingProxyType[str, Scalar]


def resolve(definition: type, config: RegistryConfig | None = None) -> VariantTable:
    """Resolve the variant table of a definition.

    Args:
        definition: Enum subclass to resolve
        config: Resolution options (default: ``RegistryConfig()``)

    Returns:
        Read-only mapping of lowercase variant name to canonical value

    Raises:
        DefinitionError: If two concrete members or two declarations differ
            only by case, or (in strict mode) a declaration is shadowed by a
            differently spelled concrete member
    """
    config = config or RegistryConfig()
    source = introspect(definition)

    table: dict[str, Scalar] = {}
    spelling: dict[str, str] = {}

    for name in source.static_members:
        key = name.lower()
        registered = spelling.get(key)
        if registered is not None:
            # Same spelling means an override further down the hierarchy
            if registered != name:
                raise DefinitionError(ErrorTemplate.duplicate_variant(definition, registered, name))
            continue
        spelling[key] = name
        table[key] = source.remap.get(name, name)

    concrete = frozenset(spelling)
    declarations = source.declared
    if config.scan_docstrings:
        declarations += source.documented

    for name in declarations:
        key = name.lower()
        registered = spelling.get(key)
        if registered is not None:
            if registered == name:
                continue
            if key not in concrete:
                raise DefinitionError(ErrorTemplate.duplicate_variant(definition, registered, name))
            diagnostic = ErrorTemplate.shadowed_variant(definition, registered, name)
            if config.strict:
                raise DefinitionError(diagnostic)
            logger.warning("%s", diagnostic.message)
            continue
        spelling[key] = name
        table[key] = source.remap.get(name, name)

    logger.debug("Resolved %d variant(s) for %s", len(table), source.name)
    return MappingProxyType(table)
