"""Shared constants for enumkit.

Centralizes the names and patterns that the introspection, resolver and
dispatch layers agree on. Placing them here avoids circular imports.

Python 3.13+. Zero external dependencies.
"""

import re

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Definition attributes
    "REMAP_ATTRIBUTE",
    "VARIANTS_ATTRIBUTE",
    "REGISTRY_ATTRIBUTE",
    "ACCESSOR_MARKER",
    # Dispatch
    "PREDICATE_PREFIX",
    # Documentation scanning
    "DOC_DECLARATION_PATTERN",
]

# ============================================================================
# DEFINITION ATTRIBUTES
# ============================================================================
#
# Sunder names follow the convention of the standard library enum module
# (_ignore_, _order_). They never collide with variant names because
# introspection skips every member whose name starts with an underscore.

REMAP_ATTRIBUTE = "_remap_"
"""Optional mapping of declared variant name to non-default canonical value."""

VARIANTS_ATTRIBUTE = "_variants_"
"""Optional explicit sequence of variant names."""

REGISTRY_ATTRIBUTE = "_registry_"
"""Registry bound to a definition via the ``registry=`` class keyword."""

ACCESSOR_MARKER = "__enum_variant__"
"""Attribute set on generated variant accessors (value: declared name)."""

# ============================================================================
# DISPATCH
# ============================================================================

PREDICATE_PREFIX = "is"
"""Dynamic names starting with this prefix (and longer than it) are predicates."""

# ============================================================================
# DOCUMENTATION SCANNING
# ============================================================================

DOC_DECLARATION_PATTERN = re.compile(
    r"^\s*\.\.\s+(?:classmethod|staticmethod)::\s+(\w+)\(\)\s*$",
    re.MULTILINE,
)
"""Sphinx directive declaring a parameterless constructor, one per line.

Example:
    .. classmethod:: draft()
"""
