"""Hypothesis strategies for enumkit property-based testing.

Usage:
    from tests.strategies import definitions, random_case, variant_names
"""

from .variants import definitions, random_case, variant_names

__all__ = [
    "definitions",
    "random_case",
    "variant_names",
]
