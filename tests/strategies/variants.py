"""Hypothesis strategies for enum definitions and raw values.

Generated definitions declare their variants through ``_variants_`` so that
any identifier can be used as a name without writing methods.
"""

from __future__ import annotations

from hypothesis import event
from hypothesis import strategies as st

from enumkit import Enum
from enumkit.registry import VariantRegistry

__all__ = [
    "definitions",
    "random_case",
    "variant_names",
]

# Lowercase identifiers; "-" never appears, so remapped values built with it
# cannot collide with a variant name.
variant_names = st.from_regex(r"[a-z][a-z0-9_]{0,11}", fullmatch=True)


@st.composite
def random_case(draw: st.DrawFn, name: str) -> str:
    """Re-case every letter of name independently."""
    flags = draw(st.lists(st.booleans(), min_size=len(name), max_size=len(name)))
    recased = "".join(c.upper() if up else c for c, up in zip(name, flags, strict=True))
    event(f"recased={recased != name}")
    return recased


@st.composite
def definitions(draw: st.DrawFn, min_size: int = 1, max_size: int = 8) -> type[Enum]:
    """Build a fresh definition bound to its own registry.

    Some variants are remapped to ``"<name>-value"``.
    """
    names = draw(st.lists(variant_names, min_size=min_size, max_size=max_size, unique=True))
    remapped = draw(st.sets(st.sampled_from(names))) if names else set()
    event(f"remapped={len(remapped)}/{len(names)}")
    namespace = {
        "_variants_": tuple(names),
        "_remap_": {name: f"{name}-value" for name in remapped},
    }
    return type(Enum)("Generated", (Enum,), namespace, registry=VariantRegistry())
