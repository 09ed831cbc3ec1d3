"""Definition introspection.

Collects the raw material of an enum definition: the zero-argument static and
class methods it declares, its explicit ``_variants_`` list, the constructor
declarations written in its docstring, and its ``_remap_`` table. Everything
here is a pure read of class structure; turning the result into a variant
table is the resolver's job.

Python 3.13+.
"""

from __future__ import annotations

import inspect
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from typing import Any

from enumkit.constants import (
    ACCESSOR_MARKER,
    DOC_DECLARATION_PATTERN,
    REMAP_ATTRIBUTE,
    VARIANTS_ATTRIBUTE,
)

__all__ = [
    "ROOT_MARKER",
    "DefinitionSource",
    "documented_member_names",
    "enum_ancestors",
    "introspect",
    "static_member_names",
]

ROOT_MARKER = "__enum_root__"
"""Set in the namespace of the abstract base; its members are never variants."""


@dataclass(frozen=True, slots=True)
class DefinitionSource:
    """Everything a definition declares, in declaration order."""

    name: str
    """Qualified name of the definition (for logging and diagnostics)."""

    static_members: tuple[str, ...]
    """Zero-argument static/class members, base-first across enum ancestors."""

    declared: tuple[str, ...] = ()
    """Names listed in ``_variants_``."""

    documented: tuple[str, ...] = ()
    """Names declared in the docstring."""

    remap: Mapping[str, str | int] = field(default_factory=dict)
    """Declared name -> canonical value overrides."""


def _takes_no_arguments(func: Any, *, bound: bool) -> bool:
    try:
        params = list(inspect.signature(func).parameters.values())
    except (TypeError, ValueError):
        return False
    if bound:
        params = params[1:]
    return not any(p.default is inspect.Parameter.empty for p in params)


def _is_variant_member(member: object) -> bool:
    match member:
        case classmethod():
            if getattr(member.__func__, ACCESSOR_MARKER, None) is not None:
                return True
            return _takes_no_arguments(member.__func__, bound=True)
        case staticmethod():
            return _takes_no_arguments(member.__func__, bound=False)
        case _:
            return False


def static_member_names(namespace: Mapping[str, object]) -> tuple[str, ...]:
    """Return public zero-argument static/class members of a class namespace.

    A staticmethod qualifies when every parameter has a default; a
    classmethod when every parameter after ``cls`` has one. Names starting
    with an underscore never qualify.

    Args:
        namespace: Class body namespace or ``vars(cls)``

    Returns:
        Member names in declaration order
    """
    return tuple(
        name
        for name, member in namespace.items()
        if not name.startswith("_") and _is_variant_member(member)
    )


def documented_member_names(doc: str | None) -> tuple[str, ...]:
    """Return constructor names declared in a docstring.

    Recognizes one Sphinx directive per line::

        .. classmethod:: draft()
        .. staticmethod:: published()
    """
    if not doc:
        return ()
    return tuple(DOC_DECLARATION_PATTERN.findall(doc))


def enum_ancestors(definition: type) -> Iterator[type]:
    """Yield the enum classes of a definition's MRO, base-first.

    The abstract root and non-enum mixins are skipped.
    """
    meta = type(definition)
    for klass in reversed(definition.__mro__):
        if isinstance(klass, meta) and not vars(klass).get(ROOT_MARKER, False):
            yield klass


def introspect(definition: type) -> DefinitionSource:
    """Collect the declarations of an enum definition.

    Args:
        definition: Enum subclass to inspect

    Returns:
        DefinitionSource with members, declarations and remap
    """
    static_members = tuple(
        name for klass in enum_ancestors(definition) for name in static_member_names(vars(klass))
    )
    declared = getattr(definition, VARIANTS_ATTRIBUTE, None) or ()
    if isinstance(declared, str):
        declared = (declared,)
    remap = dict(getattr(definition, REMAP_ATTRIBUTE, None) or {})

    return DefinitionSource(
        name=f"{definition.__module__}.{definition.__qualname__}",
        static_members=static_members,
        declared=tuple(declared),
        documented=documented_member_names(definition.__doc__),
        remap=remap,
    )
