"""Dynamic dispatch of variant accessors and predicates.

Resolves attribute names that a definition or a value does not define
itself into callables, using the definition's cached variant table:

    Status.draft()            -> Status("draft")
    Status.is_draft("DRAFT")  -> Status("DRAFT").is_draft()
    value.is_draft()          -> value.equals("draft")
    value.published()         -> Status("published")  (fresh value)

A predicate name is ``is`` followed by at least one character; the variant
name is what follows, with one leading underscore stripped so that
``isDraft`` and ``is_draft`` are equivalent. Predicate names are tried
before variant names.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from enumkit.constants import PREDICATE_PREFIX
from enumkit.diagnostics import (
    ArityError,
    ErrorTemplate,
    NoSuchMethodError,
    UnknownVariantAttributeError,
)

if TYPE_CHECKING:
    from enumkit.resolver import VariantTable
    from enumkit.value import Enum

__all__ = ["instance_accessor", "predicate_suffix", "static_accessor"]


def predicate_suffix(name: str) -> str | None:
    """Return the variant name addressed by a predicate, or None.

    Examples:
        >>> predicate_suffix("isDraft")
        'Draft'
        >>> predicate_suffix("is_draft")
        'draft'
        >>> predicate_suffix("is") is None
        True
    """
    if len(name) <= len(PREDICATE_PREFIX) or not name.startswith(PREDICATE_PREFIX):
        return None
    return name[len(PREDICATE_PREFIX) :].removeprefix("_")


def static_accessor(definition: type[Enum], name: str, table: VariantTable) -> Callable[..., Any]:
    """Resolve a dynamic name looked up on a definition.

    Args:
        definition: Enum subclass
        name: Attribute name
        table: The definition's variant table

    Returns:
        A predicate taking one raw value, or a zero-argument constructor

    Raises:
        UnknownVariantAttributeError: If the name is neither a predicate nor a
            variant (an UnknownVariantError and an AttributeError)
    """
    if predicate_suffix(name) is not None:

        def predicate(*args: object) -> bool:
            if len(args) != 1:
                raise ArityError(ErrorTemplate.predicate_arity(definition, name))
            return getattr(definition.from_value(args[0]), name)()

        predicate.__name__ = predicate.__qualname__ = name
        return predicate

    if name.lower() in table:

        def construct() -> Enum:
            return definition(name)

        construct.__name__ = construct.__qualname__ = name
        return construct

    raise UnknownVariantAttributeError(
        ErrorTemplate.unknown_variant(definition, name, table.keys())
    )


def instance_accessor(instance: Enum, name: str, table: VariantTable) -> Callable[..., Any]:
    """Resolve a dynamic name looked up on a value.

    Args:
        instance: Enum value
        name: Attribute name
        table: The value's definition's variant table

    Returns:
        A zero-argument predicate, or a zero-argument constructor

    Raises:
        NoSuchMethodError: If the name is neither a predicate nor a variant
    """
    suffix = predicate_suffix(name)
    if suffix is not None:

        def predicate() -> bool:
            return instance.equals(suffix)

        predicate.__name__ = predicate.__qualname__ = name
        return predicate

    if name.lower() in table:
        return static_accessor(type(instance), name, table)

    raise NoSuchMethodError(ErrorTemplate.no_such_method(type(instance), name))
