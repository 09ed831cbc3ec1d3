"""Enum values.

``Enum`` is the abstract base of every definition. A definition declares its
variants through zero-argument static or class methods, a ``_variants_``
sequence, or ``.. classmethod:: name()`` lines in its docstring; ``_remap_``
gives a variant a canonical value other than its name::

    class Status(Enum):
        '''Publication status.

        .. classmethod:: archived()
        '''

        _remap_ = {"draft": "DRAFT"}

        @classmethod
        def draft(cls): ...

        @classmethod
        def published(cls): ...

    Status.draft()                  # Status('DRAFT')
    Status.from_value("Published")  # Status('published')
    Status.archived().is_archived() # True

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Self

from enumkit.diagnostics import (
    DefinitionError,
    ErrorTemplate,
    MissingValueError,
    UnknownVariantError,
)
from enumkit.dispatch import instance_accessor
from enumkit.introspection import ROOT_MARKER
from enumkit.meta import EnumMeta
from enumkit.registry import VariantRegistry, default_registry
from enumkit.resolver import Scalar, VariantTable

__all__ = ["Enum"]


def _canonical(table: VariantTable, raw: object) -> Scalar | None:
    """Map a raw value onto the table's canonical value, or None."""
    if isinstance(raw, str):
        value = table.get(raw.lower())
        if value is not None:
            return value
    elif not isinstance(raw, int) or isinstance(raw, bool):
        return None

    for value in table.values():
        if type(value) is type(raw) and value == raw:
            return value
    # "1" selects 1 and 1 selects "1"
    for value in table.values():
        if str(value) == str(raw):
            return value
    return None


class Enum(metaclass=EnumMeta):
    """Abstract base of enum definitions.

    Values are immutable, hashable, and equal only to values of the same
    definition holding the same canonical value. Strings compare by
    construction: ``Status.draft() == "draft"`` is True, and comparing with
    a string that is not a variant raises UnknownVariantError.

    The hash covers the definition and the canonical value, so a value and
    an equal raw string hash differently. Do not mix values and raw strings
    as keys of the same set or dict.
    """

    __enum_root__ = True
    __slots__ = ("_value",)

    _registry_: VariantRegistry = default_registry
    _remap_: dict[str, Scalar] = {}

    _value: Scalar

    def __init__(self, value: Scalar | None = None) -> None:
        """Construct a value of this definition.

        Args:
            value: Variant name (any case) or canonical value

        Raises:
            DefinitionError: If called on the abstract base
            MissingValueError: If value is None
            UnknownVariantError: If value matches no variant
        """
        cls = type(self)
        if ROOT_MARKER in vars(cls):
            raise DefinitionError(ErrorTemplate.abstract_definition(cls))
        if value is None:
            raise MissingValueError(ErrorTemplate.missing_value(cls))

        table = cls._variant_table()
        canonical = _canonical(table, value)
        if canonical is None:
            raise UnknownVariantError(ErrorTemplate.unknown_variant(cls, value, table.keys()))

        object.__setattr__(self, "_value", canonical)

    # ------------------------------------------------------------------
    # Construction and introspection
    # ------------------------------------------------------------------

    @classmethod
    def from_value(cls, value: Scalar | Self) -> Self:
        """Construct from a raw value; a value of this definition is returned as is."""
        if type(value) is cls:
            return value
        return cls(value)

    @classmethod
    def _variant_table(cls) -> VariantTable:
        return cls._registry_.get(cls)

    @classmethod
    def to_dict(cls) -> dict[str, Scalar]:
        """Return ``{lowercase name: canonical value}`` in declaration order."""
        return dict(cls._variant_table())

    @classmethod
    def get_keys(cls) -> list[str]:
        """Return lowercase variant names in declaration order."""
        return list(cls._variant_table().keys())

    @classmethod
    def get_values(cls) -> list[Scalar]:
        """Return canonical values in declaration order."""
        return list(cls._variant_table().values())

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def equals(self, other: Enum | str) -> bool:
        """Compare with another value, coercing strings against this definition.

        Raises:
            UnknownVariantError: If other is a string naming no variant
        """
        if isinstance(other, str):
            other = type(self).from_value(other)
        if type(other) is not type(self):
            return False
        return other._value == self._value

    def is_one_of(self, candidates: Iterable[Enum | str]) -> bool:
        """Return True if any candidate equals this value.

        Stops at the first match; later candidates are not coerced.
        """
        return any(self.equals(candidate) for candidate in candidates)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, str | Enum):
            return self.equals(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((type(self), self._value))

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    @property
    def value(self) -> Scalar:
        """Canonical value."""
        return self._value

    def to_json(self) -> Scalar:
        """Return the canonical value for embedding in a JSON document."""
        return self._value

    def __str__(self) -> str:
        return str(self._value)

    def __format__(self, format_spec: str) -> str:
        return format(str(self), format_spec)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value!r})"

    def __reduce__(self) -> tuple[type[Self], tuple[Scalar]]:
        return type(self), (self._value,)

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    # ------------------------------------------------------------------
    # Immutability and dynamic dispatch
    # ------------------------------------------------------------------

    def __setattr__(self, name: str, value: object) -> None:
        msg = f"{type(self).__name__} values are immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} values are immutable"
        raise AttributeError(msg)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return instance_accessor(self, name, type(self)._variant_table())
