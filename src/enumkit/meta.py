"""Metaclass for enum definitions.

At class creation, every public zero-argument static or class method of the
class body is replaced by a classmethod that constructs the corresponding
value, so ``Status.draft()`` returns ``Status("draft")`` and keeps working
on subclasses. Names the class does not define are routed through
``enumkit.dispatch``.

Python 3.13+.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from enumkit.constants import ACCESSOR_MARKER, REGISTRY_ATTRIBUTE
from enumkit.diagnostics import MissingValueError, UnknownVariantError
from enumkit.dispatch import static_accessor
from enumkit.introspection import ROOT_MARKER, static_member_names

if TYPE_CHECKING:
    from enumkit.registry import VariantRegistry
    from enumkit.value import Enum

__all__ = ["EnumMeta"]


def _variant_accessor(name: str, member: classmethod | staticmethod) -> classmethod:
    def accessor(cls: type[Enum]) -> Enum:
        return cls(name)

    accessor.__name__ = name
    accessor.__doc__ = member.__func__.__doc__
    setattr(accessor, ACCESSOR_MARKER, name)
    return classmethod(accessor)


class EnumMeta(type):
    """Metaclass of ``enumkit.Enum``.

    Accepts a ``registry`` class keyword binding the definition (and its
    subclasses) to a specific ``VariantRegistry``::

        class Status(Enum, registry=my_registry): ...
    """

    def __new__(
        mcs,
        name: str,
        bases: tuple[type, ...],
        namespace: dict[str, Any],
        *,
        registry: VariantRegistry | None = None,
        **kwargs: Any,
    ) -> EnumMeta:
        namespace = dict(namespace)
        if ROOT_MARKER not in namespace:
            for member_name in static_member_names(namespace):
                namespace[member_name] = _variant_accessor(member_name, namespace[member_name])
        if registry is not None:
            namespace[REGISTRY_ATTRIBUTE] = registry
        return super().__new__(mcs, name, bases, namespace, **kwargs)

    def __getattr__(cls, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return static_accessor(cls, name, cls._variant_table())

    def __iter__(cls) -> Iterator[Enum]:
        return (cls(key) for key in cls._variant_table())

    def __len__(cls) -> int:
        return len(cls._variant_table())

    def __bool__(cls) -> bool:
        # Definitions are truthy even without variants
        return True

    def __contains__(cls, value: object) -> bool:
        if type(value) is cls:
            return True
        try:
            cls.from_value(value)
        except (MissingValueError, UnknownVariantError):
            return False
        return True

    def __repr__(cls) -> str:
        return f"<enum {cls.__qualname__!r}>"
