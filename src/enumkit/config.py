"""Registry configuration.

Provides a single frozen dataclass that encapsulates how definitions are
resolved. Pass an instance to ``VariantRegistry(config=...)`` or to
``enumkit.registry.configure()`` for the process-wide default registry.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["RegistryConfig"]


@dataclass(frozen=True, slots=True)
class RegistryConfig:
    """Immutable configuration for variant resolution.

    All fields have sensible defaults; ``RegistryConfig()`` reproduces the
    lenient resolution rules.

    Attributes:
        strict: If True, a docstring declaration whose lowercase name collides
            with a concrete member spelled differently raises DefinitionError.
            If False (default), the concrete member wins and a warning is
            logged.
        scan_docstrings: If False, docstring declarations are ignored and only
            concrete members and ``_variants_`` contribute (default: True).

    Example:
        >>> from enumkit.config import RegistryConfig
        >>> from enumkit.registry import VariantRegistry
        >>> registry = VariantRegistry(RegistryConfig(strict=True))
        >>> registry.config.strict
        True
    """

    strict: bool = False
    scan_docstrings: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            TypeError: If a flag is not a bool.
        """
        for name in ("strict", "scan_docstrings"):
            if not isinstance(getattr(self, name), bool):
                msg = f"{name} must be a bool"
                raise TypeError(msg)
