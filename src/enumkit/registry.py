"""Process-wide variant table registry.

Memoizes ``resolve()`` per definition. The first lookup of a definition
resolves it; every later lookup returns the same table object.

Architecture:
    - WeakKeyDictionary keyed by the definition class, so a definition that
      is garbage collected (e.g. one created inside a test) takes its entry
      with it
    - No eviction and no invalidation: declarations added to a class after
      its first resolution are never seen
    - RLock serializes writers so a definition is resolved at most once;
      resolution is idempotent, so the lock only saves work

Python 3.13+.
"""

from __future__ import annotations

import logging
import weakref
from threading import RLock

from enumkit.config import RegistryConfig
from enumkit.resolver import VariantTable, resolve

__all__ = ["VariantRegistry", "configure", "default_registry", "get_registry"]

logger = logging.getLogger(__name__)


class VariantRegistry:
    """Cache of resolved variant tables, keyed by definition identity.

    Attributes:
        config: Resolution options applied to every definition
    """

    __slots__ = ("_config", "_lock", "_tables")

    def __init__(self, config: RegistryConfig | None = None) -> None:
        """Initialize an empty registry.

        Args:
            config: Resolution options (default: ``RegistryConfig()``)
        """
        self._config = config or RegistryConfig()
        self._tables: weakref.WeakKeyDictionary[type, VariantTable] = weakref.WeakKeyDictionary()
        self._lock = RLock()

    @property
    def config(self) -> RegistryConfig:
        """Resolution options of this registry."""
        return self._config

    def reconfigure(self, config: RegistryConfig) -> None:
        """Replace the resolution options of an unused registry.

        Cached tables are never recomputed, so options can only change before
        the first definition is resolved.

        Raises:
            RuntimeError: If a definition was already resolved
        """
        with self._lock:
            if self._tables:
                msg = "Registry options must be set before any enum definition is resolved"
                raise RuntimeError(msg)
            self._config = config

    def get(self, definition: type) -> VariantTable:
        """Return the variant table of a definition, resolving it once.

        Args:
            definition: Enum subclass

        Returns:
            Cached read-only variant table

        Raises:
            DefinitionError: If the definition is malformed (not cached)
        """
        table = self._tables.get(definition)
        if table is not None:
            return table

        with self._lock:
            # Another writer may have finished while we waited
            table = self._tables.get(definition)
            if table is None:
                table = resolve(definition, self._config)
                self._tables[definition] = table
                logger.debug("Cached variant table for %s", definition.__qualname__)
            return table

    def __contains__(self, definition: object) -> bool:
        try:
            return definition in self._tables
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._tables)

    def __repr__(self) -> str:
        return f"VariantRegistry(definitions={len(self)}, config={self._config!r})"


default_registry = VariantRegistry()


def get_registry() -> VariantRegistry:
    """Return the process-wide default registry."""
    return default_registry


def configure(config: RegistryConfig) -> None:
    """Replace the default registry's configuration.

    Only allowed before the default registry has resolved any definition,
    since cached tables are never recomputed.

    Raises:
        RuntimeError: If a definition was already resolved
    """
    default_registry.reconfigure(config)
    logger.debug("Default registry configured: %r", config)
