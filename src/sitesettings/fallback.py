"""Static configuration consulted for keys that are not persisted settings."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from .config import BaseConfig


class FallbackSource(Protocol):
    """Key/value table answering lookups for unknown settings."""

    def lookup(self, key: str) -> Any:
        """Return the value for ``key`` or None when absent."""
        ...


class MappingFallback:
    """Fallback backed by a plain mapping."""

    def __init__(self, items: Optional[Mapping[str, Any]] = None):
        self._items = dict(items or {})

    def lookup(self, key: str) -> Any:
        return self._items.get(key)


class ConfigFallback:
    """Fallback exposing the application configuration as settings.

    The table is read from ``config.items()`` on every lookup so environment
    changes made after start-up are visible to keys not yet cached.
    """

    def __init__(self, config: BaseConfig):
        self.config = config

    def lookup(self, key: str) -> Any:
        return self.config.items().get(key)


__all__ = ["ConfigFallback", "FallbackSource", "MappingFallback"]
