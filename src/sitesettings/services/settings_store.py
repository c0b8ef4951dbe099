"""Cache-backed accessor for site settings.

Reads resolve in order: cached entry, persisted value, persisted default,
static fallback. The resolved value is cached for the lifetime of the store,
so a store instance should live exactly as long as its values may be reused:
one per process for global settings, or one per request via ``scoped()``.
"""

from __future__ import annotations

import threading
from typing import Any, Mapping, Optional

from ..domain.repositories import SettingRepository
from ..exceptions import InvalidFormat
from ..fallback import FallbackSource, MappingFallback
from ..logging_config import get_logger
from ..models.setting import SETTING_COLUMNS
from ..values import is_scalar, to_stored

logger = get_logger(__name__)


class SettingsStore:
    """Process-wide settings cache in front of a setting repository."""

    def __init__(
        self,
        repository: SettingRepository,
        fallback: Optional[FallbackSource] = None,
        *,
        initial: Optional[Mapping[str, Any]] = None,
        parent: Optional["SettingsStore"] = None,
    ):
        self.repository = repository
        self.fallback = fallback if fallback is not None else MappingFallback()
        self._cache: dict[str, Any] = dict(initial or {})
        self._lock = threading.RLock()
        self._parent = parent

    def get(self, key: str) -> Any:
        """Return the setting for ``key``; None when neither stored nor configured."""
        with self._lock:
            if key in self._cache:
                return self._cache[key]

            setting = self.repository.get(key)
            if setting is not None:
                value = setting.resolved_value
            else:
                # Not a stored setting, maybe it's a config item
                value = self.fallback.lookup(key)
                logger.debug("Setting %s resolved from static config", key)

            self._cache[key] = value
            return value

    def set(self, key: str, value: Any) -> bool:
        """Cache ``value`` under ``key`` and persist it when it is a scalar.

        Structured values (lists, dicts, None) are cached only. Returns False
        for a non-string key, True otherwise, whatever the repository reports.
        """
        if not isinstance(key, str):
            logger.debug("Rejected setting key of type %s", type(key).__name__)
            return False

        with self._lock:
            if is_scalar(value):
                if not self.repository.update(key, {"value": to_stored(value)}):
                    logger.debug("No stored setting %s to update", key)
            else:
                logger.debug(
                    "Setting %s holds a %s and is cached only",
                    key,
                    type(value).__name__,
                )
            self._cache[key] = value
        if self._parent is not None:
            self._parent._write_through(key, value)
        return True

    def _write_through(self, key: str, value: Any) -> None:
        with self._lock:
            self._cache[key] = value
        if self._parent is not None:
            self._parent._write_through(key, value)

    def temp(self, key: str, value: Any) -> None:
        """Override ``key`` for the lifetime of this store without touching storage."""
        with self._lock:
            self._cache[key] = value

    def get_all(self) -> dict[str, Any]:
        """Return every cached setting, loading all stored settings into an empty cache.

        A cache that already holds entries is returned as it stands, without
        reloading, so it may be partial. Static config keys are only present
        if they were read individually before.
        """
        with self._lock:
            if not self._cache:
                for setting in self.repository.list_all():
                    self._cache[setting.slug] = setting.resolved_value
                logger.debug("Loaded %d stored settings", len(self._cache))
            return dict(self._cache)

    def add(self, fields: Optional[Mapping[str, Any]]) -> int:
        """Insert a new setting and return its id.

        Raises:
            InvalidFormat: ``fields`` is empty or names a column settings do not have.
        """
        if not fields:
            raise InvalidFormat()
        unknown = set(fields) - SETTING_COLUMNS
        if unknown:
            raise InvalidFormat(unknown)

        setting_id = self.repository.insert(fields)
        logger.info("Added setting", extra={"slug": fields.get("slug"), "setting_id": setting_id})
        return setting_id

    def delete(self, slug: str) -> bool:
        """Delete the stored setting; an already cached value keeps being served."""
        deleted = self.repository.delete(slug)
        logger.info("Deleted setting", extra={"slug": slug, "deleted": deleted})
        return deleted

    def forget(self, key: str) -> None:
        """Drop the cached entry for ``key`` so the next read resolves it again."""
        with self._lock:
            self._cache.pop(key, None)

    def flush(self) -> None:
        """Empty the cache."""
        with self._lock:
            self._cache.clear()

    def cached_keys(self) -> list[str]:
        with self._lock:
            return list(self._cache)

    def scoped(self) -> "SettingsStore":
        """Return a store sharing storage with a private copy of the current cache.

        ``temp`` overrides made through the copy stay out of this store, while
        ``set`` calls on the copy are persisted and also update this cache.
        """
        with self._lock:
            return SettingsStore(self.repository, self.fallback, initial=self._cache, parent=self)

    def __getitem__(self, key: str) -> Any:
        return self.get(key)

    def __setitem__(self, key: str, value: Any) -> None:
        self.set(key, value)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._cache

    def __repr__(self) -> str:
        return f"<SettingsStore cached={len(self._cache)}>"


__all__ = ["SettingsStore"]
