"""Setting repository protocol."""

from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol

from ...models.setting import Setting


class SettingRepository(Protocol):
    """Repository for persisted settings keyed by slug."""

    def get(self, slug: str) -> Optional[Setting]:
        """Retrieve a setting by slug, or None when it does not exist."""
        ...

    def update(self, slug: str, fields: Mapping[str, Any]) -> bool:
        """Apply column updates to the setting; False when no row matched."""
        ...

    def list_all(self) -> list[Setting]:
        """List every persisted setting."""
        ...

    def insert(self, fields: Mapping[str, Any]) -> int:
        """Create a setting from column values and return its id."""
        ...

    def delete(self, slug: str) -> bool:
        """Delete a setting by slug; False when nothing was deleted."""
        ...
