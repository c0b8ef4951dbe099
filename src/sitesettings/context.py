"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from sqlalchemy.engine import Engine

from .config import BaseConfig
from .fallback import ConfigFallback
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import SQLModelSettingRepository
from .options import OptionsRegistry
from .services.settings_store import SettingsStore


@dataclass
class SettingsContext:
    """Owns the engine, repository and the process-wide settings store."""

    config: BaseConfig
    engine: Engine
    session_factory: SessionFactory
    setting_repo: SQLModelSettingRepository
    settings: SettingsStore
    options: OptionsRegistry = field(default_factory=OptionsRegistry)

    def request_settings(self) -> SettingsStore:
        """Store for one request: temp overrides made on it do not leak."""
        return self.settings.scoped()

    def close(self) -> None:
        self.engine.dispose()


def create_settings_context(config: Optional[BaseConfig] = None) -> SettingsContext:
    """Create and initialize the settings context."""

    if config is None:
        config = BaseConfig()

    engine, session_factory = bootstrap_database(config)

    setting_repo = SQLModelSettingRepository(session_factory)
    settings = SettingsStore(setting_repo, ConfigFallback(config))

    return SettingsContext(
        config=config,
        engine=engine,
        session_factory=session_factory,
        setting_repo=setting_repo,
        settings=settings,
    )
