"""Application configuration objects and helpers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv

load_dotenv()

ENV_PREFIX = "SITESETTINGS_"
ITEM_PREFIX = "SITESETTINGS_ITEM_"


def _env_bool(name: str, default: bool = False) -> bool:
    """Interpret environment variable values as booleans."""

    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BaseConfig:
    """Base configuration shared across environments."""

    APP_NAME = "sitesettings"
    DB_FILENAME = "settings.db"
    LOG_FILENAME = "sitesettings.log"
    SQLITE_PRAGMAS = {"journal_mode": "wal", "foreign_keys": "on"}

    def __init__(self, database_url: Optional[str] = None) -> None:
        self.DEV_MODE = _env_bool(f"{ENV_PREFIX}DEV_MODE", default=True)
        self.LOG_LEVEL = os.getenv(f"{ENV_PREFIX}LOG_LEVEL", "INFO").upper()
        self.DATA_DIR = self._resolve_data_dir()
        database_url = database_url or os.getenv(f"{ENV_PREFIX}DATABASE_URL")
        if database_url is None and not self.DEV_MODE:
            raise ValueError(f"{ENV_PREFIX}DATABASE_URL must be set in non-dev mode.")
        self.DATABASE_URL = database_url or self._build_sqlite_url()

    def _resolve_data_dir(self) -> Path:
        """Return the directory holding the SQLite file and logs."""

        data_root = os.getenv(f"{ENV_PREFIX}DATA_DIR", "instance")
        path = Path(data_root).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    def _build_sqlite_url(self) -> str:
        return f"sqlite:///{Path(self.DATA_DIR) / self.DB_FILENAME}"

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        """Expose engine kwargs for SQLModel to consume."""

        if not self.DATABASE_URL.startswith("sqlite"):
            return {}
        return {"connect_args": {"check_same_thread": False}}

    def items(self) -> dict[str, Any]:
        """Return the static configuration table consulted for unknown settings.

        Public upper-case attributes are exposed under their lower-case name;
        ``SITESETTINGS_ITEM_<NAME>`` environment variables add ``<name>`` entries
        and win over attributes of the same name.
        """

        table: dict[str, Any] = {}
        for name in dir(self):
            if name.isupper() and not name.startswith("_"):
                table[name.lower()] = getattr(self, name)
        for name, value in os.environ.items():
            if name.startswith(ITEM_PREFIX) and len(name) > len(ITEM_PREFIX):
                table[name[len(ITEM_PREFIX):].lower()] = value
        return table


class DevConfig(BaseConfig):
    """Development configuration using a local SQLite file."""

    DEBUG = True
    TESTING = False


class TestConfig(BaseConfig):
    """Configuration for tests: in-memory SQLite shared across one engine."""

    __test__ = False  # not a pytest test class

    DEBUG = False
    TESTING = True

    def __init__(self) -> None:
        super().__init__(database_url="sqlite://")

    def sqlalchemy_engine_options(self) -> dict[str, Any]:
        from sqlalchemy.pool import StaticPool

        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
