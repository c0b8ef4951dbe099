"""Pytest configuration and shared fixtures for sitesettings tests.

Provides throwaway SQLite databases for repository tests and an in-memory
repository stub that records every call, for checking when the store does
(and does not) reach storage.
"""

from __future__ import annotations

import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Mapping, Optional

import pytest
from sqlmodel import Session, SQLModel, create_engine

# Import models so the setting table is registered with SQLModel metadata
from sitesettings.models import Setting
from sitesettings.infra.repositories import SQLModelSettingRepository


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture
def session_factory(db_engine):
    """Session factory matching the shape repositories expect."""

    @contextmanager
    def factory():
        session = Session(db_engine, expire_on_commit=False)
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    return factory


@pytest.fixture
def setting_repo(session_factory):
    return SQLModelSettingRepository(session_factory)


# =============================================================================
# Repository stub
# =============================================================================


class RecordingSettingRepository:
    """Dict-backed SettingRepository that records each call as (method, args)."""

    def __init__(self, settings: Optional[list[Setting]] = None):
        self.rows: dict[str, Setting] = {s.slug: s for s in settings or []}
        self.calls: list[tuple[str, tuple]] = []
        self._next_id = len(self.rows) + 1

    def count(self, method: str) -> int:
        return sum(1 for name, _ in self.calls if name == method)

    def get(self, slug: str) -> Optional[Setting]:
        self.calls.append(("get", (slug,)))
        return self.rows.get(slug)

    def update(self, slug: str, fields: Mapping[str, Any]) -> bool:
        self.calls.append(("update", (slug, dict(fields))))
        setting = self.rows.get(slug)
        if setting is None:
            return False
        for name, value in fields.items():
            setattr(setting, name, value)
        return True

    def list_all(self) -> list[Setting]:
        self.calls.append(("list_all", ()))
        return list(self.rows.values())

    def insert(self, fields: Mapping[str, Any]) -> int:
        self.calls.append(("insert", (dict(fields),)))
        setting_id = self._next_id
        self._next_id += 1
        self.rows[fields["slug"]] = Setting(id=setting_id, **dict(fields))
        return setting_id

    def delete(self, slug: str) -> bool:
        self.calls.append(("delete", (slug,)))
        return self.rows.pop(slug, None) is not None


@pytest.fixture
def recording_repo():
    return RecordingSettingRepository(
        [
            Setting(id=1, slug="site_name", title="Site Name", default="My Site", value=None),
            Setting(id=2, slug="frontend_enabled", title="Site Status", default="1", value="0"),
            Setting(id=3, slug="records_per_page", title="Records Per Page", default="25", value=None),
        ]
    )
