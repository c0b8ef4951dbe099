"""SQLModel implementation of the setting repository."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, ContextManager, Mapping, Optional

from sqlmodel import Session, select

from ...models.setting import SETTING_COLUMNS, Setting


def _column_values(fields: Mapping[str, Any]) -> dict[str, Any]:
    return {
        name: value.value if isinstance(value, Enum) else value
        for name, value in fields.items()
    }


class SQLModelSettingRepository:
    """SQLModel-based setting repository."""

    def __init__(self, session_factory: Callable[[], ContextManager[Session]]):
        self.session_factory = session_factory

    def get(self, slug: str) -> Optional[Setting]:
        with self.session_factory() as session:
            setting = session.exec(select(Setting).where(Setting.slug == slug)).first()
            if setting:
                session.expunge(setting)
            return setting

    def update(self, slug: str, fields: Mapping[str, Any]) -> bool:
        """Apply ``fields`` to the row for ``slug``.

        The slug itself is the match key and is never rewritten.
        """
        unknown = set(fields) - SETTING_COLUMNS
        if unknown:
            raise ValueError(f"Unknown setting columns: {', '.join(sorted(unknown))}")

        with self.session_factory() as session:
            setting = session.exec(select(Setting).where(Setting.slug == slug)).first()
            if setting is None:
                return False
            for name, value in _column_values(fields).items():
                if name != "slug":
                    setattr(setting, name, value)
            session.add(setting)
            session.commit()
            return True

    def list_all(self) -> list[Setting]:
        with self.session_factory() as session:
            statement = select(Setting).order_by(
                Setting.module, Setting.order, Setting.slug  # type: ignore[arg-type]
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def insert(self, fields: Mapping[str, Any]) -> int:
        with self.session_factory() as session:
            setting = Setting(**_column_values(fields))
            session.add(setting)
            session.commit()
            session.refresh(setting)
            return setting.id  # type: ignore[return-value]

    def delete(self, slug: str) -> bool:
        with self.session_factory() as session:
            setting = session.exec(select(Setting).where(Setting.slug == slug)).first()
            if setting is None:
                return False
            session.delete(setting)
            session.commit()
            return True


__all__ = ["SQLModelSettingRepository"]
