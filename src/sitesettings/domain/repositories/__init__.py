"""Repository protocol definitions for domain layer."""

from .setting import SettingRepository

__all__ = ["SettingRepository"]
