"""SQLModel table exports."""

from .setting import OPTIONS_DIRECTIVE, SETTING_COLUMNS, Setting, SettingType

__all__ = [
    "OPTIONS_DIRECTIVE",
    "SETTING_COLUMNS",
    "Setting",
    "SettingType",
]
