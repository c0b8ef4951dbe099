"""Cache-backed site settings with static config fallback."""

from __future__ import annotations

from .config import BaseConfig, DevConfig, TestConfig
from .context import SettingsContext, create_settings_context
from .exceptions import InvalidFormat
from .models import Setting, SettingType
from .options import OptionsRegistry, parse_options
from .services.settings_store import SettingsStore

__all__ = [
    "BaseConfig",
    "DevConfig",
    "InvalidFormat",
    "OptionsRegistry",
    "Setting",
    "SettingType",
    "SettingsContext",
    "SettingsStore",
    "TestConfig",
    "create_settings_context",
    "parse_options",
]
