"""Configuration helpers exposed at :mod:`sizhu.config`."""

from __future__ import annotations

from sizhu.errors import SettingsError

from .settings import (
    CONFIG_FILENAME,
    CURRENT_SETTINGS_SCHEMA_VERSION,
    DisplayCfg,
    LoggingCfg,
    Settings,
    config_path,
    default_settings,
    ensure_default_config,
    get_config_home,
    load_settings,
    save_settings,
)

__all__ = [
    "CONFIG_FILENAME",
    "CURRENT_SETTINGS_SCHEMA_VERSION",
    "Settings",
    "DisplayCfg",
    "LoggingCfg",
    "SettingsError",
    "config_path",
    "get_config_home",
    "default_settings",
    "load_settings",
    "save_settings",
    "ensure_default_config",
]
