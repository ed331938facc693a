"""Configuration models and helpers for Sizhu settings."""

from __future__ import annotations

import logging
import os
import re
from copy import deepcopy
from pathlib import Path
from typing import Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from sizhu.errors import SettingsError

LOG = logging.getLogger(__name__)

CURRENT_SETTINGS_SCHEMA_VERSION = 2

_TIME_RE = re.compile(r"^([01]?\d|2[0-3]):[0-5]\d$")

# -------------------- Settings Schema --------------------


class DisplayCfg(BaseModel):
    """How pillar results are rendered by the CLI."""

    label_style: Literal["hanzi", "pinyin"] = "hanzi"
    json_indent: int = 2
    default_time: str = "12:00"

    @field_validator("json_indent", mode="before")
    @classmethod
    def _cap_json_indent(cls, value: int) -> int:
        return max(0, min(8, int(value)))

    @field_validator("default_time")
    @classmethod
    def _check_default_time(cls, value: str) -> str:
        candidate = value.strip()
        if not _TIME_RE.match(candidate):
            raise ValueError(f"default_time must be HH:MM, got {value!r}")
        return candidate


class LoggingCfg(BaseModel):
    """Logging preferences applied when the CLI starts."""

    level: str = "WARNING"


class Settings(BaseModel):
    """Top-level settings model persisted on disk."""

    schema_version: int = Field(
        default=CURRENT_SETTINGS_SCHEMA_VERSION,
        ge=1,
        description="Version marker for persisted configuration payloads.",
    )
    display: DisplayCfg = Field(default_factory=DisplayCfg)
    logging: LoggingCfg = Field(default_factory=LoggingCfg)


# -------------------- I/O Helpers --------------------

CONFIG_FILENAME = "config.yaml"


def get_config_home() -> Path:
    """Return the directory where settings should be stored."""

    return Path(os.environ.get("SIZHU_HOME", str(Path.home() / ".sizhu")))


def config_path() -> Path:
    """Return the full path to the configuration file, creating directories as needed."""

    home = get_config_home()
    home.mkdir(parents=True, exist_ok=True)
    return home / CONFIG_FILENAME


def default_settings() -> Settings:
    """Instantiate a Settings object populated with defaults."""

    return Settings()


def save_settings(settings: Settings, path: Optional[Path] = None) -> Path:
    """Persist the given settings to disk as YAML."""

    target_path = Path(path) if path else config_path()
    target_path.parent.mkdir(parents=True, exist_ok=True)
    data = settings.model_dump()
    with target_path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(data, handle, sort_keys=False, allow_unicode=True)
    return target_path


def _coerce_schema_version(raw: object) -> int:
    """Return a normalised schema version value with sane bounds."""

    try:
        value = int(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return 1
    return max(1, value)


def _upgrade_settings_payload(
    data: dict[str, object], *, schema_version: int
) -> tuple[dict[str, object], bool]:
    """Apply in-place upgrades required for older settings payloads."""

    upgraded = deepcopy(data)
    version = max(1, schema_version)
    changed = False

    if version < 2:
        # v1 kept the label style at the top level.
        style = upgraded.pop("label_style", None)
        if style is not None:
            display = dict(upgraded.get("display") or {})
            display.setdefault("label_style", style)
            upgraded["display"] = display
        version = 2
        changed = True

    if upgraded.get("schema_version") != version:
        upgraded["schema_version"] = version
        changed = True

    return upgraded, changed


def _describe_validation_error(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ())) or "settings"
        parts.append(f"{location}: {error.get('msg', 'invalid value')}")
    return "; ".join(parts)


def _read_payload(source_path: Path) -> dict[str, object]:
    try:
        with source_path.open("r", encoding="utf-8") as handle:
            raw = yaml.safe_load(handle) or {}
    except yaml.YAMLError as exc:
        raise SettingsError(
            f"Settings file {source_path} is not valid YAML",
            context={"path": str(source_path), "detail": str(exc)},
        ) from exc
    if not isinstance(raw, dict):
        LOG.warning("Ignoring non-mapping settings payload in %s", source_path)
        return {}
    return raw


def load_settings(path: Optional[Path] = None) -> Settings:
    """Load settings from disk, creating defaults if missing.

    Raises
    ------
    SettingsError
        The file is not valid YAML or holds values the models reject. The
        offending path is carried in ``context["path"]``.
    """

    source_path = Path(path) if path else config_path()
    if not source_path.exists():
        settings = default_settings()
        save_settings(settings, source_path)
        return settings
    raw = _read_payload(source_path)
    schema_version = _coerce_schema_version(raw.get("schema_version"))
    data, upgraded = _upgrade_settings_payload(raw, schema_version=schema_version)
    try:
        settings = Settings(**data)
    except ValidationError as exc:
        detail = _describe_validation_error(exc)
        raise SettingsError(
            f"Settings file {source_path} is invalid ({detail})",
            context={"path": str(source_path), "detail": detail},
        ) from exc
    if upgraded:
        LOG.info("Upgraded settings in %s to schema version %d", source_path, settings.schema_version)
        save_settings(settings, source_path)
    return settings


def ensure_default_config() -> Path:
    """Ensure a configuration file exists on disk and return its path."""

    target = config_path()
    if not target.exists():
        save_settings(default_settings(), target)
    return target
