from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from rpi_backlight.errors import ConfigurationError
from rpi_backlight.paths import default_settings_path
from rpi_backlight.system.backlight import DEFAULT_SYSFS_DIR

KNOWN_KEYS = {"backlight_sysfs", "state_file", "log_level"}


@dataclass(frozen=True)
class Settings:
    backlight_sysfs: Path = DEFAULT_SYSFS_DIR
    state_file: Path | None = None
    log_level: str | None = None


def normalize(cfg: dict[str, Any]) -> None:
    for key, value in list(cfg.items()):
        if isinstance(value, str):
            cfg[key] = value.strip()


def validate(cfg: dict[str, Any]) -> None:
    unknown = sorted(set(cfg) - KNOWN_KEYS)
    if unknown:
        raise ConfigurationError(f"Unknown settings: {', '.join(unknown)}")

    for key in KNOWN_KEYS & set(cfg):
        value = cfg[key]
        if not isinstance(value, str) or not value:
            raise ConfigurationError(f"{key} must be a non-empty string")


def from_mapping(cfg: dict[str, Any]) -> Settings:
    normalize(cfg)
    validate(cfg)
    state_file = cfg.get("state_file")
    return Settings(
        backlight_sysfs=Path(cfg.get("backlight_sysfs", DEFAULT_SYSFS_DIR)),
        state_file=Path(state_file).expanduser() if state_file else None,
        log_level=cfg.get("log_level"),
    )


def load(path: str | Path | None = None) -> Settings:
    """Load settings from `path`, or from ~/.config/rpi-backlight.yaml.

    An explicit path must exist. The default file is optional, and so is
    HOME when looking for it.
    """

    if path is None:
        try:
            p = default_settings_path()
        except ConfigurationError:
            return Settings()
        if not p.exists():
            return Settings()
    else:
        p = Path(path)

    try:
        text = p.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read settings file {p}: {e.strerror}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {p}: {e}") from e

    if data is None:
        return Settings()
    if not isinstance(data, dict):
        raise ConfigurationError("Top-level settings must be a mapping")
    return from_mapping(data)
