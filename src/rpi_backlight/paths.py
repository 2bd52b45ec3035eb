from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from rpi_backlight.errors import ConfigurationError

APP_NAME = "rpi-backlight"


def _home(environ: Mapping[str, str] | None) -> Path:
    env = os.environ if environ is None else environ
    home = env.get("HOME")
    if not home:
        raise ConfigurationError("Could not find HOME environment variable.")
    return Path(home)


def resolve_state_path(environ: Mapping[str, str] | None = None) -> Path:
    """Return the file holding the last brightness set by this tool.

    Only HOME is consulted, never the password database: a missing HOME is
    reported to the user instead of silently guessed.
    """

    return _home(environ) / ".config" / APP_NAME


def default_settings_path(environ: Mapping[str, str] | None = None) -> Path:
    return _home(environ) / ".config" / f"{APP_NAME}.yaml"
