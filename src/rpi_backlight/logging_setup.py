from __future__ import annotations

import logging
import os

from rpi_backlight.errors import ConfigurationError


def configure_logging(*, cli_level: str | None = None, settings_level: str | None = None) -> None:
    """Configure root logging for the tool.

    Precedence:
    1) `cli_level` (from --log-level)
    2) env var `RPI_BACKLIGHT_LOG_LEVEL`
    3) `settings_level` (from the settings file)
    4) default WARNING

    Called once from the entrypoint. Raises ConfigurationError for a level
    name the logging module does not know.
    """

    level_name = cli_level or os.environ.get("RPI_BACKLIGHT_LOG_LEVEL") or settings_level
    level_name = (level_name or "WARNING").upper()
    level = getattr(logging, level_name, None)
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {level_name}")

    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
    )
