from __future__ import annotations

import logging
from pathlib import Path

from rpi_backlight.errors import ParseError
from rpi_backlight.levels import DEFAULT_BRIGHTNESS, read_int
from rpi_backlight.paths import resolve_state_path

log = logging.getLogger(__name__)


class StateStore:
    """Last brightness set by the tool, kept as a single integer on disk.

    The path is resolved on first use so commands that never touch the
    store do not depend on HOME.
    """

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else None

    @property
    def path(self) -> Path:
        if self._path is None:
            self._path = resolve_state_path()
        return self._path

    def ensure_exists(self) -> bool:
        """Create the file with the default brightness if it is missing.

        Returns True if the file was created.
        """

        p = self.path
        if p.exists():
            return False
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(str(DEFAULT_BRIGHTNESS), encoding="utf-8")
        print(f"Created file with default content: {p}")
        return True

    def read(self) -> int:
        self.ensure_exists()
        p = self.path
        try:
            value = read_int(p)
        except ParseError as e:
            log.warning("%s; restoring default %d", e, DEFAULT_BRIGHTNESS)
            p.write_text(str(DEFAULT_BRIGHTNESS), encoding="utf-8")
            return DEFAULT_BRIGHTNESS
        log.debug("read %d from %s", value, p)
        return value

    def write(self, value: int) -> None:
        self.ensure_exists()
        self.path.write_text(str(int(value)), encoding="utf-8")
        log.debug("stored %d in %s", value, self.path)
