from __future__ import annotations

import abc
import logging
from dataclasses import dataclass
from pathlib import Path

from rpi_backlight.errors import DeviceUnavailableError
from rpi_backlight.levels import read_int

log = logging.getLogger(__name__)

DEFAULT_SYSFS_DIR = Path("/sys/class/backlight/backlight@0")


class DeviceChannel(abc.ABC):
    """Brightness and power endpoints of one backlight."""

    @abc.abstractmethod
    def check_available(self) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def read_brightness(self) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    def read_power(self) -> int:
        raise NotImplementedError

    @abc.abstractmethod
    def write_brightness(self, value: int) -> None:
        raise NotImplementedError

    @abc.abstractmethod
    def write_power(self, value: int) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class SysfsBacklight(DeviceChannel):
    sysfs_dir: Path = DEFAULT_SYSFS_DIR

    @property
    def power_file(self) -> Path:
        return Path(self.sysfs_dir) / "bl_power"

    @property
    def brightness_file(self) -> Path:
        return Path(self.sysfs_dir) / "brightness"

    def check_available(self) -> None:
        # Both attributes must be writable before anything is changed.
        for p in (self.power_file, self.brightness_file):
            try:
                with p.open("r+", encoding="utf-8"):
                    pass
            except OSError as e:
                raise DeviceUnavailableError(p) from e

    def _read(self, p: Path) -> int:
        value = read_int(p)
        log.debug("read %d from %s", value, p)
        return value

    def _write(self, p: Path, value: int) -> None:
        # sysfs attributes take the whole value in one write.
        p.write_text(str(int(value)), encoding="utf-8")
        log.debug("wrote %d to %s", value, p)

    def read_brightness(self) -> int:
        return self._read(self.brightness_file)

    def read_power(self) -> int:
        return self._read(self.power_file)

    def write_brightness(self, value: int) -> None:
        self._write(self.brightness_file, value)

    def write_power(self, value: int) -> None:
        # Kernel backlight uses bl_power = 0 for on, 1 for off.
        self._write(self.power_file, value)
