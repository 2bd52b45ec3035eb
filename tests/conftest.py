from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from rpi_backlight.errors import DeviceUnavailableError
from rpi_backlight.store import StateStore
from rpi_backlight.system.backlight import DeviceChannel


@dataclass
class FakeBacklight(DeviceChannel):
    brightness: int = 5
    power: int = 0
    available: bool = True
    events: list[tuple[str, int]] = field(default_factory=list)

    def check_available(self) -> None:
        if not self.available:
            raise DeviceUnavailableError("/fake/brightness")

    def read_brightness(self) -> int:
        return self.brightness

    def read_power(self) -> int:
        return self.power

    def write_brightness(self, value: int) -> None:
        self.events.append(("device.brightness", value))
        self.brightness = value

    def write_power(self, value: int) -> None:
        self.events.append(("device.power", value))
        self.power = value


class RecordingStore(StateStore):
    def __init__(self, path: Path, events: list[tuple[str, int]]) -> None:
        super().__init__(path)
        self.events = events

    def write(self, value: int) -> None:
        self.events.append(("store", value))
        super().write(value)


@pytest.fixture
def fake_backlight() -> FakeBacklight:
    return FakeBacklight()


@pytest.fixture
def recording_store(tmp_path: Path, fake_backlight: FakeBacklight) -> RecordingStore:
    # Shares the event list so tests can check write ordering.
    return RecordingStore(tmp_path / "rpi-backlight", fake_backlight.events)


@pytest.fixture
def sysfs(tmp_path: Path) -> Path:
    d = tmp_path / "backlight@0"
    d.mkdir()
    (d / "brightness").write_text("5\n", encoding="utf-8")
    (d / "bl_power").write_text("0\n", encoding="utf-8")
    return d


@pytest.fixture(autouse=True)
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    d = tmp_path / "home"
    d.mkdir()
    monkeypatch.setenv("HOME", str(d))
    monkeypatch.delenv("RPI_BACKLIGHT_LOG_LEVEL", raising=False)
    return d
