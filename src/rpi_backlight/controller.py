from __future__ import annotations

import logging
from dataclasses import dataclass

from rpi_backlight.errors import ParseError
from rpi_backlight.levels import POWER_ON
from rpi_backlight.policy import Decision, evaluate
from rpi_backlight.store import StateStore
from rpi_backlight.system.backlight import DeviceChannel

log = logging.getLogger(__name__)


@dataclass
class Controller:
    backlight: DeviceChannel
    store: StateStore

    def _current(self) -> tuple[int | None, int]:
        brightness: int | None
        try:
            brightness = self.backlight.read_brightness()
        except ParseError as e:
            log.warning("%s; will rewrite brightness", e)
            brightness = None
        try:
            power = self.backlight.read_power()
        except ParseError as e:
            log.warning("%s; assuming power on", e)
            power = POWER_ON
        return brightness, power

    def run(self, command: str) -> Decision:
        brightness, power = self._current()
        decision = evaluate(command, brightness, power, self.store.read)
        log.debug("%s: brightness %s -> %d", decision.why, brightness, decision.brightness)
        self._apply(decision)
        return decision

    def _apply(self, decision: Decision) -> None:
        if decision.brightness_changed:
            # State file first: after a crash in between, "sync" still knows
            # the intended value.
            self.store.write(decision.brightness)
            self.backlight.write_brightness(decision.brightness)

        # Power is refreshed on every invocation, changed or not.
        self.backlight.write_power(decision.power)
