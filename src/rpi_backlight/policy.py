from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from rpi_backlight.errors import UsageError
from rpi_backlight.levels import (
    BRIGHTNESS_MAX,
    BRIGHTNESS_MIN,
    BRIGHTNESS_STEP,
    DEFAULT_BRIGHTNESS,
    POWER_OFF,
    POWER_ON,
    clamp_brightness,
    normalize_power,
)

COMMANDS: dict[str, str] = {
    "up": f"raise brightness by {BRIGHTNESS_STEP} step",
    "down": f"lower brightness by {BRIGHTNESS_STEP} step",
    "max": f"set brightness to the maximum ({BRIGHTNESS_MAX})",
    "min": f"set brightness to the minimum ({BRIGHTNESS_MIN})",
    "sync": "restore the last brightness set by this tool",
    "default": f"set brightness to the default ({DEFAULT_BRIGHTNESS})",
    "on": "turn the screen on",
    "off": "turn the screen off",
}


@dataclass(frozen=True)
class Decision:
    brightness: int
    power: int
    brightness_changed: bool
    why: str


def evaluate(
    command: str,
    brightness: int | None,
    power: int,
    stored_brightness: Callable[[], int],
) -> Decision:
    """Map a command and the current device state to the state to apply.

    `stored_brightness` is only called for "sync", so other commands never
    create or read the state file. A `brightness` of None means the device
    value could not be read; steps start from the default and any brightness
    command writes its result.
    """

    start = DEFAULT_BRIGHTNESS if brightness is None else brightness
    new_brightness = start
    new_power = power

    if command == "up":
        new_brightness = start + BRIGHTNESS_STEP
    elif command == "down":
        new_brightness = start - BRIGHTNESS_STEP
    elif command == "max":
        new_brightness = BRIGHTNESS_MAX
    elif command == "min":
        new_brightness = BRIGHTNESS_MIN
    elif command == "sync":
        new_brightness = stored_brightness()
    elif command == "default":
        new_brightness = DEFAULT_BRIGHTNESS
    elif command == "on":
        new_power = POWER_ON
    elif command == "off":
        new_power = POWER_OFF
    else:
        raise UsageError(f"Unknown command: {command}")

    # Clamp even values taken from the state file.
    new_brightness = clamp_brightness(new_brightness)
    new_power = normalize_power(new_power)

    # An unreadable start value is overwritten by every brightness command.
    unknown = brightness is None and command not in ("on", "off")
    return Decision(
        brightness=new_brightness,
        power=new_power,
        brightness_changed=unknown or new_brightness != start,
        why=command,
    )
