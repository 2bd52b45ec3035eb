from __future__ import annotations

import re
from pathlib import Path

from rpi_backlight.errors import ParseError

BRIGHTNESS_MIN = 1
BRIGHTNESS_MAX = 9
BRIGHTNESS_STEP = 1
DEFAULT_BRIGHTNESS = 3

POWER_ON = 0
POWER_OFF = 1

_INT_RE = re.compile(r"\s*([+-]?\d+)")


def clamp_brightness(value: int) -> int:
    return max(BRIGHTNESS_MIN, min(BRIGHTNESS_MAX, int(value)))


def normalize_power(value: int) -> int:
    """Coerce out-of-range bl_power values.

    Above OFF wraps to ON and below ON wraps to OFF, matching how the
    command-line tool has always treated values left by other writers.
    """

    value = int(value)
    if value > POWER_OFF:
        return POWER_ON
    if value < POWER_ON:
        return POWER_OFF
    return value


def parse_int(text: str, path: Path | str) -> int:
    """Parse the leading integer token of a sysfs-style text file.

    Trailing content after the number is ignored ("5\\n", "7 foo").
    """

    m = _INT_RE.match(text)
    if m is None:
        raise ParseError(path, text)
    try:
        return int(m.group(1))
    except ValueError as e:
        # Digit runs past the interpreter's int conversion limit.
        raise ParseError(path, text) from e


def read_int(path: Path) -> int:
    raw = path.read_bytes()
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(path, raw.decode("utf-8", errors="replace")) from e
    return parse_int(text, path)
