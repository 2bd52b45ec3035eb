from __future__ import annotations

import argparse
import sys

from rpi_backlight import __version__
from rpi_backlight.config import load
from rpi_backlight.controller import Controller
from rpi_backlight.errors import ConfigurationError, DeviceUnavailableError, UsageError
from rpi_backlight.logging_setup import configure_logging
from rpi_backlight.policy import COMMANDS
from rpi_backlight.store import StateStore
from rpi_backlight.system.backlight import DeviceChannel, SysfsBacklight

_PERMISSIONS_HINT = """\
To run as a regular user, make the sysfs attributes writable with a udev rule:
  SUBSYSTEM=="backlight", RUN+="/bin/chmod 0666 /sys/class/backlight/%k/brightness /sys/class/backlight/%k/bl_power"
"""


class _Parser(argparse.ArgumentParser):
    def error(self, message: str):  # type: ignore[override]
        raise UsageError(message)


def _build_parser() -> argparse.ArgumentParser:
    width = max(len(name) for name in COMMANDS)
    commands = "\n".join(f"  {name:<{width}}  {help_}" for name, help_ in COMMANDS.items())
    ap = _Parser(
        prog="rpi-backlight",
        description="Adjust brightness and power of the Raspberry Pi touchscreen backlight.",
        epilog=f"commands:\n{commands}\n\n{_PERMISSIONS_HINT}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    ap.add_argument("--version", action="version", version=__version__)
    ap.add_argument("-c", "--config", help="YAML settings file")
    ap.add_argument("--log-level", help="DEBUG, INFO, WARNING or ERROR")
    ap.add_argument("command", metavar="command", help=" | ".join(COMMANDS))
    return ap


def _usage(ap: argparse.ArgumentParser) -> int:
    print(ap.format_help())
    return 1


def main(
    argv: list[str] | None = None,
    *,
    backlight: DeviceChannel | None = None,
    store: StateStore | None = None,
) -> int:
    ap = _build_parser()
    try:
        args = ap.parse_args(argv)
    except UsageError:
        return _usage(ap)

    try:
        settings = load(args.config)
        configure_logging(cli_level=args.log_level, settings_level=settings.log_level)
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if backlight is None:
        backlight = SysfsBacklight(settings.backlight_sysfs)
    if store is None:
        store = StateStore(settings.state_file)

    try:
        backlight.check_available()
    except DeviceUnavailableError as e:
        print(f"ERROR: {e}")
        return 1

    try:
        Controller(backlight, store).run(args.command)
    except UsageError:
        return _usage(ap)
    except ConfigurationError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    return 0
