from __future__ import annotations

from pathlib import Path


class ConfigurationError(ValueError):
    pass


class UsageError(ValueError):
    pass


class ParseError(ValueError):
    def __init__(self, path: Path | str, text: str) -> None:
        super().__init__(f"No integer found in {path}: {text[:40]!r}")
        self.path = Path(path)
        self.text = text


class DeviceUnavailableError(OSError):
    def __init__(self, path: Path | str) -> None:
        super().__init__(f"'{path}' does not exist/insufficient permissions.")
        self.path = Path(path)
