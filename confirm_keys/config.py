"""Configuration loading for confirm-keys.

The built-in defaults table covers everything the extension needs. A host may
drop an optional TOML file next to its working directory to tune the confirm
windows, hint texts or theme styles.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Dict, Optional

CONFIG_FILENAMES = ("confirm-keys.toml",)

INTERRUPT_WINDOW_MS = 500
CANCEL_WINDOW_MS = 1200
STATUS_KEY = "confirm-keys-interrupt"

DEFAULT_THEME: Dict[str, str] = {
    "warning": "bold yellow",
    "dim": "dim",
}


class ConfigError(ValueError):
    """Raised when a config file holds a value of the wrong shape."""


@dataclass(frozen=True)
class WindowSettings:
    interrupt_ms: int = INTERRUPT_WINDOW_MS
    cancel_ms: int = CANCEL_WINDOW_MS

    @property
    def interrupt_seconds(self) -> float:
        return self.interrupt_ms / 1000

    @property
    def cancel_seconds(self) -> float:
        return self.cancel_ms / 1000


@dataclass(frozen=True)
class HintSettings:
    status_key: str = STATUS_KEY
    interrupt_label: str = "Cleared"
    interrupt_instruction: str = " · Ctrl-C again exits"
    cancel_working_message: str = "Working... · Esc again aborts"


@dataclass(frozen=True)
class ConfirmKeysConfig:
    windows: WindowSettings = field(default_factory=WindowSettings)
    hints: HintSettings = field(default_factory=HintSettings)
    theme: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_THEME))
    path: Optional[Path] = None


def load_config(base_dir: Path) -> ConfirmKeysConfig:
    """Load config from the first matching file in base_dir, else defaults."""

    for filename in CONFIG_FILENAMES:
        candidate = base_dir / filename
        if not candidate.exists():
            continue
        with candidate.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ConfigError(f"Invalid TOML in {candidate}: {e}") from e
        return ConfirmKeysConfig(
            windows=_parse_windows(data.get("windows", {})),
            hints=_parse_hints(data.get("hints", {})),
            theme=_parse_theme(data.get("theme", {})),
            path=candidate,
        )

    return ConfirmKeysConfig()


def _parse_windows(raw: dict) -> WindowSettings:
    defaults = WindowSettings()
    interrupt_ms = raw.get("interrupt_ms", defaults.interrupt_ms)
    cancel_ms = raw.get("cancel_ms", defaults.cancel_ms)
    for name, value in (("interrupt_ms", interrupt_ms), ("cancel_ms", cancel_ms)):
        if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
            raise ConfigError(f"windows.{name} must be a positive integer, got {value!r}")
    return WindowSettings(interrupt_ms=interrupt_ms, cancel_ms=cancel_ms)


def _parse_hints(raw: dict) -> HintSettings:
    hints = HintSettings()
    overrides = {}
    for name in ("status_key", "interrupt_label", "interrupt_instruction", "cancel_working_message"):
        if name not in raw:
            continue
        value = raw[name]
        if not isinstance(value, str):
            raise ConfigError(f"hints.{name} must be a string, got {value!r}")
        overrides[name] = value
    return replace(hints, **overrides)


def _parse_theme(raw: dict) -> Dict[str, str]:
    theme = dict(DEFAULT_THEME)
    for name, style in raw.items():
        if not isinstance(style, str):
            raise ConfigError(f"theme.{name} must be a style string, got {style!r}")
        theme[name] = style
    return theme
