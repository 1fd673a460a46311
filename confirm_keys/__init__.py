"""confirm-keys: two-stage confirm gestures for Ctrl-C and Esc.

A first press of a guarded key shows a transient hint; only a second press
inside a short window performs the dangerous action (exit the session, abort
the running operation).

Main entry points:
- load_extension: subscribe the extension to a host's SessionLifecycle
- confirm-keys CLI: interactive Textual demo host
"""
from __future__ import annotations

from .config import ConfigError, ConfirmKeysConfig, load_config
from .extension import (
    OPERATION_END,
    SESSION_END,
    SESSION_START,
    ConfirmKeysExtension,
    SessionLifecycle,
    load_extension,
)
from .keys import matches_key

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "ConfirmKeysConfig",
    "load_config",
    "ConfirmKeysExtension",
    "SessionLifecycle",
    "load_extension",
    "SESSION_START",
    "OPERATION_END",
    "SESSION_END",
    "matches_key",
]
