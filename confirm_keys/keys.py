"""Raw terminal key matching.

Recognises the legacy control bytes, the Kitty keyboard protocol (CSI u) and
xterm modifyOtherKeys encodings for the handful of keys the confirm gestures
care about. Key identifiers look like "escape", "enter" or "ctrl+c".
"""
from __future__ import annotations

import re

MODIFIERS = {
    "shift": 1,
    "alt": 2,
    "ctrl": 4,
}

LOCK_MASK = 64 + 128  # Caps Lock + Num Lock

CODEPOINTS = {
    "escape": 27,
    "tab": 9,
    "enter": 13,
    "space": 32,
    "backspace": 127,
}

LEGACY_SEQUENCES = {
    "escape": "\x1b",
    "tab": "\t",
    "enter": "\r",
    "space": " ",
    "backspace": "\x7f",
}

# Textual key names for keys whose raw byte differs from the name.
_TEXTUAL_KEY_DATA = {
    "escape": "\x1b",
    "enter": "\r",
    "tab": "\t",
    "space": " ",
    "backspace": "\x7f",
}

_CSI_U = re.compile(r"^\x1b\[(\d+)(?::\d*)?(?::\d+)?(?:;(\d+))?(?::(\d+))?u$")
_MODIFY_OTHER_KEYS = re.compile(r"^\x1b\[27;(\d+);(\d+)~$")

_KITTY_RELEASE = 3


def _parse_key_id(key_id: str) -> tuple[str, int] | None:
    parts = key_id.lower().split("+")
    key = parts[-1]
    if not key:
        return None
    modifier = 0
    for name in parts[:-1]:
        if name not in MODIFIERS:
            return None
        modifier |= MODIFIERS[name]
    if key == "esc":
        key = "escape"
    elif key == "return":
        key = "enter"
    return key, modifier


def _codepoint(key: str) -> int | None:
    if key in CODEPOINTS:
        return CODEPOINTS[key]
    if len(key) == 1:
        return ord(key)
    return None


def _raw_ctrl_char(key: str) -> str | None:
    """Return the C0 control character sent for ctrl+<key>, if any."""
    if len(key) != 1:
        return None
    code = ord(key)
    if 97 <= code <= 122 or key in "[\\]_":
        return chr(code & 0x1F)
    return None


def _matches_kitty(data: str, codepoint: int, modifier: int) -> bool:
    match = _CSI_U.match(data)
    if not match:
        return False
    if match.group(3) and int(match.group(3)) == _KITTY_RELEASE:
        return False
    actual_mod = (int(match.group(2)) - 1 if match.group(2) else 0) & ~LOCK_MASK
    return int(match.group(1)) == codepoint and actual_mod == modifier


def _matches_modify_other_keys(data: str, codepoint: int, modifier: int) -> bool:
    match = _MODIFY_OTHER_KEYS.match(data)
    if not match:
        return False
    return int(match.group(2)) == codepoint and int(match.group(1)) - 1 == modifier


def matches_key(data: str, key_id: str) -> bool:
    """Return True if the raw input chunk is the key named by key_id.

    Args:
        data: Raw input read from the terminal.
        key_id: Key identifier such as "escape", "enter" or "ctrl+c".
    """
    parsed = _parse_key_id(key_id)
    if parsed is None:
        return False
    key, modifier = parsed
    codepoint = _codepoint(key)
    if codepoint is None:
        return False

    if modifier == 0 and data == LEGACY_SEQUENCES.get(key, key if len(key) == 1 else None):
        return True
    if modifier == MODIFIERS["ctrl"]:
        raw = _raw_ctrl_char(key)
        if raw is not None and data == raw:
            return True
    if _matches_kitty(data, codepoint, modifier):
        return True
    return _matches_modify_other_keys(data, codepoint, modifier)


def key_to_data(key: str, character: str | None = None) -> str:
    """Convert a Textual key name into the raw chunk a terminal would send."""
    if key in _TEXTUAL_KEY_DATA:
        return _TEXTUAL_KEY_DATA[key]
    if key.startswith("ctrl+") and "+" not in key[5:]:
        raw = _raw_ctrl_char(key[5:])
        if raw is not None:
            return raw
    if character is not None:
        return character
    return key
