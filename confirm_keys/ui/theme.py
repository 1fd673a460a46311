"""Named-style theme that renders hint text as Rich markup."""
from __future__ import annotations

from typing import Mapping

from rich.markup import escape
from rich.text import Text


class RichTheme:
    """Maps semantic style names ("warning", "dim") to Rich style strings."""

    def __init__(self, styles: Mapping[str, str] | None = None) -> None:
        self._styles: dict[str, str] = dict(styles or {})

    def define(self, styles: Mapping[str, str], *, override: bool = False) -> None:
        for name, style in styles.items():
            if override or name not in self._styles:
                self._styles[name] = style

    def style(self, name: str) -> str | None:
        return self._styles.get(name)

    def fg(self, style: str, text: str) -> str:
        resolved = self._styles.get(style)
        if not resolved:
            return escape(text)
        return f"[{resolved}]{escape(text)}[/]"


def markup_to_plain(markup: str) -> str:
    """Strip Rich markup, e.g. for logging rendered hints."""
    return Text.from_markup(markup).plain
