"""Protocol definitions for the host extension contract.

The extension only talks to the host application through these interfaces,
so any frontend (the bundled Textual app, a test double, another TUI) can
load it.
"""
from __future__ import annotations

from typing import Callable, Mapping, Protocol


class Theme(Protocol):
    """Styled text rendering for hint content."""

    def fg(self, style: str, text: str) -> str:
        """Return text rendered with the named style."""
        ...

    def define(self, styles: Mapping[str, str], *, override: bool = False) -> None:
        """Register named styles; existing names win unless override is set."""
        ...


class UIHandle(Protocol):
    """UI surface the host exposes to extensions."""

    @property
    def theme(self) -> Theme: ...

    def set_status(self, key: str, content: str | None) -> None:
        """Set the keyed status-line entry, or clear it when content is None."""
        ...

    def set_working_message(self, text: str | None = None) -> None:
        """Override the in-progress indicator text, or restore the default."""
        ...


class EditorBase(Protocol):
    """The host's own input handling that extensions wrap."""

    def handle_input(self, data: str) -> None: ...

    def is_showing_autocomplete(self) -> bool: ...


class InputHandler(Protocol):
    def handle_input(self, data: str) -> None: ...


EditorFactory = Callable[[EditorBase], InputHandler]


class SessionContext(Protocol):
    """Context passed to lifecycle hooks."""

    @property
    def has_ui(self) -> bool: ...

    @property
    def ui(self) -> UIHandle: ...

    def is_idle(self) -> bool:
        """True when no operation is running."""
        ...

    def set_editor_component(self, factory: EditorFactory) -> None:
        """Install a custom input handler built around the host's base editor."""
        ...
