"""Message display widgets for the Textual demo host."""
from __future__ import annotations

from typing import Any

from rich.markup import escape
from textual.containers import ScrollableContainer
from textual.widgets import Static


class BaseMessage(Static):
    """Base class for all message widgets."""

    plain_text: str = ""

    DEFAULT_CSS = """
    BaseMessage {
        width: 100%;
        padding: 0 1;
        margin: 0 0 1 0;
    }
    """


class UserMessage(BaseMessage):
    """Widget for a submitted line of input."""

    DEFAULT_CSS = """
    UserMessage {
        border-left: thick $accent;
    }
    """

    def __init__(self, text: str, **kwargs: Any) -> None:
        super().__init__(f"[bold]>[/bold] {escape(text)}", **kwargs)
        self.plain_text = text


class ResultMessage(BaseMessage):
    """Widget for the output of a finished operation."""

    DEFAULT_CSS = """
    ResultMessage {
        background: $success-darken-3;
        border: solid $success;
    }
    """

    def __init__(self, text: str, **kwargs: Any) -> None:
        super().__init__(escape(text), **kwargs)
        self.plain_text = text


class StatusMessage(BaseMessage):
    """Widget for displaying status updates."""

    DEFAULT_CSS = """
    StatusMessage {
        color: $text-muted;
        margin: 0;
        background: transparent;
        border: none;
    }
    """

    def __init__(self, text: str, **kwargs: Any) -> None:
        super().__init__(f"[dim]{escape(text)}[/dim]", **kwargs)
        self.plain_text = text


class MessageContainer(ScrollableContainer):
    """Scrollable container for all messages."""

    DEFAULT_CSS = """
    MessageContainer {
        height: 1fr;
        padding: 1;
    }
    """

    def _append(self, msg: BaseMessage) -> BaseMessage:
        self.mount(msg)
        self.scroll_end(animate=False)
        return msg

    def add_user_message(self, text: str) -> BaseMessage:
        return self._append(UserMessage(text))

    def add_result(self, text: str) -> BaseMessage:
        return self._append(ResultMessage(text))

    def add_status(self, text: str) -> BaseMessage:
        """Add a status message."""
        return self._append(StatusMessage(text))

    def texts(self) -> list[str]:
        """Plain text of every message, oldest first."""
        return [child.plain_text for child in self.query(BaseMessage)]
