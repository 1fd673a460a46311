"""Textual demo host for confirm-keys.

The app implements the host side of the extension contract: a keyed status
bar, a working indicator, a base editor with the default Ctrl-C and Esc
behavior, and the session lifecycle. Every key event is routed through the
installed input handler before Textual sees it.
"""
from __future__ import annotations

import logging
import time
from typing import Callable

from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Static, TextArea

from ..config import ConfirmKeysConfig
from ..extension import OPERATION_END, SESSION_END, SESSION_START, SessionLifecycle
from ..host import EditorFactory, InputHandler
from ..keys import key_to_data, matches_key
from .controllers import (
    CANCEL_KEY,
    INTERRUPT_KEY,
    ExitConfirmationController,
    ExitDecision,
    OperationOutcome,
    OperationRunner,
    RunOperationFn,
)
from .theme import RichTheme, markup_to_plain
from .widgets.messages import MessageContainer

logger = logging.getLogger(__name__)

DEFAULT_WORKING_MESSAGE = "Working..."


class HostUI:
    """UIHandle backed by the Textual app."""

    def __init__(self, app: ConfirmKeysApp) -> None:
        self._app = app
        self._theme = RichTheme()

    @property
    def theme(self) -> RichTheme:
        return self._theme

    def set_status(self, key: str, content: str | None) -> None:
        self._app.update_status(key, content)

    def set_working_message(self, text: str | None = None) -> None:
        self._app.update_working_message(text)


class HostSession:
    """SessionContext handed to lifecycle hooks."""

    has_ui = True

    def __init__(self, app: ConfirmKeysApp) -> None:
        self._app = app
        self.ui = HostUI(app)

    def is_idle(self) -> bool:
        return self._app.runner.is_idle()

    def set_editor_component(self, factory: EditorFactory) -> None:
        self._app.install_editor(factory)


class BaseEditor:
    """The host's default key behavior, wrapped by extensions.

    Ctrl-C clears the input and exits on a quick second press, Esc aborts a
    running operation, Enter submits. Anything else falls through to Textual.
    """

    def __init__(self, app: ConfirmKeysApp) -> None:
        self._app = app

    def is_showing_autocomplete(self) -> bool:
        return False

    def handle_input(self, data: str) -> None:
        app = self._app
        if matches_key(data, INTERRUPT_KEY):
            app.clear_or_exit()
        elif matches_key(data, CANCEL_KEY) and app.runner.is_running():
            app.abort_operation()
        elif matches_key(data, "enter") and app.input_is_active():
            app.submit_current_input()
        else:
            app.pass_through = True


class ConfirmKeysApp(App[None]):
    """Interactive demo session with Ctrl-C / Esc confirm gestures."""

    ENABLE_COMMAND_PALETTE = False

    CSS = """
    Screen {
        layout: vertical;
    }

    #working {
        height: 1;
        padding: 0 1;
        color: $warning;
    }

    #input-container {
        height: auto;
        padding: 0 1;
        background: $surface;
    }

    #user-input {
        width: 100%;
        min-height: 3;
        max-height: 8;
    }

    #status-bar {
        height: 1;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
    ]

    def __init__(
        self,
        run_operation: RunOperationFn,
        config: ConfirmKeysConfig | None = None,
        lifecycle: SessionLifecycle | None = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__()
        self._config = config or ConfirmKeysConfig()
        self._lifecycle = lifecycle or SessionLifecycle()
        self._clock = clock
        self.runner = OperationRunner(run_operation=run_operation, on_finished=self._operation_finished)
        self.session = HostSession(self)
        self.status_entries: dict[str, str] = {}
        self.working_message: str | None = None
        self.pass_through = False
        self._exit_confirmation = ExitConfirmationController(window=self._config.windows.interrupt_seconds)
        self._base_editor = BaseEditor(self)
        self._input_handler: InputHandler = self._base_editor
        self._session_active = False

    def compose(self) -> ComposeResult:
        yield MessageContainer(id="messages")
        yield Static("", id="working")
        yield Vertical(
            TextArea(
                "",
                id="user-input",
                show_line_numbers=False,
                soft_wrap=True,
                tab_behavior="focus",
                placeholder="Type and press Enter to start an operation...",
            ),
            id="input-container",
        )
        yield Static("", id="status-bar")
        yield Footer()

    async def on_mount(self) -> None:
        self.query_one("#user-input", TextArea).focus()
        self._render_working()
        self._session_active = True
        self._lifecycle.dispatch(SESSION_START, self.session)

    async def on_unmount(self) -> None:
        self._end_session()

    async def on_event(self, event: events.Event) -> None:
        # Runs ahead of Textual's binding check: ctrl+q and other bindings
        # only fire when the base editor sets pass_through for the key.
        if isinstance(event, events.Key) and not event.is_forwarded:
            self.pass_through = False
            self._input_handler.handle_input(key_to_data(event.key, event.character))
            if not self.pass_through:
                return
        await super().on_event(event)

    def install_editor(self, factory: EditorFactory) -> None:
        self._input_handler = factory(self._base_editor)

    def input_is_active(self) -> bool:
        """Return True when the input widget is focused and editable."""
        user_input = self.query_one("#user-input", TextArea)
        return user_input.has_focus and not user_input.disabled

    def update_status(self, key: str, content: str | None) -> None:
        if content is None:
            if self.status_entries.pop(key, None) is None:
                return
        else:
            self.status_entries[key] = content
            logger.debug("Status %s: %s", key, markup_to_plain(content))
        for bar in self.query("#status-bar").results(Static):
            bar.update(" ".join(self.status_entries.values()))

    def update_working_message(self, text: str | None = None) -> None:
        self.working_message = text
        self._render_working()

    def current_working_message(self) -> str | None:
        """The indicator text while an operation runs, else None."""
        if not self.runner.is_running():
            return None
        return self.working_message or DEFAULT_WORKING_MESSAGE

    def clear_or_exit(self) -> None:
        if self._exit_confirmation.request(self._clock()) == ExitDecision.EXIT:
            self.end_session_and_exit()
            return
        self.query_one("#user-input", TextArea).text = ""

    def abort_operation(self) -> None:
        if self.runner.abort():
            logger.info("Operation abort requested")

    def submit_current_input(self) -> None:
        """Submit the text area content as a new operation."""
        messages = self.query_one("#messages", MessageContainer)
        if self.runner.is_running():
            messages.add_status("Wait for the current operation to finish.")
            return
        user_input = self.query_one("#user-input", TextArea)
        user_text = user_input.text.strip()
        if not user_text:
            return
        user_input.text = ""
        self._exit_confirmation.reset()
        messages.add_user_message(user_text)
        self.runner.start(user_text)
        self._render_working()

    async def action_quit(self) -> None:
        self.end_session_and_exit()

    def end_session_and_exit(self) -> None:
        """End the session, then exit the app."""
        self._end_session()
        self.exit()

    def _operation_finished(self, outcome: OperationOutcome) -> None:
        for messages in self.query("#messages").results(MessageContainer):
            if outcome == OperationOutcome.ABORTED:
                messages.add_status("Operation aborted.")
            elif outcome == OperationOutcome.FAILED:
                messages.add_status("Operation failed.")
            elif self.runner.results:
                messages.add_result(self.runner.results[-1])
        self._render_working()
        self._lifecycle.dispatch(OPERATION_END, self.session)

    def _render_working(self) -> None:
        message = self.current_working_message()
        for indicator in self.query("#working").results(Static):
            indicator.display = message is not None
            indicator.update(message or "")

    def _end_session(self) -> None:
        if not self._session_active:
            return
        self._session_active = False
        self._lifecycle.dispatch(SESSION_END, self.session)
