"""Session lifecycle wiring for the confirm-keys extension.

A host owns a ``SessionLifecycle`` and dispatches ``session_start``,
``operation_end`` and ``session_end`` to it. Loading the extension subscribes
its three hooks; on session start it installs the ``KeyArbiter`` as the
host's input handler.
"""
from __future__ import annotations

import logging
import time
from typing import Callable

from .config import ConfirmKeysConfig
from .host import EditorBase, SessionContext
from .timers import AsyncioScheduler, Scheduler
from .ui.controllers import HintPresenter, KeyArbiter

logger = logging.getLogger(__name__)

SESSION_START = "session_start"
OPERATION_END = "operation_end"
SESSION_END = "session_end"
LIFECYCLE_EVENTS = (SESSION_START, OPERATION_END, SESSION_END)

LifecycleHandler = Callable[[SessionContext], None]


class SessionLifecycle:
    """Explicit subscribe/dispatch registry for session lifecycle events."""

    def __init__(self) -> None:
        self._handlers: dict[str, list[LifecycleHandler]] = {name: [] for name in LIFECYCLE_EVENTS}

    def subscribe(self, event: str, handler: LifecycleHandler) -> None:
        self._check_event(event)
        self._handlers[event].append(handler)

    def dispatch(self, event: str, ctx: SessionContext) -> None:
        """Invoke every handler for event in subscription order.

        A failing handler is logged and does not prevent the others from
        running.
        """
        self._check_event(event)
        for handler in list(self._handlers[event]):
            try:
                handler(ctx)
            except Exception:
                logger.exception("Error in %s handler %r", event, handler)

    def _check_event(self, event: str) -> None:
        if event not in self._handlers:
            raise ValueError(f"Unknown lifecycle event: {event!r}")


def apply_extension_defaults(ctx: SessionContext, config: ConfirmKeysConfig) -> None:
    """Install the module's theme styles, keeping any the host already defines."""
    ctx.ui.theme.define(config.theme)


class ConfirmKeysExtension:
    """Ctrl-C / Esc confirm gestures for one host session at a time."""

    def __init__(
        self,
        config: ConfirmKeysConfig | None = None,
        scheduler_factory: Callable[[], Scheduler] = AsyncioScheduler,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._config = config or ConfirmKeysConfig()
        self._scheduler_factory = scheduler_factory
        self._clock = clock
        self.presenter: HintPresenter | None = None

    def register(self, lifecycle: SessionLifecycle) -> None:
        lifecycle.subscribe(SESSION_START, self.on_session_start)
        lifecycle.subscribe(OPERATION_END, self.on_operation_end)
        lifecycle.subscribe(SESSION_END, self.on_session_end)

    def on_session_start(self, ctx: SessionContext) -> None:
        if not ctx.has_ui:
            return
        apply_extension_defaults(ctx, self._config)
        if self.presenter is not None:
            self.presenter.shutdown()

        presenter = HintPresenter(ctx.ui, self._scheduler_factory(), self._config)
        self.presenter = presenter

        def should_arm_cancel() -> bool:
            return not ctx.is_idle()

        def build_editor(base: EditorBase) -> KeyArbiter:
            return KeyArbiter(base, presenter, should_arm_cancel, self._config, clock=self._clock)

        ctx.set_editor_component(build_editor)
        logger.debug("Confirm-key input handler installed")

    def on_operation_end(self, ctx: SessionContext) -> None:
        if not ctx.has_ui or self.presenter is None:
            return
        self.presenter.clear_cancel_hint()

    def on_session_end(self, ctx: SessionContext) -> None:
        if not ctx.has_ui or self.presenter is None:
            return
        self.presenter.shutdown()
        self.presenter = None


def load_extension(
    lifecycle: SessionLifecycle,
    config: ConfirmKeysConfig | None = None,
    scheduler_factory: Callable[[], Scheduler] = AsyncioScheduler,
    clock: Callable[[], float] = time.monotonic,
) -> ConfirmKeysExtension:
    """Build the extension and subscribe it to a host lifecycle."""
    extension = ConfirmKeysExtension(config, scheduler_factory=scheduler_factory, clock=clock)
    extension.register(lifecycle)
    return extension
