"""Shared test fixtures and fakes for the confirm-keys test suite.

The fakes stand in for the host: a manual clock, a scheduler that only fires
timers when the test advances time, a recording UI handle, a recording base
editor and a session context.
"""
from __future__ import annotations

from typing import Callable

import pytest

from confirm_keys.config import ConfirmKeysConfig
from confirm_keys.ui.controllers import HintPresenter, KeyArbiter
from confirm_keys.ui.theme import RichTheme


class FakeClock:
    """Monotonic clock the test moves by hand (seconds)."""

    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


class FakeTimer:
    def __init__(self, when: float, callback: Callable[[], None]) -> None:
        self.when = when
        self.callback = callback
        self.cancelled = False
        self.fired = False
        self.cancel_calls = 0

    def cancel(self) -> None:
        self.cancel_calls += 1
        self.cancelled = True


class FakeScheduler:
    """Scheduler driven by FakeClock; timers fire only inside advance()."""

    def __init__(self, clock: FakeClock) -> None:
        self.clock = clock
        self.timers: list[FakeTimer] = []
        self.fail = False

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        if self.fail:
            raise RuntimeError("no running event loop")
        timer = FakeTimer(self.clock.now + delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def live(self) -> list[FakeTimer]:
        return [t for t in self.timers if not t.cancelled and not t.fired]

    def advance_ms(self, ms: float) -> None:
        target = self.clock.now + ms / 1000
        while True:
            due = [t for t in self.live if t.when <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.when)
            self.clock.now = timer.when
            timer.fired = True
            timer.callback()
        self.clock.now = target


class FakeUI:
    """Records status and working-message calls like a host UI would."""

    def __init__(self) -> None:
        self.theme = RichTheme({"warning": "bold yellow", "dim": "dim"})
        self.statuses: dict[str, str] = {}
        self.working_message: str | None = None
        self.working_calls: list[str | None] = []
        self.fail_working_message = False
        self.fail_status = False

    def set_status(self, key: str, content: str | None) -> None:
        if self.fail_status:
            raise RuntimeError("status bar unavailable")
        if content is None:
            self.statuses.pop(key, None)
        else:
            self.statuses[key] = content

    def set_working_message(self, text: str | None = None) -> None:
        if self.fail_working_message:
            raise RuntimeError("working indicator unavailable")
        self.working_calls.append(text)
        self.working_message = text


class FakeBase:
    """Base editor that records every forwarded chunk."""

    def __init__(self) -> None:
        self.forwarded: list[str] = []
        self.autocomplete = False

    def handle_input(self, data: str) -> None:
        self.forwarded.append(data)

    def is_showing_autocomplete(self) -> bool:
        return self.autocomplete


class FakeSession:
    def __init__(self, ui: FakeUI, has_ui: bool = True) -> None:
        self.has_ui = has_ui
        self.ui = ui
        self.idle = True
        self.idle_error: Exception | None = None
        self.editor_factory = None

    def is_idle(self) -> bool:
        if self.idle_error is not None:
            raise self.idle_error
        return self.idle

    def set_editor_component(self, factory) -> None:
        self.editor_factory = factory


@pytest.fixture
def config() -> ConfirmKeysConfig:
    return ConfirmKeysConfig()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def scheduler(clock: FakeClock) -> FakeScheduler:
    return FakeScheduler(clock)


@pytest.fixture
def ui() -> FakeUI:
    return FakeUI()


@pytest.fixture
def base() -> FakeBase:
    return FakeBase()


@pytest.fixture
def session(ui: FakeUI) -> FakeSession:
    return FakeSession(ui)


@pytest.fixture
def headless_session(ui: FakeUI) -> FakeSession:
    return FakeSession(ui, has_ui=False)


@pytest.fixture
def presenter(ui: FakeUI, scheduler: FakeScheduler, config: ConfirmKeysConfig) -> HintPresenter:
    return HintPresenter(ui, scheduler, config)


@pytest.fixture
def arbiter(
    base: FakeBase,
    presenter: HintPresenter,
    session: FakeSession,
    config: ConfirmKeysConfig,
    clock: FakeClock,
) -> KeyArbiter:
    return KeyArbiter(base, presenter, lambda: not session.is_idle(), config, clock=clock)


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"
