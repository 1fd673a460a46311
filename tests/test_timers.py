"""Tests for the asyncio-backed scheduler."""
import asyncio

import pytest

from confirm_keys.config import ConfirmKeysConfig, WindowSettings
from confirm_keys.timers import AsyncioScheduler
from confirm_keys.ui.controllers import HintPresenter


@pytest.mark.anyio
async def test_timer_fires_after_delay():
    fired = []
    handle = AsyncioScheduler().call_later(0.01, lambda: fired.append("fired"))

    await asyncio.sleep(0.05)

    assert fired == ["fired"]
    # Cancelling a fired handle is a no-op.
    handle.cancel()
    handle.cancel()


@pytest.mark.anyio
async def test_cancelled_timer_never_fires():
    fired = []
    handle = AsyncioScheduler().call_later(0.01, lambda: fired.append("fired"))

    handle.cancel()
    handle.cancel()
    await asyncio.sleep(0.05)

    assert fired == []


@pytest.mark.anyio
async def test_explicit_loop_is_used():
    fired = []
    scheduler = AsyncioScheduler(asyncio.get_running_loop())
    scheduler.call_later(0, lambda: fired.append("fired"))

    await asyncio.sleep(0.01)

    assert fired == ["fired"]


def test_scheduling_without_running_loop_fails():
    with pytest.raises(RuntimeError):
        AsyncioScheduler().call_later(0.01, lambda: None)


@pytest.mark.anyio
async def test_hints_auto_clear_on_real_loop(ui):
    config = ConfirmKeysConfig(windows=WindowSettings(interrupt_ms=20, cancel_ms=20))
    presenter = HintPresenter(ui, AsyncioScheduler(), config)

    presenter.show_interrupt_hint()
    presenter.show_cancel_hint()
    assert ui.working_message == "Working... · Esc again aborts"

    await asyncio.sleep(0.1)

    assert ui.statuses == {}
    assert ui.working_message is None
    assert presenter.interrupt_hint_pending is False
    assert presenter.cancel_hint_active is False
