"""Transient confirm hints and their auto-clear timers (UI-agnostic)."""

from __future__ import annotations

import logging

from ...config import ConfirmKeysConfig
from ...host import UIHandle
from ...timers import Scheduler, TimerHandle

logger = logging.getLogger(__name__)


class HintPresenter:
    """Owns the interrupt status hint and the cancel working-message hint.

    Each hint has at most one pending auto-clear timer; showing a hint always
    cancels the previous timer for that hint before scheduling a new one.
    """

    def __init__(self, ui: UIHandle, scheduler: Scheduler, config: ConfirmKeysConfig) -> None:
        self._ui = ui
        self._scheduler = scheduler
        self._config = config
        self._interrupt_timer: TimerHandle | None = None
        self._cancel_timer: TimerHandle | None = None
        self._cancel_hint_active = False

    @property
    def interrupt_hint_pending(self) -> bool:
        return self._interrupt_timer is not None

    @property
    def cancel_hint_active(self) -> bool:
        return self._cancel_hint_active

    def show_interrupt_hint(self) -> None:
        self.clear_interrupt_hint()
        hints = self._config.hints
        theme = self._ui.theme
        hint = theme.fg("warning", hints.interrupt_label) + theme.fg("dim", hints.interrupt_instruction)
        # A hint is only shown once its auto-clear is scheduled.
        self._interrupt_timer = self._scheduler.call_later(
            self._config.windows.interrupt_seconds, self._expire_interrupt_hint
        )
        try:
            self._ui.set_status(hints.status_key, hint)
        except Exception:
            self._cancel_interrupt_timer()
            raise

    def clear_interrupt_hint(self) -> None:
        self._cancel_interrupt_timer()
        self._ui.set_status(self._config.hints.status_key, None)

    def show_cancel_hint(self) -> None:
        self.clear_cancel_hint()
        self._cancel_timer = self._scheduler.call_later(
            self._config.windows.cancel_seconds, self._expire_cancel_hint
        )
        try:
            self._ui.set_working_message(self._config.hints.cancel_working_message)
        except Exception:
            self._cancel_cancel_timer()
            raise
        self._cancel_hint_active = True

    def clear_cancel_hint(self) -> None:
        self._cancel_cancel_timer()
        if not self._cancel_hint_active:
            return
        self._cancel_hint_active = False
        self._ui.set_working_message()

    def shutdown(self) -> None:
        """Clear both hint surfaces, leaving no scheduled callbacks behind."""
        self._ui.set_status(self._config.hints.status_key, None)
        self._cancel_interrupt_timer()
        self.clear_cancel_hint()

    def _cancel_interrupt_timer(self) -> None:
        if self._interrupt_timer is not None:
            self._interrupt_timer.cancel()
            self._interrupt_timer = None

    def _cancel_cancel_timer(self) -> None:
        if self._cancel_timer is not None:
            self._cancel_timer.cancel()
            self._cancel_timer = None

    def _expire_interrupt_hint(self) -> None:
        logger.debug("Interrupt hint expired")
        self._interrupt_timer = None
        self._ui.set_status(self._config.hints.status_key, None)

    def _expire_cancel_hint(self) -> None:
        logger.debug("Cancel hint expired")
        self._cancel_timer = None
        self.clear_cancel_hint()
