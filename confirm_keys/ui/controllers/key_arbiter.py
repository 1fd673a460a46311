"""Two-stage confirm arbitration for the interrupt and cancel keys (UI-agnostic).

The arbiter wraps the host's base editor: every raw input chunk goes through
``handle_input`` and is either forwarded to the base editor unchanged or
suppressed. Rendering is delegated to the HintPresenter.
"""

from __future__ import annotations

import logging
import time
from typing import Callable

from ...config import ConfirmKeysConfig
from ...host import EditorBase
from ...keys import matches_key
from .hint_presenter import HintPresenter

logger = logging.getLogger(__name__)

INTERRUPT_KEY = "ctrl+c"
CANCEL_KEY = "escape"


class KeyArbiter:
    """Input handler that turns single guarded presses into confirm gestures.

    Ctrl-C is always forwarded; the first press shows a hint and a second
    press inside the window clears it. Esc is only guarded while the host is
    busy: the first press is swallowed and shows a hint, a second press inside
    the window is forwarded so the host can abort.
    """

    def __init__(
        self,
        base: EditorBase,
        presenter: HintPresenter,
        should_arm_cancel: Callable[[], bool],
        config: ConfirmKeysConfig,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._base = base
        self._presenter = presenter
        self._should_arm_cancel = should_arm_cancel
        self._interrupt_window = config.windows.interrupt_seconds
        self._cancel_window = config.windows.cancel_seconds
        self._clock = clock
        self.last_interrupt_at = float("-inf")
        self.last_cancel_at = float("-inf")

    def is_showing_autocomplete(self) -> bool:
        return self._base.is_showing_autocomplete()

    def handle_input(self, data: str) -> None:
        if matches_key(data, INTERRUPT_KEY):
            self._handle_interrupt(data)
            return

        if matches_key(data, CANCEL_KEY):
            self._handle_cancel(data)
            return

        self._safely(self._presenter.clear_interrupt_hint)
        self._safely(self._presenter.clear_cancel_hint)
        self._base.handle_input(data)

    def _handle_interrupt(self, data: str) -> None:
        now = self._clock()
        is_second_press = now - self.last_interrupt_at < self._interrupt_window
        self.last_interrupt_at = now

        self._safely(self._presenter.clear_cancel_hint)
        if is_second_press:
            logger.debug("Interrupt confirmed")
            self._safely(self._presenter.clear_interrupt_hint)
        else:
            self._safely(self._presenter.show_interrupt_hint)

        self._base.handle_input(data)

    def _handle_cancel(self, data: str) -> None:
        # Autocomplete keeps its own Esc-to-dismiss behavior.
        if self.is_showing_autocomplete() or not self._cancel_armed():
            self._safely(self._presenter.clear_cancel_hint)
            self._base.handle_input(data)
            return

        now = self._clock()
        is_second_press = now - self.last_cancel_at < self._cancel_window
        self.last_cancel_at = now

        self._safely(self._presenter.clear_interrupt_hint)
        if is_second_press:
            logger.debug("Cancel confirmed")
            self._safely(self._presenter.clear_cancel_hint)
            self._base.handle_input(data)
            return

        if not self._safely(self._presenter.show_cancel_hint):
            self._base.handle_input(data)

    def _cancel_armed(self) -> bool:
        try:
            return bool(self._should_arm_cancel())
        except Exception:
            logger.debug("Busy query failed; treating host as idle", exc_info=True)
            return False

    def _safely(self, update: Callable[[], None]) -> bool:
        """Run a hint update; a failing host UI never blocks the key."""
        try:
            update()
        except Exception:
            logger.exception("Hint update %s failed; key handled normally", update.__name__)
            return False
        return True
