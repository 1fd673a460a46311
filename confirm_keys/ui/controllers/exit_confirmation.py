"""Exit confirmation state (UI-agnostic)."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ...config import INTERRUPT_WINDOW_MS


class ExitDecision(str, Enum):
    CLEAR = "clear"
    EXIT = "exit"


@dataclass(slots=True)
class ExitConfirmationController:
    """Two-step Ctrl-C: clear the input first, exit on a quick second press."""

    window: float = INTERRUPT_WINDOW_MS / 1000
    _requested_at: float | None = None

    def reset(self) -> None:
        self._requested_at = None

    def request(self, now: float) -> ExitDecision:
        if self._requested_at is not None and now - self._requested_at < self.window:
            self._requested_at = None
            return ExitDecision.EXIT
        self._requested_at = now
        return ExitDecision.CLEAR
