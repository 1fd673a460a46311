from __future__ import annotations

from confirm_keys.ui.controllers import ExitConfirmationController, ExitDecision


def test_exit_confirmation_requires_two_quick_requests() -> None:
    controller = ExitConfirmationController()
    assert controller.request(10.0) == ExitDecision.CLEAR
    assert controller.request(10.2) == ExitDecision.EXIT

    controller.reset()
    assert controller.request(10.3) == ExitDecision.CLEAR


def test_exit_confirmation_expires() -> None:
    controller = ExitConfirmationController(window=0.5)
    assert controller.request(10.0) == ExitDecision.CLEAR
    assert controller.request(10.5) == ExitDecision.CLEAR
    assert controller.request(10.6) == ExitDecision.EXIT


def test_exit_confirmation_starts_over_after_exit() -> None:
    controller = ExitConfirmationController()
    controller.request(1.0)
    assert controller.request(1.1) == ExitDecision.EXIT
    assert controller.request(1.2) == ExitDecision.CLEAR
