"""UI-agnostic controllers for the confirm-key gestures.

These components encapsulate stateful input logic (confirm windows, hints,
operation lifecycle) without depending on Textual, so they can be unit tested
and reused by other frontends.
"""

from .exit_confirmation import ExitConfirmationController, ExitDecision
from .hint_presenter import HintPresenter
from .key_arbiter import CANCEL_KEY, INTERRUPT_KEY, KeyArbiter
from .operation_runner import OperationOutcome, OperationRunner, RunOperationFn

__all__ = [
    "ExitConfirmationController",
    "ExitDecision",
    "HintPresenter",
    "KeyArbiter",
    "INTERRUPT_KEY",
    "CANCEL_KEY",
    "OperationRunner",
    "OperationOutcome",
    "RunOperationFn",
]
