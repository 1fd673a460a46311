"""UI widgets for the Textual demo host."""
from .messages import (
    BaseMessage,
    MessageContainer,
    ResultMessage,
    StatusMessage,
    UserMessage,
)

__all__ = [
    "BaseMessage",
    "MessageContainer",
    "ResultMessage",
    "StatusMessage",
    "UserMessage",
]
