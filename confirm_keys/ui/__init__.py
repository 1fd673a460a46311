"""UI components for confirm-keys."""
from .theme import RichTheme, markup_to_plain

__all__ = [
    "RichTheme",
    "markup_to_plain",
]
