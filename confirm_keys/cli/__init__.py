"""Command-line entry points for confirm-keys."""
