#!/usr/bin/env python
"""Run an interactive demo session with the Ctrl-C / Esc confirm gestures.

Usage:
    confirm-keys [--operation-seconds N] [--config-dir DIR] [--log-file PATH]

Type a line and press Enter to start a simulated operation. While it runs,
press Esc once to see the hint and again to abort. Press Ctrl-C to clear the
input and Ctrl-C again quickly to exit.
"""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..config import ConfigError, load_config
from ..extension import SessionLifecycle, load_extension
from ..ui.controllers import RunOperationFn

logger = logging.getLogger(__name__)


def make_demo_operation(seconds: float) -> RunOperationFn:
    """Return an operation that waits, then echoes its input."""

    async def run_operation(prompt: str) -> str | None:
        await asyncio.sleep(seconds)
        return f"Echo: {prompt}"

    return run_operation


def _configure_logging(log_file: str | None, debug: bool) -> None:
    level = logging.DEBUG if debug else logging.INFO
    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file)
        handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    else:
        # Textual owns the terminal; route records to the devtools console.
        from textual.logging import TextualHandler

        handler = TextualHandler()
    logging.basicConfig(level=level, handlers=[handler], force=True)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="confirm-keys",
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--operation-seconds",
        type=float,
        default=5.0,
        help="Duration of the simulated operation (default: 5)",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory holding an optional confirm-keys.toml (default: cwd)",
    )
    parser.add_argument("--log-file", help="Write log records to this file")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log debug records and show full tracebacks on error",
    )
    args = parser.parse_args(argv)
    if args.operation_seconds <= 0:
        parser.error("--operation-seconds must be positive")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the confirm-keys command.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = _parse_args(argv)
    _configure_logging(args.log_file, args.debug)

    try:
        config = load_config(args.config_dir)
    except (ConfigError, OSError) as e:
        print(f"Config error: {e}", file=sys.stderr)
        if args.debug:
            raise
        return 1

    if config.path is not None:
        logger.info("Loaded config from %s", config.path)

    from ..ui.app import ConfirmKeysApp

    lifecycle = SessionLifecycle()
    load_extension(lifecycle, config)
    app = ConfirmKeysApp(
        make_demo_operation(args.operation_seconds),
        config=config,
        lifecycle=lifecycle,
    )
    try:
        app.run()
    except Exception as e:
        print(f"Unexpected error: {e}", file=sys.stderr)
        if args.debug:
            raise
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
