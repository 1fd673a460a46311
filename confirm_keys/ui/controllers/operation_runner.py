"""In-flight operation lifecycle (UI-agnostic)."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable

logger = logging.getLogger(__name__)

RunOperationFn = Callable[[str], Awaitable[str | None]]


class OperationOutcome(str, Enum):
    COMPLETED = "completed"
    ABORTED = "aborted"
    FAILED = "failed"


@dataclass(slots=True)
class OperationRunner:
    """Manages a single in-flight operation task and collects its results."""

    run_operation: RunOperationFn | None = None
    on_finished: Callable[[OperationOutcome], None] | None = None
    results: list[str] = field(default_factory=list)
    _task: asyncio.Task[Any] | None = None

    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def is_idle(self) -> bool:
        return not self.is_running()

    def start(self, prompt: str) -> asyncio.Task[str | None]:
        if self.is_running():
            raise RuntimeError("Operation already running")
        if self.run_operation is None:
            raise RuntimeError("Operation runner not configured")
        task = asyncio.create_task(self._run(prompt))
        task.add_done_callback(self._finished)
        self._task = task
        return task

    def abort(self) -> bool:
        """Cancel the running operation; returns False when idle."""
        if not self.is_running():
            return False
        assert self._task is not None
        self._task.cancel()
        return True

    async def _run(self, prompt: str) -> str | None:
        assert self.run_operation is not None
        result = await self.run_operation(prompt)
        if result is not None:
            self.results.append(result)
        return result

    def _finished(self, task: asyncio.Task[Any]) -> None:
        if task.cancelled():
            outcome = OperationOutcome.ABORTED
        elif task.exception() is not None:
            logger.error("Operation failed", exc_info=task.exception())
            outcome = OperationOutcome.FAILED
        else:
            outcome = OperationOutcome.COMPLETED
        logger.debug("Operation %s", outcome.value)
        if self.on_finished is not None:
            self.on_finished(outcome)
