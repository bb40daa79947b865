"""Worker run state and the stop token that drives it."""

from enum import Enum

import structlog

logger = structlog.get_logger()


class WorkerState(str, Enum):
    RUNNING = "running"
    STOPPING = "stopping"


class StopToken:
    """
    One-shot cancellation token.

    Signal handlers call ``request_stop``; the task loop reads ``state``
    once per iteration, so a stop never interrupts work in progress.
    """

    def __init__(self) -> None:
        self._state = WorkerState.RUNNING
        self._reason: str | None = None

    @property
    def state(self) -> WorkerState:
        return self._state

    @property
    def reason(self) -> str | None:
        return self._reason

    def request_stop(self, reason: str = "requested") -> None:
        """Move the worker from Running to Stopping. Later calls are ignored."""
        if self._state is WorkerState.STOPPING:
            return
        self._reason = reason
        self._state = WorkerState.STOPPING
        logger.info("Stop requested, shutting down gracefully", reason=reason)
