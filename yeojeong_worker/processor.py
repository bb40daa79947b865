"""
Task processor for the worker service.

There is no task source: each task is simulated by suspending on the
injected clock for a fixed amount of time.
"""

import structlog

from .domain.ports import Clock
from .infrastructure.clock import utc_timestamp
from .infrastructure.logging import Timer

logger = structlog.get_logger()


class TaskProcessor:
    """Runs one simulated task."""

    def __init__(self, clock: Clock, work_seconds: float) -> None:
        if work_seconds < 0:
            raise ValueError(f"work_seconds must not be negative, got {work_seconds}")
        self._clock = clock
        self._work_seconds = work_seconds

    async def process(self, task_number: int) -> None:
        """
        Process a single task.

        Args:
            task_number: 1-based position of the task in this process run
        """
        logger.info(
            "Processing task",
            task_number=task_number,
            started_at=utc_timestamp(self._clock.now()),
        )

        with Timer() as t:
            await self._clock.sleep(self._work_seconds)

        logger.info(
            "Task completed",
            task_number=task_number,
            duration_ms=t.duration_ms,
        )
