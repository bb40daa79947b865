"""
Main worker loop.

Dependencies are injected via constructor: the processor does the work,
the clock provides the delays and the stop token ends the loop.
"""

import structlog

from .domain.ports import Clock
from .infrastructure.logging import task_context
from .lifecycle import StopToken, WorkerState
from .processor import TaskProcessor

logger = structlog.get_logger()


class TaskLoop:
    """
    Repeats the processor until a stop is requested.

    The stop token is checked only before each iteration. A failed
    iteration is logged and followed by a fixed retry delay; failures are
    never counted, classified or escalated.
    """

    def __init__(
        self,
        processor: TaskProcessor,
        clock: Clock,
        stop_token: StopToken,
        interval_seconds: float,
        error_retry_seconds: float,
    ) -> None:
        if interval_seconds < 0 or error_retry_seconds < 0:
            raise ValueError("Loop delays must not be negative")
        self._processor = processor
        self._clock = clock
        self._stop_token = stop_token
        self._interval_seconds = interval_seconds
        self._error_retry_seconds = error_retry_seconds
        self._task_count = 0

    @property
    def task_count(self) -> int:
        return self._task_count

    async def run(self) -> None:
        """Run until stopped."""
        while self._stop_token.state is WorkerState.RUNNING:
            try:
                self._task_count += 1
                with task_context(str(self._task_count)):
                    await self._processor.process(self._task_count)

                await self._clock.sleep(self._interval_seconds)
            except Exception as e:
                logger.error(
                    "Error processing task",
                    task_number=self._task_count,
                    error=str(e),
                    error_type=type(e).__name__,
                    retry_in_seconds=self._error_retry_seconds,
                    exc_info=True,
                )
                await self._clock.sleep(self._error_retry_seconds)
