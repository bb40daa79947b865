import asyncio
import signal
import sys

import structlog

from .config import Settings, settings
from .domain.ports import Clock
from .infrastructure.clock import AsyncioClock
from .infrastructure.logging import configure_logging
from .lifecycle import StopToken
from .processor import TaskProcessor
from .task_loop import TaskLoop

configure_logging(settings.service_name)

logger = structlog.get_logger()

SHUTDOWN_SIGNALS = (signal.SIGTERM, signal.SIGINT)


def create_task_loop(worker_settings: Settings, clock: Clock, stop_token: StopToken) -> TaskLoop:
    """Wire up the task loop (Composition Root)."""
    processor = TaskProcessor(clock=clock, work_seconds=worker_settings.task_duration_seconds)
    return TaskLoop(
        processor=processor,
        clock=clock,
        stop_token=stop_token,
        interval_seconds=worker_settings.task_interval_seconds,
        error_retry_seconds=worker_settings.error_retry_seconds,
    )


async def run_worker(
    worker_settings: Settings | None = None,
    clock: Clock | None = None,
    stop_token: StopToken | None = None,
) -> int:
    """
    Run the worker until SIGTERM or SIGINT.

    Returns:
        Process exit code: 0 after a graceful stop, 1 if startup failed
    """
    worker_settings = worker_settings or settings
    clock = clock or AsyncioClock()
    stop_token = stop_token or StopToken()
    loop = asyncio.get_running_loop()

    logger.info(
        "Worker started",
        service=worker_settings.service_name,
        environment=worker_settings.environment,
        version=worker_settings.version,
    )

    # Handle shutdown signals
    for sig in SHUTDOWN_SIGNALS:
        loop.add_signal_handler(sig, stop_token.request_stop, sig.name)

    try:
        try:
            task_loop = create_task_loop(worker_settings, clock, stop_token)
        except Exception as e:
            logger.error("Fatal error", error=str(e), exc_info=True)
            return 1

        await task_loop.run()
    finally:
        for sig in SHUTDOWN_SIGNALS:
            loop.remove_signal_handler(sig)

    logger.info(
        "Worker stopped gracefully",
        tasks_processed=task_loop.task_count,
        reason=stop_token.reason,
    )
    return 0


def main() -> None:
    """Main entry point for the worker."""
    sys.exit(asyncio.run(run_worker()))


if __name__ == "__main__":
    main()
