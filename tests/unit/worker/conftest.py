from collections.abc import Awaitable, Callable
from datetime import UTC, datetime, timedelta

import pytest

from yeojeong_worker.config import Settings
from yeojeong_worker.domain.ports import Clock
from yeojeong_worker.lifecycle import StopToken


class FakeClock(Clock):
    """Clock that records sleeps instead of waiting on them."""

    def __init__(self, on_sleep: Callable[[int], Awaitable[None]] | None = None) -> None:
        self.sleeps: list[float] = []
        self._now = datetime(2026, 1, 1, tzinfo=UTC)
        self._on_sleep = on_sleep

    def now(self) -> datetime:
        return self._now

    async def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)
        self._now += timedelta(seconds=seconds)
        if self._on_sleep:
            await self._on_sleep(len(self.sleeps))


@pytest.fixture
def stop_token() -> StopToken:
    return StopToken()


@pytest.fixture
def worker_settings() -> Settings:
    return Settings(
        environment="test",
        git_commit="abc1234",
        task_duration_seconds=5,
        task_interval_seconds=10,
        error_retry_seconds=30,
    )


@pytest.fixture
def stop_after(stop_token):
    """Build a FakeClock that requests a stop on the given sleep call."""

    def _build(call_number: int) -> FakeClock:
        async def on_sleep(count: int) -> None:
            if count == call_number:
                stop_token.request_stop("test")

        return FakeClock(on_sleep=on_sleep)

    return _build


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_clock():
    return FakeClock
