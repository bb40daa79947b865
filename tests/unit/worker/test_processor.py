"""Tests for the simulated task processor."""

import pytest
from structlog.testing import capture_logs

from yeojeong_worker.processor import TaskProcessor


class TestTaskProcessor:
    @pytest.mark.asyncio
    async def test_sleeps_for_work_duration(self, clock):
        processor = TaskProcessor(clock=clock, work_seconds=5)

        await processor.process(1)

        assert clock.sleeps == [5]

    @pytest.mark.asyncio
    async def test_logs_start_and_completion(self, clock):
        processor = TaskProcessor(clock=clock, work_seconds=5)

        with capture_logs() as logs:
            await processor.process(3)

        events = [log["event"] for log in logs]
        assert events == ["Processing task", "Task completed"]
        assert all(log["task_number"] == 3 for log in logs)
        assert logs[0]["started_at"] == "2026-01-01T00:00:00.000Z"

    def test_rejects_negative_duration(self, clock):
        with pytest.raises(ValueError):
            TaskProcessor(clock=clock, work_seconds=-1)
