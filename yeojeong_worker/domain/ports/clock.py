"""
Outbound port for time.

The task loop only suspends through this port so tests can replace
real delays with a fake clock.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Source of the current time and of timed suspensions."""

    @abstractmethod
    def now(self) -> datetime:
        """Current time as an aware UTC datetime."""
        ...

    @abstractmethod
    async def sleep(self, seconds: float) -> None:
        """
        Suspend the caller.

        Args:
            seconds: Delay length. The delay always runs to completion.
        """
        ...
