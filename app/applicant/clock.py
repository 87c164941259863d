from abc import ABC, abstractmethod
from datetime import date, datetime
from zoneinfo import ZoneInfo


class BaseClock(ABC):
    """Source of the current calendar date."""

    @abstractmethod
    def today(self) -> date:
        """Return today's date in the clock's timezone."""


class SystemClock(BaseClock):
    """Reads the system time in a fixed IANA timezone (UTC by default)."""

    def __init__(self, timezone: str = "UTC") -> None:
        self._tz = ZoneInfo(timezone)

    def today(self) -> date:
        return datetime.now(self._tz).date()


class FixedClock(BaseClock):
    """Always returns the same date."""

    def __init__(self, fixed: date) -> None:
        self._fixed = fixed

    def today(self) -> date:
        return self._fixed
