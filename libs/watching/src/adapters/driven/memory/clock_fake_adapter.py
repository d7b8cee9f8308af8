"""Clock Fake Adapter

用於測試時控制目前時間
"""

from datetime import datetime, timedelta

from libs.watching.src.ports.clock_port import ClockPort


class ClockFakeAdapter(ClockPort):
    """時鐘 Fake"""

    def __init__(self, now: datetime) -> None:
        self._now = now

    def set_now(self, now: datetime) -> None:
        self._now = now

    def advance(self, delta: timedelta) -> None:
        self._now = self._now + delta

    def now(self) -> datetime:
        return self._now
