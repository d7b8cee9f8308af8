"""System Clock Adapter"""

from datetime import datetime, timezone

from libs.watching.src.ports.clock_port import ClockPort


class SystemClockAdapter(ClockPort):
    """Wall clock in UTC"""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)
