"""時鐘 Port"""

from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """目前時間來源"""

    def now(self) -> datetime:
        """取得目前時間 (timezone-aware, UTC)"""
        ...
