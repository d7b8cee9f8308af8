"""
RunFastWatchPort - Driving Port

實作者: RunFastWatchCommand
"""

from typing import Protocol


class RunFastWatchPort(Protocol):
    """每分鐘即時太陽風檢查"""

    async def execute(self) -> bool:
        """執行一次檢查

        Returns:
            bool: 是否發送了通知
        """
        ...
