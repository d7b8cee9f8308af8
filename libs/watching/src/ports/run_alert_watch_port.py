"""
RunAlertWatchPort - Driving Port

實作者: RunAlertWatchCommand
"""

from typing import Protocol


class RunAlertWatchPort(Protocol):
    """每五分鐘 SWPC 警報等級檢查"""

    async def execute(self) -> bool:
        """執行一次檢查

        Returns:
            bool: 是否發送了通知
        """
        ...
