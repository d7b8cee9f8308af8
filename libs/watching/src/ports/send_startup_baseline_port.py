"""發送啟動基準報告 Driving Port"""

from typing import Protocol


class SendStartupBaselinePort(Protocol):
    """啟動時發送一次基準報告"""

    async def execute(self) -> bool:
        """
        Returns:
            bool: 是否至少一個頻道成功發送
        """
        ...
