"""執行太空天氣監看 Driving Port"""

from typing import Protocol


class RunWatcherPort(Protocol):
    """啟動所有輪詢迴圈 (程序存活期間持續執行)

    CLI Entry: spaceweather-watcher run
    """

    async def execute(self) -> None:
        """執行基準報告與四個獨立迴圈"""
        ...
