"""
WarmForecastPort - Driving Port

實作者: WarmForecastCommand
"""

from typing import Protocol


class WarmForecastPort(Protocol):
    """每三十分鐘預熱 Kp 預報 (不發送通知)"""

    async def execute(self) -> float:
        """抓取一次 Kp 預報

        Returns:
            float: 未來 24 小時 Kp 最大值
        """
        ...
