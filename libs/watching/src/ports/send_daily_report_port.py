"""發送每日報告 Driving Port"""

from datetime import date
from typing import Protocol


class SendDailyReportPort(Protocol):
    """發送每日太空天氣展望

    CLI Entry: spaceweather-watcher daily
    """

    async def execute(self, report_date: date | None = None) -> bool:
        """
        建立完整報告並無條件發送

        Args:
            report_date: 報告日期 (當地)，預設為今天

        Returns:
            bool: 是否至少一個頻道成功發送
        """
        ...
