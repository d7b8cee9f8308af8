"""取得太空天氣狀態 Driving Port"""

from typing import Protocol

from libs.shared.src.dtos.space_weather.status_report_dto import StatusReportDTO


class GetStatusPort(Protocol):
    """取得完整狀態 (抓取全部資料、評分、格式化)

    CLI Entry: spaceweather-watcher status
    """

    async def execute(self) -> StatusReportDTO:
        """
        取得目前太空天氣狀態

        Returns:
            StatusReportDTO: 讀數、評分與報告內文
        """
        ...
