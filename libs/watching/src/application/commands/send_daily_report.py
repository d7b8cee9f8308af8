"""發送每日報告 Command

無條件發送，不經過冷卻策略
"""

import logging
from datetime import date

from injector import inject

from libs.shared.src.dtos.settings.watcher_settings_dto import WatcherSettingsDTO
from libs.shared.src.enums.notification_class import NotificationClass
from libs.watching.src.domain.services.report_formatter import build_daily_subject
from libs.watching.src.ports.clock_port import ClockPort
from libs.watching.src.ports.dispatch_notification_port import (
    DispatchNotificationPort,
)
from libs.watching.src.ports.get_status_port import GetStatusPort
from libs.watching.src.ports.send_daily_report_port import SendDailyReportPort


class SendDailyReportCommand(SendDailyReportPort):
    """發送每日太空天氣展望"""

    @inject
    def __init__(
        self,
        settings: WatcherSettingsDTO,
        get_status: GetStatusPort,
        dispatch: DispatchNotificationPort,
        clock: ClockPort,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._settings = settings
        self._get_status = get_status
        self._dispatch = dispatch
        self._clock = clock

    async def execute(self, report_date: date | None = None) -> bool:
        """
        建立完整報告並發送

        Args:
            report_date: 報告日期 (當地)，預設為今天

        Returns:
            bool: 是否至少一個頻道成功發送
        """
        if report_date is None:
            report_date = self._clock.now().astimezone(self._settings["local_tz"]).date()

        status = await self._get_status.execute()
        subject = build_daily_subject(report_date)
        results = await self._dispatch.execute(
            NotificationClass.DAILY, subject, status["body"]
        )
        return any(results.values())
