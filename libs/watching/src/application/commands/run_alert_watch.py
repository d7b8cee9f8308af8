"""SWPC 警報等級檢查 Command (每 5 分鐘)

只抓取警報等級；觸發時重新建立完整報告作為通知內文 (內文反映「現在」的資料)
"""

import asyncio
import logging

from injector import inject

from libs.shared.src.enums.notification_class import NotificationClass
from libs.watching.src.application.policies.alert_level_changed_policy import (
    AlertLevelChangedPolicy,
)
from libs.watching.src.domain.services.report_formatter import build_alert_subject
from libs.watching.src.ports.dispatch_notification_port import (
    DispatchNotificationPort,
)
from libs.watching.src.ports.get_status_port import GetStatusPort
from libs.watching.src.ports.run_alert_watch_port import RunAlertWatchPort
from libs.watching.src.ports.telemetry_provider_port import TelemetryProviderPort


class RunAlertWatchCommand(RunAlertWatchPort):
    """SWPC 警報等級檢查

    持有警報等級通知類別的狀態
    """

    @inject
    def __init__(
        self,
        telemetry: TelemetryProviderPort,
        get_status: GetStatusPort,
        dispatch: DispatchNotificationPort,
        policy: AlertLevelChangedPolicy,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._telemetry = telemetry
        self._get_status = get_status
        self._dispatch = dispatch
        self._policy = policy

    async def execute(self) -> bool:
        """執行一次檢查

        Returns:
            bool: 是否發送了通知
        """
        loop = asyncio.get_running_loop()
        levels = await loop.run_in_executor(None, self._telemetry.fetch_alert_levels)

        if not self._policy.evaluate(levels):
            return False

        self._policy.mark_sent(levels)

        try:
            status = await self._get_status.execute()
            body = status["body"]
        except Exception as e:
            self._logger.warning(f"Full report unavailable for alert body: {e}")
            body = "Full status report unavailable."

        subject = build_alert_subject(levels)
        await self._dispatch.execute(NotificationClass.ALERT_LEVEL, subject, body)
        return True
