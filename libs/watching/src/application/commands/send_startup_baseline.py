"""發送啟動基準報告 Command"""

import logging

from injector import inject

from libs.shared.src.enums.notification_class import NotificationClass
from libs.watching.src.domain.services.report_formatter import build_baseline_subject
from libs.watching.src.ports.dispatch_notification_port import (
    DispatchNotificationPort,
)
from libs.watching.src.ports.get_status_port import GetStatusPort
from libs.watching.src.ports.send_startup_baseline_port import (
    SendStartupBaselinePort,
)


class SendStartupBaselineCommand(SendStartupBaselinePort):
    """啟動時發送一次完整報告作為基準"""

    @inject
    def __init__(
        self, get_status: GetStatusPort, dispatch: DispatchNotificationPort
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._get_status = get_status
        self._dispatch = dispatch

    async def execute(self) -> bool:
        status = await self._get_status.execute()
        subject = build_baseline_subject(status["assessment"])
        results = await self._dispatch.execute(
            NotificationClass.BASELINE, subject, status["body"]
        )
        return any(results.values())
