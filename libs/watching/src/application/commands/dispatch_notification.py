"""派送通知 Command

實作 DispatchNotificationPort Driving Port
"""

import asyncio
import logging

from injector import inject

from libs.shared.src.enums.notification_class import NotificationClass
from libs.watching.src.ports.dispatch_notification_port import (
    DispatchNotificationPort,
)
from libs.watching.src.ports.notification_gateway_port import (
    NotificationGatewayPort,
)


class DispatchNotificationCommand(DispatchNotificationPort):
    """
    派送通知

    - 各頻道獨立，失敗僅記錄，不重試
    - 不回滾冷卻狀態：發送失敗仍計入冷卻時間
    """

    @inject
    def __init__(self, notification_gateway: NotificationGatewayPort) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._gateway = notification_gateway

    async def execute(
        self, notification_class: NotificationClass, subject: str, body: str
    ) -> dict[str, bool]:
        """
        發送通知

        Args:
            notification_class: 通知類別
            subject: 主旨
            body: 內文

        Returns:
            dict[str, bool]: 頻道名稱 → 是否成功發送
        """
        loop = asyncio.get_running_loop()
        try:
            results = await loop.run_in_executor(
                None, self._gateway.notify, subject, body
            )
        except Exception as e:
            self._logger.warning(f"Notification gateway failed: {e}")
            return {}

        if not results:
            self._logger.info(
                f"No notification channel configured, {notification_class.value} "
                f"not delivered: {subject}"
            )
            return results

        for channel, ok in results.items():
            if ok:
                self._logger.info(f"{notification_class.value} sent via {channel}: {subject}")
            else:
                self._logger.warning(
                    f"{notification_class.value} delivery failed via {channel}: {subject}"
                )
        return results
