"""派送通知 Driving Port"""

from typing import Protocol

from libs.shared.src.enums.notification_class import NotificationClass


class DispatchNotificationPort(Protocol):
    """派送通知"""

    async def execute(
        self, notification_class: NotificationClass, subject: str, body: str
    ) -> dict[str, bool]:
        """
        發送通知，失敗僅記錄不重試

        Args:
            notification_class: 通知類別
            subject: 主旨
            body: 內文

        Returns:
            dict[str, bool]: 頻道名稱 → 是否成功發送
        """
        ...
