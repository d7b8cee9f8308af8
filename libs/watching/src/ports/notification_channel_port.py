"""通知頻道 Port"""

from typing import Protocol


class NotificationChannelPort(Protocol):
    """單一通知頻道 (Email/SMS)"""

    name: str

    def send(self, subject: str, body: str) -> bool:
        """發送通知

        Args:
            subject: 主旨
            body: 內文

        Returns:
            bool: 是否成功發送
        """
        ...
