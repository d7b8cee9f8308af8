"""通知閘道 Port"""

from typing import Protocol


class NotificationGatewayPort(Protocol):
    """通知閘道 Port (Email/SMS)"""

    def notify(self, subject: str, body: str) -> dict[str, bool]:
        """發送通知至所有已設定的頻道

        各頻道互相獨立，單一頻道失敗不影響其他頻道

        Args:
            subject: 主旨
            body: 內文

        Returns:
            dict[str, bool]: 頻道名稱 → 是否成功發送
        """
        ...

    def channel_names(self) -> list[str]:
        """已設定的頻道名稱"""
        ...
