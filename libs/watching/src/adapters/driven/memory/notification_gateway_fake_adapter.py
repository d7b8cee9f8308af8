"""通知閘道 Fake Adapter"""

from datetime import datetime, timezone

from libs.shared.src.dtos.space_weather.sent_notification_dto import (
    SentNotificationDTO,
)
from libs.watching.src.ports.notification_gateway_port import NotificationGatewayPort


class NotificationGatewayFakeAdapter(NotificationGatewayPort):
    """通知閘道 Fake"""

    def __init__(self, channels: list[str] | None = None) -> None:
        self._channels = channels if channels is not None else ["email"]
        self._sent_messages: list[SentNotificationDTO] = []
        self._should_fail = False

    def set_should_fail(self, should_fail: bool) -> None:
        self._should_fail = should_fail

    def channel_names(self) -> list[str]:
        return list(self._channels)

    def notify(self, subject: str, body: str) -> dict[str, bool]:
        if self._should_fail:
            return {channel: False for channel in self._channels}
        self._sent_messages.append(
            {
                "subject": subject,
                "body": body,
                "channels": list(self._channels),
                "sent_at": datetime.now(timezone.utc).isoformat(),
            }
        )
        return {channel: True for channel in self._channels}

    def get_sent_messages(self) -> list[SentNotificationDTO]:
        return self._sent_messages
