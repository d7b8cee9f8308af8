"""Fan-out Notification Adapter

Implements NotificationGatewayPort
Delivers each notification to every configured channel independently
"""

import logging

from libs.watching.src.ports.notification_channel_port import (
    NotificationChannelPort,
)
from libs.watching.src.ports.notification_gateway_port import (
    NotificationGatewayPort,
)


class FanoutNotificationAdapter(NotificationGatewayPort):
    """Fan-out Notification Adapter

    Only channels with a complete credential set are passed in;
    an empty channel list means notifications are logged only
    """

    def __init__(self, channels: list[NotificationChannelPort]) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._channels = list(channels)

    def channel_names(self) -> list[str]:
        return [channel.name for channel in self._channels]

    def notify(self, subject: str, body: str) -> dict[str, bool]:
        results: dict[str, bool] = {}
        for channel in self._channels:
            try:
                results[channel.name] = bool(channel.send(subject, body))
            except Exception as e:
                self._logger.warning(f"{channel.name} channel error: {e}")
                results[channel.name] = False
        return results
