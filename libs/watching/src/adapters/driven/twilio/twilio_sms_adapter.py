"""Twilio SMS Adapter

Implements NotificationChannelPort
Uses the Twilio REST client
"""

import logging

from twilio.http.http_client import TwilioHttpClient
from twilio.rest import Client

from libs.shared.src.dtos.settings.watcher_settings_dto import TwilioSettingsDTO
from libs.watching.src.ports.notification_channel_port import (
    NotificationChannelPort,
)


class TwilioSmsAdapter(NotificationChannelPort):
    """Twilio SMS Adapter

    Settings come from the Twilio credential group:
    - TWILIO_ACCOUNT_SID / TWILIO_AUTH_TOKEN
    - TWILIO_FROM / SMS_TO
    """

    name = "sms"

    def __init__(
        self,
        settings: TwilioSettingsDTO,
        timeout: float = 15.0,
        client: Client | None = None,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._settings = settings
        self._client = client or Client(
            settings["account_sid"],
            settings["auth_token"],
            http_client=TwilioHttpClient(timeout=timeout),
        )

    def send(self, subject: str, body: str) -> bool:
        """Send subject and body as one SMS"""
        try:
            message = self._client.messages.create(
                body=f"{subject}\n{body}",
                from_=self._settings["from_number"],
                to=self._settings["to_number"],
            )
        except Exception as e:
            self._logger.warning(f"SMS send failed: {e}")
            return False

        self._logger.info(f"SMS sent: {subject} (sid {message.sid})")
        return True
