"""Sent Notification DTO"""

from typing import TypedDict


class SentNotificationDTO(TypedDict):
    """Notification recorded by the in-memory gateway"""

    subject: str
    body: str
    channels: list[str]
    sent_at: str  # ISO 8601 (UTC)
