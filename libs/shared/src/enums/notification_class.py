"""Notification Class Enum"""

from enum import Enum


class NotificationClass(Enum):
    """Notification class, each owned by exactly one loop"""

    SHORT_FUSE = "SHORT_FUSE"
    LIS_THRESHOLD = "LIS_THRESHOLD"
    ALERT_LEVEL = "ALERT_LEVEL"
    DAILY = "DAILY"
    BASELINE = "BASELINE"
