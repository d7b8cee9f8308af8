"""冷卻時間策略基底

記錄單一通知類別的最後發送時間 (程序重啟即重置，不持久化)
"""

import logging
from datetime import datetime, timedelta, timezone

# 「從未發送」哨兵值
NEVER = datetime.min.replace(tzinfo=timezone.utc)


class CooldownPolicy:
    """冷卻時間策略

    每個實例只由一個輪詢迴圈持有與修改
    """

    def __init__(self, cooldown: timedelta) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._cooldown = cooldown
        self._last_sent_at: datetime = NEVER

    @property
    def last_sent_at(self) -> datetime:
        return self._last_sent_at

    def is_cooled_down(self, now: datetime) -> bool:
        """距上次發送是否已超過冷卻時間"""
        return now - self._last_sent_at >= self._cooldown

    def mark_sent(self, now: datetime) -> None:
        """記錄發送 (發送失敗亦計入冷卻)"""
        self._last_sent_at = now

    def reset(self) -> None:
        """重置狀態"""
        self._last_sent_at = NEVER
