"""SWPC 警報等級變化策略

G/R/S 任一達到最低通知等級，且 (G, R, S) 與上次通知不同時觸發
沒有冷卻時間：等級「變化」本身即為閘門
"""

import logging

from libs.shared.src.dtos.space_weather.alert_levels_dto import AlertLevelsDTO

_INITIAL_LEVELS = (0, 0, 0)


class AlertLevelChangedPolicy:
    """SWPC 警報等級變化策略"""

    def __init__(self, g_min: int, r_min: int, s_min: int) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._g_min = g_min
        self._r_min = r_min
        self._s_min = s_min
        self._last_levels: tuple[int, int, int] = _INITIAL_LEVELS

    @property
    def last_levels(self) -> tuple[int, int, int]:
        return self._last_levels

    def evaluate(self, levels: AlertLevelsDTO) -> bool:
        """評估是否需要發送警報

        Args:
            levels: 目前 G/R/S 等級

        Returns:
            bool: 達到通知等級且與上次通知不同
        """
        meets_minimum = (
            levels["g"] >= self._g_min
            or levels["r"] >= self._r_min
            or levels["s"] >= self._s_min
        )
        if not meets_minimum:
            return False

        return (levels["g"], levels["r"], levels["s"]) != self._last_levels

    def mark_sent(self, levels: AlertLevelsDTO) -> None:
        """記錄已通知的等級"""
        self._last_levels = (levels["g"], levels["r"], levels["s"])

    def reset(self) -> None:
        """重置狀態"""
        self._last_levels = _INITIAL_LEVELS
