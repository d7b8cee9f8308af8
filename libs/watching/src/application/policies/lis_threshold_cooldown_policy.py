"""LIS 超閾值警報冷卻策略

LIS 達到設定閾值時觸發，冷卻 30 分鐘
"""

from datetime import datetime, timedelta

from libs.shared.src.constants.watch_cadences import LIS_THRESHOLD_COOLDOWN
from libs.shared.src.dtos.space_weather.risk_assessment_dto import RiskAssessmentDTO
from libs.watching.src.application.policies.cooldown_policy import CooldownPolicy


class LisThresholdCooldownPolicy(CooldownPolicy):
    """LIS 超閾值警報冷卻策略"""

    def __init__(
        self, threshold: float, cooldown: timedelta = LIS_THRESHOLD_COOLDOWN
    ) -> None:
        super().__init__(cooldown)
        self._threshold = threshold

    @property
    def threshold(self) -> float:
        return self._threshold

    def evaluate(self, assessment: RiskAssessmentDTO, now: datetime) -> bool:
        """評估是否需要發送警報

        Args:
            assessment: 風險評分
            now: 目前時間

        Returns:
            bool: LIS >= 閾值且已過冷卻時間
        """
        return assessment["index"] >= self._threshold and self.is_cooled_down(now)
