"""Short-fuse 警報冷卻策略

L1 太陽風 Bz/速度達到極端條件時觸發，冷卻 10 分鐘
"""

from datetime import datetime, timedelta

from libs.shared.src.constants.watch_cadences import SHORT_FUSE_COOLDOWN
from libs.shared.src.dtos.space_weather.risk_assessment_dto import RiskAssessmentDTO
from libs.watching.src.application.policies.cooldown_policy import CooldownPolicy


class ShortFuseCooldownPolicy(CooldownPolicy):
    """Short-fuse 警報冷卻策略"""

    def __init__(self, cooldown: timedelta = SHORT_FUSE_COOLDOWN) -> None:
        super().__init__(cooldown)

    def evaluate(self, assessment: RiskAssessmentDTO, now: datetime) -> bool:
        """評估是否需要發送警報

        Args:
            assessment: 風險評分
            now: 目前時間

        Returns:
            bool: short-fuse 成立且已過冷卻時間
        """
        return assessment["short_fuse"] and self.is_cooled_down(now)
