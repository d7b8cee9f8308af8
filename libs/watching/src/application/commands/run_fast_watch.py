"""即時太陽風檢查 Command (每 60 秒)

Short-fuse 優先；short-fuse 未發送時才評估 LIS 閾值
"""

import logging

from injector import inject

from libs.shared.src.enums.notification_class import NotificationClass
from libs.watching.src.application.policies.lis_threshold_cooldown_policy import (
    LisThresholdCooldownPolicy,
)
from libs.watching.src.application.policies.short_fuse_cooldown_policy import (
    ShortFuseCooldownPolicy,
)
from libs.watching.src.domain.services.report_formatter import build_risk_subject
from libs.watching.src.ports.clock_port import ClockPort
from libs.watching.src.ports.dispatch_notification_port import (
    DispatchNotificationPort,
)
from libs.watching.src.ports.get_status_port import GetStatusPort
from libs.watching.src.ports.run_fast_watch_port import RunFastWatchPort


class RunFastWatchCommand(RunFastWatchPort):
    """即時太陽風檢查

    持有 short-fuse 與 LIS 兩個通知類別的狀態
    """

    @inject
    def __init__(
        self,
        get_status: GetStatusPort,
        dispatch: DispatchNotificationPort,
        clock: ClockPort,
        short_fuse_policy: ShortFuseCooldownPolicy,
        lis_policy: LisThresholdCooldownPolicy,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._get_status = get_status
        self._dispatch = dispatch
        self._clock = clock
        self._short_fuse_policy = short_fuse_policy
        self._lis_policy = lis_policy

    async def execute(self) -> bool:
        """執行一次檢查

        Returns:
            bool: 是否發送了通知
        """
        status = await self._get_status.execute()
        assessment = status["assessment"]
        now = self._clock.now()

        if self._short_fuse_policy.evaluate(assessment, now):
            notification_class = NotificationClass.SHORT_FUSE
            policy = self._short_fuse_policy
        elif self._lis_policy.evaluate(assessment, now):
            notification_class = NotificationClass.LIS_THRESHOLD
            policy = self._lis_policy
        else:
            return False

        # 先記錄再發送：發送失敗仍計入冷卻
        policy.mark_sent(now)
        subject = build_risk_subject(assessment)
        await self._dispatch.execute(notification_class, subject, status["body"])
        return True
