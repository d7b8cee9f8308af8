"""執行太空天氣監看 Command

四個獨立迴圈，各自的週期與錯誤邊界:
- Fast (60s): short-fuse / LIS 閾值
- Alerts (5m): SWPC 警報等級變化
- Warm-cache (30m): Kp 預報預熱
- Daily: 對齊當地固定時刻的每日報告

任一迴圈的 tick 失敗只記錄，不影響其他迴圈也不終止程序
"""

import asyncio
import logging
import time
from collections.abc import Awaitable, Callable
from datetime import date, datetime

from injector import inject

from libs.shared.src.constants.watch_cadences import (
    ALERT_WATCH_PERIOD_SEC,
    FAST_WATCH_PERIOD_SEC,
    FORECAST_WARM_PERIOD_SEC,
)
from libs.shared.src.dtos.settings.watcher_settings_dto import WatcherSettingsDTO
from libs.watching.src.domain.services.daily_schedule import (
    next_daily_fire,
    seconds_until,
)
from libs.watching.src.ports.clock_port import ClockPort
from libs.watching.src.ports.run_alert_watch_port import RunAlertWatchPort
from libs.watching.src.ports.run_fast_watch_port import RunFastWatchPort
from libs.watching.src.ports.run_watcher_port import RunWatcherPort
from libs.watching.src.ports.send_daily_report_port import SendDailyReportPort
from libs.watching.src.ports.send_startup_baseline_port import (
    SendStartupBaselinePort,
)
from libs.watching.src.ports.warm_forecast_port import WarmForecastPort

SleepFunc = Callable[[float], Awaitable[None]]


class RunWatcherCommand(RunWatcherPort):
    """Cadence Scheduler

    每個通知類別的狀態由對應的 tick command 持有，迴圈之間不共享可變狀態
    """

    @inject
    def __init__(
        self,
        settings: WatcherSettingsDTO,
        clock: ClockPort,
        fast_watch: RunFastWatchPort,
        alert_watch: RunAlertWatchPort,
        warm_forecast: WarmForecastPort,
        daily_report: SendDailyReportPort,
        startup_baseline: SendStartupBaselinePort,
        sleep: SleepFunc = asyncio.sleep,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._settings = settings
        self._clock = clock
        self._fast_watch = fast_watch
        self._alert_watch = alert_watch
        self._warm_forecast = warm_forecast
        self._daily_report = daily_report
        self._startup_baseline = startup_baseline
        self._sleep = sleep

    async def execute(self) -> None:
        """執行基準報告與四個獨立迴圈 (不會返回)"""
        if self._settings["startup_baseline"]:
            await self._guarded("startup-baseline", self._startup_baseline.execute)

        await asyncio.gather(
            self.run_periodic("fast", FAST_WATCH_PERIOD_SEC, self._fast_watch.execute),
            self.run_periodic(
                "alerts", ALERT_WATCH_PERIOD_SEC, self._alert_watch.execute
            ),
            self.run_periodic(
                "warm-cache", FORECAST_WARM_PERIOD_SEC, self._warm_forecast.execute
            ),
            self.run_daily(),
        )

    async def run_periodic(
        self,
        name: str,
        period_sec: float,
        tick: Callable[[], Awaitable[object]],
        iterations: int | None = None,
    ) -> None:
        """固定週期迴圈

        第一次 tick 立即執行，之後每 period_sec 一次 (扣除 tick 本身耗時)

        Args:
            name: 迴圈名稱 (記錄用)
            period_sec: 週期秒數
            tick: 每次執行的 coroutine function
            iterations: 執行次數上限 (None 表示無限)
        """
        self._logger.info(f"Loop {name} started (every {period_sec}s)")
        count = 0
        while iterations is None or count < iterations:
            started = time.monotonic()
            await self._guarded(name, tick)
            count += 1
            if iterations is not None and count >= iterations:
                break
            elapsed = time.monotonic() - started
            await self._sleep(max(0.0, period_sec - elapsed))

    async def run_daily(self, iterations: int | None = None) -> None:
        """每日報告迴圈

        Idle → ComputeNextFire → Sleeping → Fire → Idle
        每次都由當地日曆重新計算下一次觸發時間；同一當地日期不重複發送

        Args:
            iterations: 發送次數上限 (None 表示無限)
        """
        tz = self._settings["local_tz"]
        hour = self._settings["daily_hour"]
        last_fired_on: date | None = None
        fired = 0

        while iterations is None or fired < iterations:
            target = next_daily_fire(self._clock.now(), tz, hour)
            self._logger.info(f"Next daily report at {target.isoformat()}")

            await self._sleep_until(target)

            report_date = target.date()
            if report_date == last_fired_on:
                self._logger.warning(
                    f"Daily report for {report_date} already sent, skipping"
                )
                continue

            await self._guarded(
                "daily", lambda: self._daily_report.execute(report_date)
            )
            last_fired_on = report_date
            fired += 1

    async def _sleep_until(self, target: datetime) -> None:
        """睡眠至目標時間；提早喚醒時重新確認 now >= target"""
        while True:
            remaining = seconds_until(target, self._clock.now())
            if remaining <= 0:
                return
            await self._sleep(remaining)

    async def _guarded(self, name: str, tick: Callable[[], Awaitable[object]]) -> None:
        """tick 層級的錯誤邊界"""
        try:
            await tick()
        except Exception:
            self._logger.exception(f"Loop {name} tick failed")
