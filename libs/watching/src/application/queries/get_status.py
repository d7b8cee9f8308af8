"""取得太空天氣狀態 Query

抓取 Kp 預報、L1 Bz/速度、SWPC 警報等級，計算 LIS 並產生報告內文
"""

import asyncio
import logging

from injector import inject

from libs.shared.src.constants.swpc_endpoints import BZ_FIELD, SPEED_FIELD
from libs.shared.src.dtos.settings.watcher_settings_dto import WatcherSettingsDTO
from libs.shared.src.dtos.space_weather.reading_dto import ReadingDTO
from libs.shared.src.dtos.space_weather.status_report_dto import StatusReportDTO
from libs.shared.src.enums.realtime_feed import RealtimeFeed
from libs.watching.src.domain.services.daily_schedule import is_daylight_local
from libs.watching.src.domain.services.report_formatter import format_report
from libs.watching.src.domain.services.risk_scorer import score_local
from libs.watching.src.ports.clock_port import ClockPort
from libs.watching.src.ports.get_status_port import GetStatusPort
from libs.watching.src.ports.telemetry_provider_port import TelemetryProviderPort


class GetStatusQuery(GetStatusPort):
    """取得完整狀態 Query

    四個資料來源並行抓取 (blocking I/O 交由 executor 執行)
    """

    @inject
    def __init__(
        self,
        settings: WatcherSettingsDTO,
        telemetry: TelemetryProviderPort,
        clock: ClockPort,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._settings = settings
        self._telemetry = telemetry
        self._clock = clock

    async def execute(self) -> StatusReportDTO:
        """
        取得目前太空天氣狀態

        Returns:
            StatusReportDTO: 讀數、評分與報告內文
        """
        reading = await self._fetch_reading()

        assessment = score_local(
            reading,
            latitude=self._settings["latitude"],
            short_bz_nt=self._settings["short_bz_nt"],
            short_spd_kms=self._settings["short_spd_kms"],
        )

        now = self._clock.now()
        body = format_report(self._settings, reading, assessment, now)

        self._logger.debug(
            f"LIS {assessment['index']:.1f} ({assessment['category']}), "
            f"short_fuse={assessment['short_fuse']}"
        )

        return {
            "reading": reading,
            "assessment": assessment,
            "body": body,
            "generated_at": now.isoformat(),
        }

    async def _fetch_reading(self) -> ReadingDTO:
        """並行抓取所有遙測資料"""
        loop = asyncio.get_running_loop()

        task_kp = loop.run_in_executor(None, self._telemetry.fetch_kp_max_24h)
        task_bz = loop.run_in_executor(
            None, self._telemetry.fetch_latest_scalar, RealtimeFeed.MAG, BZ_FIELD
        )
        task_speed = loop.run_in_executor(
            None, self._telemetry.fetch_latest_scalar, RealtimeFeed.SPEED, SPEED_FIELD
        )
        task_alerts = loop.run_in_executor(None, self._telemetry.fetch_alert_levels)

        kp, bz, speed, levels = await asyncio.gather(
            task_kp, task_bz, task_speed, task_alerts
        )

        return {
            "kp_max_24h": kp,
            "bz": bz,
            "speed": speed,
            "g_level": levels["g"],
            "r_level": levels["r"],
            "s_level": levels["s"],
            "is_daylight": is_daylight_local(
                self._clock.now(), self._settings["local_tz"]
            ),
        }
