"""Watching CLI Controller

Driving Adapter: 將 CLI 指令轉換為 Use Case 調用
"""

from injector import Injector

from libs.shared.src.dtos.settings.watcher_settings_dto import WatcherSettingsDTO
from libs.watching.src.domain.services.daily_schedule import next_daily_fire
from libs.watching.src.ports.clock_port import ClockPort
from libs.watching.src.ports.get_status_port import GetStatusPort
from libs.watching.src.ports.notification_gateway_port import (
    NotificationGatewayPort,
)
from libs.watching.src.ports.run_watcher_port import RunWatcherPort
from libs.watching.src.ports.send_daily_report_port import SendDailyReportPort


class WatchingController:
    """太空天氣監看 CLI 控制器"""

    def __init__(self, injector: Injector) -> None:
        self._injector = injector

    async def run(self) -> None:
        """啟動監看 (基準報告 + 所有迴圈，不會返回)"""
        command = self._injector.get(RunWatcherPort)
        await command.execute()

    async def status(self) -> None:
        """印出目前狀態報告"""
        query = self._injector.get(GetStatusPort)
        report = await query.execute()
        print(report["body"])

    async def daily(self) -> None:
        """立即發送每日報告"""
        command = self._injector.get(SendDailyReportPort)
        delivered = await command.execute()
        if not delivered:
            print("❌ Daily report was not delivered by any channel")

    def next_daily(self) -> str:
        """下一次每日報告的當地時間"""
        settings = self._injector.get(WatcherSettingsDTO)
        clock = self._injector.get(ClockPort)
        target = next_daily_fire(
            clock.now(), settings["local_tz"], settings["daily_hour"]
        )
        return target.isoformat()

    def channels(self) -> list[str]:
        """已啟用的通知通道"""
        gateway = self._injector.get(NotificationGatewayPort)
        return gateway.channel_names()
