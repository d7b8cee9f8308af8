"""Watching App 生命週期管理

Apps 層的 DI 配置，綁定 watching lib 的 driven ports
"""

import logging

from injector import Injector, Module, provider, singleton

# Libs Modules
from libs.watching.src.lifespan import WatchingModule

# Settings
from libs.shared.src.config.watcher_settings import load_watcher_settings
from libs.shared.src.dtos.settings.watcher_settings_dto import WatcherSettingsDTO

# Clients
from libs.shared.src.clients.swpc.swpc_client import SwpcClient

# Driven Ports
from libs.watching.src.ports.clock_port import ClockPort
from libs.watching.src.ports.notification_channel_port import (
    NotificationChannelPort,
)
from libs.watching.src.ports.notification_gateway_port import (
    NotificationGatewayPort,
)
from libs.watching.src.ports.telemetry_provider_port import TelemetryProviderPort

# Driven Adapters
from libs.watching.src.adapters.driven.fanout.fanout_notification_adapter import (
    FanoutNotificationAdapter,
)
from libs.watching.src.adapters.driven.smtp.smtp_email_adapter import (
    SmtpEmailAdapter,
)
from libs.watching.src.adapters.driven.swpc.swpc_telemetry_adapter import (
    SwpcTelemetryAdapter,
)
from libs.watching.src.adapters.driven.system.system_clock_adapter import (
    SystemClockAdapter,
)
from libs.watching.src.adapters.driven.twilio.twilio_sms_adapter import (
    TwilioSmsAdapter,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class WatchingAppModule(Module):
    """Watching App DI 配置

    只有憑證完整的通知通道會被啟用
    """

    def __init__(self, settings: WatcherSettingsDTO) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._settings = settings

    @singleton
    @provider
    def provide_settings(self) -> WatcherSettingsDTO:
        return self._settings

    @singleton
    @provider
    def provide_clock(self) -> ClockPort:
        return SystemClockAdapter()

    @singleton
    @provider
    def provide_swpc_client(self) -> SwpcClient:
        return SwpcClient(timeout=self._settings["http_timeout_sec"])

    @singleton
    @provider
    def provide_telemetry(self, client: SwpcClient, clock: ClockPort) -> TelemetryProviderPort:
        return SwpcTelemetryAdapter(client=client, clock=clock)

    @singleton
    @provider
    def provide_notification_gateway(self) -> NotificationGatewayPort:
        channels: list[NotificationChannelPort] = []
        timeout = self._settings["http_timeout_sec"]

        smtp = self._settings.get("smtp")
        if smtp:
            channels.append(SmtpEmailAdapter(settings=smtp, timeout=timeout))
        else:
            self._logger.info("Email channel disabled (SMTP settings incomplete)")

        twilio = self._settings.get("twilio")
        if twilio:
            channels.append(TwilioSmsAdapter(settings=twilio, timeout=timeout))
        else:
            self._logger.info("SMS channel disabled (Twilio settings incomplete)")

        return FanoutNotificationAdapter(channels)


_injector: Injector | None = None


def startup() -> Injector:
    """啟動 DI 容器

    設定錯誤 (ConfigurationError) 直接向上拋出，程序不會啟動
    """
    global _injector

    settings = load_watcher_settings()

    logging.basicConfig(
        level=getattr(logging, settings["log_level"], logging.INFO),
        format=LOG_FORMAT,
    )

    # 抑制噪音 logger
    logging.getLogger("urllib3").setLevel(logging.WARNING)

    _injector = Injector(
        [
            WatchingModule(settings),
            WatchingAppModule(settings),
        ]
    )
    return _injector


def shutdown() -> None:
    """關閉並釋放資源"""
    global _injector
    if _injector is not None:
        _injector.get(SwpcClient).close()
    _injector = None


def get_injector() -> Injector:
    """取得 DI 容器，若未初始化則自動啟動"""
    global _injector
    if _injector is None:
        startup()
    return _injector
