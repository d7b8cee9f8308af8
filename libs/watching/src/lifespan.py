"""
Watching Context Lifecycle Management

Follows P&A architecture: Driving Port → Application Service
Driven ports (telemetry, notification gateway, clock) are bound by the app
"""

from injector import Module, provider, singleton

from libs.shared.src.dtos.settings.watcher_settings_dto import WatcherSettingsDTO

# Driving Ports
from libs.watching.src.ports.dispatch_notification_port import (
    DispatchNotificationPort,
)
from libs.watching.src.ports.get_status_port import GetStatusPort
from libs.watching.src.ports.run_alert_watch_port import RunAlertWatchPort
from libs.watching.src.ports.run_fast_watch_port import RunFastWatchPort
from libs.watching.src.ports.run_watcher_port import RunWatcherPort
from libs.watching.src.ports.send_daily_report_port import SendDailyReportPort
from libs.watching.src.ports.send_startup_baseline_port import (
    SendStartupBaselinePort,
)
from libs.watching.src.ports.warm_forecast_port import WarmForecastPort

# Driven Ports
from libs.watching.src.ports.clock_port import ClockPort
from libs.watching.src.ports.notification_gateway_port import (
    NotificationGatewayPort,
)
from libs.watching.src.ports.telemetry_provider_port import TelemetryProviderPort

# Application Services
from libs.watching.src.application.commands.dispatch_notification import (
    DispatchNotificationCommand,
)
from libs.watching.src.application.commands.run_alert_watch import (
    RunAlertWatchCommand,
)
from libs.watching.src.application.commands.run_fast_watch import (
    RunFastWatchCommand,
)
from libs.watching.src.application.commands.run_watcher import RunWatcherCommand
from libs.watching.src.application.commands.send_daily_report import (
    SendDailyReportCommand,
)
from libs.watching.src.application.commands.send_startup_baseline import (
    SendStartupBaselineCommand,
)
from libs.watching.src.application.commands.warm_forecast import (
    WarmForecastCommand,
)
from libs.watching.src.application.queries.get_status import GetStatusQuery

# Policies
from libs.watching.src.application.policies.alert_level_changed_policy import (
    AlertLevelChangedPolicy,
)
from libs.watching.src.application.policies.lis_threshold_cooldown_policy import (
    LisThresholdCooldownPolicy,
)
from libs.watching.src.application.policies.short_fuse_cooldown_policy import (
    ShortFuseCooldownPolicy,
)


class WatchingModule(Module):
    """Watching dependency injection module

    Notification state (cooldowns, last alert levels) lives in the policies,
    one instance per command
    """

    def __init__(self, settings: WatcherSettingsDTO) -> None:
        self._settings = settings

    @singleton
    @provider
    def provide_get_status(
        self, telemetry: TelemetryProviderPort, clock: ClockPort
    ) -> GetStatusPort:
        return GetStatusQuery(settings=self._settings, telemetry=telemetry, clock=clock)

    @singleton
    @provider
    def provide_dispatch_notification(
        self, notification_gateway: NotificationGatewayPort
    ) -> DispatchNotificationPort:
        return DispatchNotificationCommand(notification_gateway=notification_gateway)

    @singleton
    @provider
    def provide_run_fast_watch(
        self,
        get_status: GetStatusPort,
        dispatch: DispatchNotificationPort,
        clock: ClockPort,
    ) -> RunFastWatchPort:
        return RunFastWatchCommand(
            get_status=get_status,
            dispatch=dispatch,
            clock=clock,
            short_fuse_policy=ShortFuseCooldownPolicy(),
            lis_policy=LisThresholdCooldownPolicy(
                threshold=self._settings["lis_threshold"]
            ),
        )

    @singleton
    @provider
    def provide_run_alert_watch(
        self,
        telemetry: TelemetryProviderPort,
        get_status: GetStatusPort,
        dispatch: DispatchNotificationPort,
    ) -> RunAlertWatchPort:
        return RunAlertWatchCommand(
            telemetry=telemetry,
            get_status=get_status,
            dispatch=dispatch,
            policy=AlertLevelChangedPolicy(
                g_min=self._settings["g_min_notify"],
                r_min=self._settings["r_min_notify"],
                s_min=self._settings["s_min_notify"],
            ),
        )

    @singleton
    @provider
    def provide_warm_forecast(self, telemetry: TelemetryProviderPort) -> WarmForecastPort:
        return WarmForecastCommand(telemetry=telemetry)

    @singleton
    @provider
    def provide_send_daily_report(
        self,
        get_status: GetStatusPort,
        dispatch: DispatchNotificationPort,
        clock: ClockPort,
    ) -> SendDailyReportPort:
        return SendDailyReportCommand(
            settings=self._settings,
            get_status=get_status,
            dispatch=dispatch,
            clock=clock,
        )

    @singleton
    @provider
    def provide_send_startup_baseline(
        self, get_status: GetStatusPort, dispatch: DispatchNotificationPort
    ) -> SendStartupBaselinePort:
        return SendStartupBaselineCommand(get_status=get_status, dispatch=dispatch)

    @singleton
    @provider
    def provide_run_watcher(
        self,
        clock: ClockPort,
        fast_watch: RunFastWatchPort,
        alert_watch: RunAlertWatchPort,
        warm_forecast: WarmForecastPort,
        daily_report: SendDailyReportPort,
        startup_baseline: SendStartupBaselinePort,
    ) -> RunWatcherPort:
        return RunWatcherCommand(
            settings=self._settings,
            clock=clock,
            fast_watch=fast_watch,
            alert_watch=alert_watch,
            warm_forecast=warm_forecast,
            daily_report=daily_report,
            startup_baseline=startup_baseline,
        )
