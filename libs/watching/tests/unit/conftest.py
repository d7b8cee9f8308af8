from datetime import datetime, timezone

import pytest

from libs.shared.src.config.watcher_settings import load_watcher_settings
from libs.watching.src.adapters.driven.memory.clock_fake_adapter import (
    ClockFakeAdapter,
)
from libs.watching.src.adapters.driven.memory.notification_gateway_fake_adapter import (
    NotificationGatewayFakeAdapter,
)
from libs.watching.src.adapters.driven.memory.telemetry_fake_adapter import (
    TelemetryFakeAdapter,
)
from libs.watching.src.application.commands.dispatch_notification import (
    DispatchNotificationCommand,
)
from libs.watching.src.application.queries.get_status import GetStatusQuery

# 2026-10-18 12:00 EDT，日間
NOON_EDT = datetime(2026, 10, 18, 16, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings() -> dict:
    """預設設定 (LAT 28.9, America/New_York)"""
    return load_watcher_settings({})


@pytest.fixture
def clock() -> ClockFakeAdapter:
    return ClockFakeAdapter(NOON_EDT)


@pytest.fixture
def telemetry() -> TelemetryFakeAdapter:
    return TelemetryFakeAdapter()


@pytest.fixture
def gateway() -> NotificationGatewayFakeAdapter:
    return NotificationGatewayFakeAdapter()


@pytest.fixture
def dispatch(gateway) -> DispatchNotificationCommand:
    return DispatchNotificationCommand(notification_gateway=gateway)


@pytest.fixture
def get_status(settings, telemetry, clock) -> GetStatusQuery:
    return GetStatusQuery(settings=settings, telemetry=telemetry, clock=clock)
