"""Watcher Settings DTO"""

from typing import NotRequired, TypedDict
from zoneinfo import ZoneInfo


class SmtpSettingsDTO(TypedDict):
    """Email channel credentials (present only when complete)"""

    server: str
    port: int
    tls_mode: str  # starttls | implicit
    username: str
    password: str
    email_from: str
    email_to: list[str]


class TwilioSettingsDTO(TypedDict):
    """SMS channel credentials (present only when complete)"""

    account_sid: str
    auth_token: str
    from_number: str
    to_number: str


class WatcherSettingsDTO(TypedDict):
    """Watcher configuration, loaded once at startup"""

    # Location
    latitude: float
    longitude: float
    timezone_name: str
    local_tz: ZoneInfo

    # Thresholds
    lis_threshold: int
    g_min_notify: int
    r_min_notify: int
    s_min_notify: int
    short_bz_nt: float
    short_spd_kms: float

    # Daily report hour (local)
    daily_hour: int

    # Runtime
    http_timeout_sec: float
    startup_baseline: bool
    log_level: str

    # Channels
    smtp: NotRequired[SmtpSettingsDTO]
    twilio: NotRequired[TwilioSettingsDTO]
