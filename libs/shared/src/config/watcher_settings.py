"""Watcher Settings Loader

Reads the watcher configuration from environment variables.
Blank values count as absent; malformed values raise ConfigurationError.
A credential group (SMTP / Twilio) is only kept when every member is present,
a partial group silently disables that channel.
"""

import os
from collections.abc import Mapping
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from libs.shared.src.dtos.settings.watcher_settings_dto import (
    SmtpSettingsDTO,
    TwilioSettingsDTO,
    WatcherSettingsDTO,
)
from libs.shared.src.enums.smtp_tls_mode import SmtpTlsMode
from libs.shared.src.errors.configuration_error import ConfigurationError

DEFAULT_LATITUDE = 28.9
DEFAULT_LONGITUDE = -81.3
DEFAULT_TIMEZONE = "America/New_York"
DEFAULT_LIS_THRESHOLD = 40
DEFAULT_MIN_NOTIFY_LEVEL = 2
DEFAULT_SHORT_BZ_NT = -10.0
DEFAULT_SHORT_SPD_KMS = 600.0
DEFAULT_DAILY_HOUR = 7
DEFAULT_HTTP_TIMEOUT_SEC = 15.0
DEFAULT_LOG_LEVEL = "INFO"

SMTP_DEFAULT_PORTS = {
    SmtpTlsMode.STARTTLS: 587,
    SmtpTlsMode.IMPLICIT: 465,
}

_TRUE_VALUES = ("1", "true", "yes", "y", "on")
_FALSE_VALUES = ("0", "false", "no", "n", "off")


def _get(env: Mapping[str, str], key: str) -> str | None:
    value = env.get(key)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _get_float(env: Mapping[str, str], key: str, default: float) -> float:
    raw = _get(env, key)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(key, raw, "not a number")


def _get_int(
    env: Mapping[str, str], key: str, default: int, low: int, high: int
) -> int:
    raw = _get(env, key)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        raise ConfigurationError(key, raw, "not an integer")
    if not low <= value <= high:
        raise ConfigurationError(key, raw, f"must be within [{low}, {high}]")
    return value


def _get_bool(env: Mapping[str, str], key: str, default: bool) -> bool:
    raw = _get(env, key)
    if raw is None:
        return default
    lowered = raw.lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigurationError(key, raw, "not a boolean")


def _load_zone(env: Mapping[str, str]) -> tuple[str, ZoneInfo]:
    name = _get(env, "LOCAL_TZ") or DEFAULT_TIMEZONE
    try:
        return name, ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ConfigurationError("LOCAL_TZ", name, "unknown time zone")


def _load_smtp(env: Mapping[str, str]) -> SmtpSettingsDTO | None:
    server = _get(env, "SMTP_SERVER")
    username = _get(env, "SMTP_USERNAME")
    password = _get(env, "SMTP_PASSWORD")
    email_from = _get(env, "EMAIL_FROM")
    email_to = _get(env, "EMAIL_TO")
    if not (server and username and password and email_from and email_to):
        return None

    tls_raw = (_get(env, "SMTP_TLS") or SmtpTlsMode.STARTTLS.value).lower()
    try:
        tls_mode = SmtpTlsMode(tls_raw)
    except ValueError:
        raise ConfigurationError("SMTP_TLS", tls_raw, "expected starttls or implicit")

    port = _get_int(env, "SMTP_PORT", SMTP_DEFAULT_PORTS[tls_mode], 1, 65535)
    recipients = [r.strip() for r in email_to.split(",") if r.strip()]

    return {
        "server": server,
        "port": port,
        "tls_mode": tls_mode.value,
        "username": username,
        "password": password,
        "email_from": email_from,
        "email_to": recipients,
    }


def _load_twilio(env: Mapping[str, str]) -> TwilioSettingsDTO | None:
    account_sid = _get(env, "TWILIO_ACCOUNT_SID")
    auth_token = _get(env, "TWILIO_AUTH_TOKEN")
    from_number = _get(env, "TWILIO_FROM")
    to_number = _get(env, "SMS_TO")
    if not (account_sid and auth_token and from_number and to_number):
        return None

    return {
        "account_sid": account_sid,
        "auth_token": auth_token,
        "from_number": from_number,
        "to_number": to_number,
    }


def load_watcher_settings(environ: Mapping[str, str] | None = None) -> WatcherSettingsDTO:
    """Load watcher settings

    Args:
        environ: Environment mapping (defaults to os.environ)

    Returns:
        WatcherSettingsDTO: Validated settings

    Raises:
        ConfigurationError: A value is present but malformed or out of range
    """
    env = os.environ if environ is None else environ

    latitude = _get_float(env, "LAT", DEFAULT_LATITUDE)
    if not -90.0 <= latitude <= 90.0:
        raise ConfigurationError("LAT", str(latitude), "must be within [-90, 90]")
    longitude = _get_float(env, "LON", DEFAULT_LONGITUDE)
    if not -180.0 <= longitude <= 180.0:
        raise ConfigurationError("LON", str(longitude), "must be within [-180, 180]")

    timezone_name, local_tz = _load_zone(env)

    http_timeout_sec = _get_float(env, "HTTP_TIMEOUT_SEC", DEFAULT_HTTP_TIMEOUT_SEC)
    if http_timeout_sec <= 0:
        raise ConfigurationError(
            "HTTP_TIMEOUT_SEC", str(http_timeout_sec), "must be positive"
        )

    settings: WatcherSettingsDTO = {
        "latitude": latitude,
        "longitude": longitude,
        "timezone_name": timezone_name,
        "local_tz": local_tz,
        "lis_threshold": _get_int(env, "LIS_THRESHOLD", DEFAULT_LIS_THRESHOLD, 0, 100),
        "g_min_notify": _get_int(env, "G_MIN_NOTIFY", DEFAULT_MIN_NOTIFY_LEVEL, 0, 5),
        "r_min_notify": _get_int(env, "R_MIN_NOTIFY", DEFAULT_MIN_NOTIFY_LEVEL, 0, 5),
        "s_min_notify": _get_int(env, "S_MIN_NOTIFY", DEFAULT_MIN_NOTIFY_LEVEL, 0, 5),
        "short_bz_nt": _get_float(env, "SHORT_BZ_NT", DEFAULT_SHORT_BZ_NT),
        "short_spd_kms": _get_float(env, "SHORT_SPD_KMS", DEFAULT_SHORT_SPD_KMS),
        "daily_hour": _get_int(env, "DAILY_REPORT_HOUR", DEFAULT_DAILY_HOUR, 0, 23),
        "http_timeout_sec": http_timeout_sec,
        "startup_baseline": _get_bool(env, "STARTUP_BASELINE", True),
        "log_level": (_get(env, "LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    }

    smtp = _load_smtp(env)
    if smtp is not None:
        settings["smtp"] = smtp
    twilio = _load_twilio(env)
    if twilio is not None:
        settings["twilio"] = twilio

    return settings
