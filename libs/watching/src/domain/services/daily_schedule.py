"""Daily Report Schedule

Wall-clock alignment of the daily report to a fixed local hour.
The next fire instant is always re-derived from the local civil date, never by
adding 24h to a previous UTC instant, so DST shifts are absorbed.

DST resolution (deterministic, never raises):
- Ambiguous local time (fall back): earlier occurrence (fold=0)
- Non-existent local time (spring forward): pre-transition offset (fold=0),
  i.e. 02:00 on a US spring-forward day fires at 03:00 daylight time
"""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from libs.shared.src.constants.risk_thresholds import (
    DAYLIGHT_END_HOUR,
    DAYLIGHT_START_HOUR,
)


def local_instant(day: date, hour: int, tz: ZoneInfo) -> datetime:
    """Local `hour:00:00` on a civil date, normalized through UTC"""
    wall = datetime(day.year, day.month, day.day, hour, 0, 0, tzinfo=tz, fold=0)
    return wall.astimezone(timezone.utc).astimezone(tz)


def next_daily_fire(now: datetime, tz: ZoneInfo, hour: int) -> datetime:
    """
    Compute the next daily fire instant

    Today's occurrence if it is still ahead, otherwise tomorrow's occurrence.
    "now" exactly at the fire instant targets tomorrow.

    Args:
        now: Current instant (timezone-aware)
        tz: Observer's local time zone
        hour: Local hour of the report (0-23)

    Returns:
        datetime: Fire instant in the local time zone
    """
    today = now.astimezone(tz).date()
    target = local_instant(today, hour, tz)
    if now.astimezone(timezone.utc) >= target.astimezone(timezone.utc):
        target = local_instant(today + timedelta(days=1), hour, tz)
    return target


def seconds_until(target: datetime, now: datetime) -> float:
    """Seconds to sleep until target, never negative"""
    delta = target.astimezone(timezone.utc) - now.astimezone(timezone.utc)
    return max(0.0, delta.total_seconds())


def is_daylight_local(
    now: datetime,
    tz: ZoneInfo,
    start_hour: int = DAYLIGHT_START_HOUR,
    end_hour: int = DAYLIGHT_END_HOUR,
) -> bool:
    """Local hour within [start_hour, end_hour)"""
    hour = now.astimezone(tz).hour
    return start_hour <= hour < end_hour
