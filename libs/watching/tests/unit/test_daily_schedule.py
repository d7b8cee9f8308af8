"""Daily Schedule 單元測試"""

from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from libs.watching.src.domain.services.daily_schedule import (
    is_daylight_local,
    local_instant,
    next_daily_fire,
    seconds_until,
)

NEW_YORK = ZoneInfo("America/New_York")


def fire_dates(start: datetime, hour: int, count: int) -> list[datetime]:
    fires = []
    now = start
    for _ in range(count):
        now = next_daily_fire(now, NEW_YORK, hour)
        fires.append(now)
    return fires


def elapsed(earlier: datetime, later: datetime) -> timedelta:
    return later.astimezone(timezone.utc) - earlier.astimezone(timezone.utc)


class TestNextDailyFire:
    """下一次每日報告時間"""

    def test_exactly_at_fire_time_targets_tomorrow(self) -> None:
        now = datetime(2026, 10, 18, 7, 0, 0, tzinfo=NEW_YORK)

        target = next_daily_fire(now, NEW_YORK, 7)

        assert target == datetime(2026, 10, 19, 7, 0, 0, tzinfo=NEW_YORK)

    def test_before_fire_time_targets_today(self) -> None:
        now = datetime(2026, 10, 18, 6, 59, 59, tzinfo=NEW_YORK)

        target = next_daily_fire(now, NEW_YORK, 7)

        assert target.date() == date(2026, 10, 18)
        assert (target.hour, target.minute) == (7, 0)

    def test_now_given_in_utc(self) -> None:
        """UTC 輸入以當地日曆判斷"""
        now = datetime(2026, 10, 18, 3, 0, tzinfo=timezone.utc)  # 前一日 23:00 EDT

        target = next_daily_fire(now, NEW_YORK, 7)

        assert target.date() == date(2026, 10, 18)

    def test_spring_forward_one_fire_per_civil_day(self) -> None:
        """2026-03-08 夏令時間開始：每個當地日期剛好一次"""
        start = datetime(2026, 3, 5, 12, 0, tzinfo=NEW_YORK)

        fires = fire_dates(start, 7, 6)

        assert [f.date() for f in fires] == [
            date(2026, 3, 6) + timedelta(days=i) for i in range(6)
        ]
        assert all((f.hour, f.minute) == (7, 0) for f in fires)
        # 03-07 → 03-08 只有 23 小時
        assert elapsed(fires[1], fires[2]) == timedelta(hours=23)

    def test_fall_back_one_fire_per_civil_day(self) -> None:
        """2026-11-01 夏令時間結束：每個當地日期剛好一次"""
        start = datetime(2026, 10, 29, 12, 0, tzinfo=NEW_YORK)

        fires = fire_dates(start, 7, 6)

        assert [f.date() for f in fires] == [
            date(2026, 10, 30) + timedelta(days=i) for i in range(6)
        ]
        # 10-31 → 11-01 有 25 小時
        assert elapsed(fires[1], fires[2]) == timedelta(hours=25)

    def test_nonexistent_hour_fires_after_gap(self) -> None:
        """02:00 不存在於 2026-03-08，改在 03:00 EDT 觸發"""
        target = local_instant(date(2026, 3, 8), 2, NEW_YORK)

        assert target.hour == 3
        assert target.utcoffset() == timedelta(hours=-4)

    def test_nonexistent_hour_single_fire_that_day(self) -> None:
        fires = fire_dates(datetime(2026, 3, 7, 12, 0, tzinfo=NEW_YORK), 2, 3)

        assert [f.date() for f in fires] == [
            date(2026, 3, 8),
            date(2026, 3, 9),
            date(2026, 3, 10),
        ]

    def test_ambiguous_hour_uses_earlier_occurrence(self) -> None:
        """01:00 在 2026-11-01 出現兩次，取較早的 EDT"""
        target = local_instant(date(2026, 11, 1), 1, NEW_YORK)

        assert target.utcoffset() == timedelta(hours=-4)
        assert target.astimezone(timezone.utc) == datetime(
            2026, 11, 1, 5, 0, tzinfo=timezone.utc
        )

    def test_ambiguous_hour_single_fire_that_day(self) -> None:
        fires = fire_dates(datetime(2026, 10, 31, 12, 0, tzinfo=NEW_YORK), 1, 2)

        assert [f.date() for f in fires] == [date(2026, 11, 1), date(2026, 11, 2)]


class TestSecondsUntil:
    def test_never_negative(self) -> None:
        now = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)

        assert seconds_until(now - timedelta(seconds=5), now) == 0.0
        assert seconds_until(now + timedelta(minutes=2), now) == 120.0


class TestIsDaylightLocal:
    """當地日間判斷 [07:00, 19:00)"""

    def test_daylight_window(self) -> None:
        assert is_daylight_local(datetime(2026, 6, 1, 7, 0, tzinfo=NEW_YORK), NEW_YORK)
        assert is_daylight_local(datetime(2026, 6, 1, 18, 59, tzinfo=NEW_YORK), NEW_YORK)
        assert not is_daylight_local(
            datetime(2026, 6, 1, 19, 0, tzinfo=NEW_YORK), NEW_YORK
        )
        assert not is_daylight_local(
            datetime(2026, 6, 1, 6, 59, tzinfo=NEW_YORK), NEW_YORK
        )

    def test_utc_input_converted(self) -> None:
        # 12:00 UTC = 08:00 EDT
        assert is_daylight_local(datetime(2026, 6, 1, 12, 0, tzinfo=timezone.utc), NEW_YORK)
        # 23:30 UTC = 19:30 EDT
        assert not is_daylight_local(
            datetime(2026, 6, 1, 23, 30, tzinfo=timezone.utc), NEW_YORK
        )
