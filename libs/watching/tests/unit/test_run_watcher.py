"""RunWatcherCommand 單元測試"""

from datetime import date, datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from libs.shared.src.config.watcher_settings import load_watcher_settings
from libs.watching.src.adapters.driven.memory.clock_fake_adapter import (
    ClockFakeAdapter,
)
from libs.watching.src.application.commands.run_watcher import RunWatcherCommand


def make_port(**kwargs) -> MagicMock:
    port = MagicMock()
    port.execute = AsyncMock(**kwargs)
    return port


def make_watcher(clock, sleep, settings=None, **ports) -> RunWatcherCommand:
    return RunWatcherCommand(
        settings=settings or load_watcher_settings({}),
        clock=clock,
        fast_watch=ports.get("fast_watch", make_port(return_value=False)),
        alert_watch=ports.get("alert_watch", make_port(return_value=False)),
        warm_forecast=ports.get("warm_forecast", make_port(return_value=0.0)),
        daily_report=ports.get("daily_report", make_port(return_value=True)),
        startup_baseline=ports.get("startup_baseline", make_port(return_value=True)),
        sleep=sleep,
    )


def advancing_sleep(clock: ClockFakeAdapter, max_step: float | None = None):
    """以 fake clock 模擬睡眠；max_step 模擬提早喚醒"""
    calls: list[float] = []

    async def sleep(seconds: float) -> None:
        calls.append(seconds)
        step = seconds if max_step is None else min(seconds, max_step)
        clock.advance(timedelta(seconds=step))

    sleep.calls = calls
    return sleep


class TestRunPeriodic:
    """固定週期迴圈"""

    @pytest.mark.asyncio
    async def test_failing_tick_does_not_stop_loop(self) -> None:
        """tick 失敗只記錄，下一次照常執行"""
        clock = ClockFakeAdapter(datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc))
        sleep = AsyncMock()
        tick = AsyncMock(side_effect=[RuntimeError("feed down"), True, True])
        watcher = make_watcher(clock, sleep)

        await watcher.run_periodic("fast", 60, tick, iterations=3)

        assert tick.await_count == 3
        assert sleep.await_count == 2

    @pytest.mark.asyncio
    async def test_sleeps_remaining_period(self) -> None:
        clock = ClockFakeAdapter(datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc))
        sleep = AsyncMock()
        watcher = make_watcher(clock, sleep)

        await watcher.run_periodic("alerts", 300, AsyncMock(), iterations=2)

        delay = sleep.await_args.args[0]
        assert 299.0 < delay <= 300.0


class TestRunDaily:
    """每日報告迴圈"""

    @pytest.mark.asyncio
    async def test_fires_once_per_local_day(self) -> None:
        # 06:00 EDT
        clock = ClockFakeAdapter(datetime(2026, 10, 18, 10, 0, tzinfo=timezone.utc))
        daily_report = make_port(return_value=True)
        watcher = make_watcher(clock, advancing_sleep(clock), daily_report=daily_report)

        await watcher.run_daily(iterations=3)

        dates = [c.args[0] for c in daily_report.execute.await_args_list]
        assert dates == [date(2026, 10, 18), date(2026, 10, 19), date(2026, 10, 20)]
        assert clock.now() == datetime(2026, 10, 20, 11, 0, tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_fall_back_keeps_local_hour(self) -> None:
        """夏令時間結束後仍在當地 07:00 發送"""
        clock = ClockFakeAdapter(datetime(2026, 10, 30, 12, 0, tzinfo=timezone.utc))
        fired_at: list[datetime] = []

        async def record(report_date: date) -> bool:
            fired_at.append(clock.now())
            return True

        daily_report = MagicMock()
        daily_report.execute = record
        watcher = make_watcher(clock, advancing_sleep(clock), daily_report=daily_report)

        await watcher.run_daily(iterations=3)

        assert fired_at == [
            datetime(2026, 10, 31, 11, 0, tzinfo=timezone.utc),  # 07:00 EDT
            datetime(2026, 11, 1, 12, 0, tzinfo=timezone.utc),  # 07:00 EST
            datetime(2026, 11, 2, 12, 0, tzinfo=timezone.utc),
        ]

    @pytest.mark.asyncio
    async def test_early_wakeup_sleeps_again(self) -> None:
        """提早喚醒時重新睡到目標時間"""
        clock = ClockFakeAdapter(datetime(2026, 10, 18, 10, 0, tzinfo=timezone.utc))
        sleep = advancing_sleep(clock, max_step=600)
        daily_report = make_port(return_value=True)
        watcher = make_watcher(clock, sleep, daily_report=daily_report)

        await watcher.run_daily(iterations=1)

        assert len(sleep.calls) == 6
        daily_report.execute.assert_awaited_once_with(date(2026, 10, 18))

    @pytest.mark.asyncio
    async def test_failed_report_does_not_stop_loop(self) -> None:
        clock = ClockFakeAdapter(datetime(2026, 10, 18, 10, 0, tzinfo=timezone.utc))
        daily_report = make_port(side_effect=[RuntimeError("smtp down"), True])
        watcher = make_watcher(clock, advancing_sleep(clock), daily_report=daily_report)

        await watcher.run_daily(iterations=2)

        assert daily_report.execute.await_count == 2


class TestExecute:
    """啟動流程"""

    @pytest.mark.asyncio
    async def test_baseline_then_loops(self) -> None:
        clock = ClockFakeAdapter(datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc))
        baseline = make_port(return_value=True)
        watcher = make_watcher(clock, AsyncMock(), startup_baseline=baseline)
        watcher.run_periodic = AsyncMock()
        watcher.run_daily = AsyncMock()

        await watcher.execute()

        baseline.execute.assert_awaited_once()
        names = [c.args[0] for c in watcher.run_periodic.await_args_list]
        assert names == ["fast", "alerts", "warm-cache"]
        periods = [c.args[1] for c in watcher.run_periodic.await_args_list]
        assert periods == [60, 300, 1800]
        watcher.run_daily.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_baseline_disabled(self) -> None:
        clock = ClockFakeAdapter(datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc))
        baseline = make_port(return_value=True)
        watcher = make_watcher(
            clock,
            AsyncMock(),
            settings=load_watcher_settings({"STARTUP_BASELINE": "0"}),
            startup_baseline=baseline,
        )
        watcher.run_periodic = AsyncMock()
        watcher.run_daily = AsyncMock()

        await watcher.execute()

        baseline.execute.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_baseline_failure_does_not_block_loops(self) -> None:
        clock = ClockFakeAdapter(datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc))
        baseline = make_port(side_effect=RuntimeError("boom"))
        watcher = make_watcher(clock, AsyncMock(), startup_baseline=baseline)
        watcher.run_periodic = AsyncMock()
        watcher.run_daily = AsyncMock()

        await watcher.execute()

        assert watcher.run_periodic.await_count == 3
