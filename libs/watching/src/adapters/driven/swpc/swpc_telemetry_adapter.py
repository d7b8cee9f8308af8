"""SWPC Telemetry Adapter - Real Implementation

Implements TelemetryProviderPort
Data source: NOAA Space Weather Prediction Center JSON products
Never raises: unusable feeds degrade to 0 / None and are logged
"""

import logging
import re
from datetime import datetime, timezone
from typing import Any, Iterator

from libs.shared.src.clients.swpc.swpc_client import SwpcClient
from libs.shared.src.constants.swpc_endpoints import (
    ALERTS_URL,
    KP_FORECAST_URL,
)
from libs.shared.src.constants.watch_cadences import FORECAST_WINDOW
from libs.shared.src.dtos.space_weather.alert_levels_dto import AlertLevelsDTO
from libs.shared.src.enums.realtime_feed import RealtimeFeed
from libs.shared.src.errors.telemetry_unavailable_error import (
    TelemetryUnavailableError,
)
from libs.watching.src.ports.clock_port import ClockPort
from libs.watching.src.ports.telemetry_provider_port import TelemetryProviderPort

# [time_tag, kp, observed, noaa_scale]
DEFAULT_KP_COLUMN = 1

_SCALE_PATTERNS = {
    "g": re.compile(r"G([1-5])"),
    "r": re.compile(r"R([1-5])"),
    "s": re.compile(r"S([1-5])"),
}


class SwpcTelemetryAdapter(TelemetryProviderPort):
    """SWPC Telemetry Adapter"""

    def __init__(self, client: SwpcClient, clock: ClockPort) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._client = client
        self._clock = clock

    def fetch_kp_max_24h(self) -> float:
        """Max forecast Kp within [now, now + 24h]

        Feed rows: [time_tag, kp, observed|predicted|estimated, noaa_scale] with an optional
        header row whose first cell is "time_tag", or objects with the same keys
        """
        rows = self._get_json(KP_FORECAST_URL)
        if not isinstance(rows, list):
            return 0.0
        if rows and next(iter_kp_samples(rows), None) is None:
            self._logger.warning(f"No usable Kp rows in forecast feed ({len(rows)} rows)")
            return 0.0
        return parse_kp_max(rows, self._clock.now())

    def fetch_latest_scalar(self, feed: RealtimeFeed, field: str) -> float | None:
        """Latest numeric value of a field, scanning most-recent-first"""
        rows = self._get_json(feed.value)
        if not isinstance(rows, list):
            return None
        value = parse_latest_scalar(rows, field)
        if value is None:
            self._logger.warning(f"No usable {field} in {feed.name} feed")
        return value

    def fetch_alert_levels(self) -> AlertLevelsDTO:
        """Max G/R/S levels across current alert messages"""
        items = self._get_json(ALERTS_URL)
        if not isinstance(items, list):
            return {"g": 0, "r": 0, "s": 0}
        return parse_alert_levels(items)

    def _get_json(self, url: str) -> Any:
        try:
            return self._client.get_json(url)
        except TelemetryUnavailableError as e:
            self._logger.warning(f"⚠️ {e.message}")
            return None


def _to_float(value: Any) -> float | None:
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value)
        except ValueError:
            return None
    return None


def parse_time_tag(value: Any) -> datetime | None:
    """Parse an SWPC time tag as UTC (ISO or space separated, Z optional)"""
    if not isinstance(value, str) or not value:
        return None
    try:
        tag = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if tag.tzinfo is None:
        tag = tag.replace(tzinfo=timezone.utc)
    return tag.astimezone(timezone.utc)


def iter_kp_samples(rows: list) -> Iterator[tuple[datetime, float]]:
    """(time_tag, kp) pairs of usable forecast rows

    Rows are arrays (Kp column located from the header row when present)
    or objects keyed by "time_tag" / "kp"
    """
    start_idx = 0
    kp_col = DEFAULT_KP_COLUMN
    if rows and isinstance(rows[0], list) and rows[0][:1] == ["time_tag"]:
        start_idx = 1
        if "kp" in rows[0]:
            kp_col = rows[0].index("kp")

    for row in rows[start_idx:]:
        if isinstance(row, dict):
            raw_tag, raw_kp = row.get("time_tag"), row.get("kp")
        elif isinstance(row, list) and len(row) > kp_col:
            raw_tag, raw_kp = row[0], row[kp_col]
        else:
            continue
        tag = parse_time_tag(raw_tag)
        kp = _to_float(raw_kp)
        if tag is None or kp is None:
            continue
        yield tag, kp


def parse_kp_max(rows: list, now: datetime) -> float:
    """Max Kp of forecast rows within the next 24h, 0.0 when none"""
    end = now + FORECAST_WINDOW
    return max(
        (kp for tag, kp in iter_kp_samples(rows) if now <= tag <= end),
        default=0.0,
    )


def parse_latest_scalar(rows: list, field: str) -> float | None:
    """Most recent numeric value of field

    Rows are scanned newest first: by time_tag when every row carries one,
    otherwise by position (feed ordered oldest → newest)
    """
    ordered = list(reversed(rows))
    if ordered and all(
        isinstance(row, dict) and isinstance(row.get("time_tag"), str) for row in rows
    ):
        ordered = sorted(ordered, key=lambda row: row["time_tag"], reverse=True)

    for row in ordered:
        if not isinstance(row, dict) or field not in row:
            continue
        value = _to_float(row[field])
        if value is not None:
            return value
    return None


def parse_alert_levels(items: list) -> AlertLevelsDTO:
    """Max level per scale across alert messages (case-insensitive)"""
    levels: AlertLevelsDTO = {"g": 0, "r": 0, "s": 0}
    for item in items:
        if not isinstance(item, dict):
            continue
        message = item.get("message")
        if not isinstance(message, str):
            continue
        upper = message.upper()
        for scale, pattern in _SCALE_PATTERNS.items():
            for digit in pattern.findall(upper):
                levels[scale] = max(levels[scale], int(digit))
    return levels
