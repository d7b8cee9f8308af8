"""Telemetry Fake Adapter

用於測試時提供 Fake 太空天氣遙測
"""

from libs.shared.src.constants.swpc_endpoints import BZ_FIELD, SPEED_FIELD
from libs.shared.src.dtos.space_weather.alert_levels_dto import AlertLevelsDTO
from libs.shared.src.enums.realtime_feed import RealtimeFeed
from libs.watching.src.ports.telemetry_provider_port import TelemetryProviderPort


class TelemetryFakeAdapter(TelemetryProviderPort):
    """太空天氣遙測 Fake"""

    def __init__(self) -> None:
        self._kp = 0.0
        self._scalars: dict[tuple[RealtimeFeed, str], float | None] = {
            (RealtimeFeed.MAG, BZ_FIELD): None,
            (RealtimeFeed.SPEED, SPEED_FIELD): None,
        }
        self._levels: AlertLevelsDTO = {"g": 0, "r": 0, "s": 0}
        self._calls: list[str] = []

    def set_kp(self, kp: float) -> None:
        self._kp = kp

    def set_bz(self, bz: float | None) -> None:
        self._scalars[(RealtimeFeed.MAG, BZ_FIELD)] = bz

    def set_speed(self, speed: float | None) -> None:
        self._scalars[(RealtimeFeed.SPEED, SPEED_FIELD)] = speed

    def set_alert_levels(self, g: int, r: int, s: int) -> None:
        self._levels = {"g": g, "r": r, "s": s}

    def get_calls(self) -> list[str]:
        return self._calls

    def fetch_kp_max_24h(self) -> float:
        self._calls.append("kp")
        return self._kp

    def fetch_latest_scalar(self, feed: RealtimeFeed, field: str) -> float | None:
        self._calls.append(field)
        return self._scalars.get((feed, field))

    def fetch_alert_levels(self) -> AlertLevelsDTO:
        self._calls.append("alerts")
        return dict(self._levels)
