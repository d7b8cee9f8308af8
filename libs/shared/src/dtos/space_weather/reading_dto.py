"""Reading DTO"""

from typing import TypedDict


class ReadingDTO(TypedDict):
    """Telemetry snapshot at one evaluation instant (never persisted)"""

    kp_max_24h: float  # Max forecast Kp over the next 24h, 0 if feed unusable
    bz: float | None  # Latest L1 Bz GSM (nT), None if feed unusable
    speed: float | None  # Latest L1 solar wind speed (km/s), None if feed unusable
    g_level: int  # NOAA G-scale 0-5
    r_level: int  # NOAA R-scale 0-5
    s_level: int  # NOAA S-scale 0-5
    is_daylight: bool
