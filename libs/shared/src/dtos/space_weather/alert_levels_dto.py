"""Alert Levels DTO"""

from typing import TypedDict


class AlertLevelsDTO(TypedDict):
    """Max NOAA scale levels across current SWPC alert messages"""

    g: int
    r: int
    s: int
