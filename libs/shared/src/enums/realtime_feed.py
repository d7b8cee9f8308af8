"""Real-Time Solar Wind Feed Enum"""

from enum import Enum


class RealtimeFeed(Enum):
    """SWPC real-time solar wind (RTSW) feeds, value is the feed URL"""

    MAG = "https://services.swpc.noaa.gov/json/rtsw/rtsw_mag_1m.json"
    SPEED = "https://services.swpc.noaa.gov/json/rtsw/rtsw_speed_1m.json"
