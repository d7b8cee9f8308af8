"""Local Impact Score Thresholds

Weights and lookup tables of the risk scorer
"""

# Geomagnetic term: latitude weight floor 0.2 below ~30°, saturates at 1.0 by ~50°
GEO_LAT_OFFSET = 30.0
GEO_LAT_SPAN = 20.0
GEO_WEIGHT_MIN = 0.2
GEO_WEIGHT_MAX = 1.0
# Kp 4 -> 0, Kp 9 -> 1
GEO_KP_OFFSET = 4.0
GEO_KP_SPAN = 5.0
GEO_MAX_SCORE = 60.0

# Short-fuse (L1 solar wind) term
SHORT_FUSE_BASE = 20.0
SHORT_FUSE_BZ_EXTRA_MARGIN = 5.0  # nT beyond the Bz threshold
SHORT_FUSE_SPEED_EXTRA_MARGIN = 200.0  # km/s beyond the speed threshold
SHORT_FUSE_BONUS = 5.0
SHORT_FUSE_MAX_SCORE = 30.0

# Radio blackout (R-scale), dampened at night
R_SCALE_SCORES = (0.0, 6.0, 12.0, 18.0, 22.0, 25.0)
R_NIGHT_FACTOR = 0.35

# Radiation storm (S-scale), dampened at low latitude
S_SCALE_SCORES = (0.0, 2.0, 5.0, 8.0, 10.0, 10.0)
S_LOW_LATITUDE = 40.0
S_LOW_LATITUDE_FACTOR = 0.6

# Category breakpoints (inclusive lower bound)
LIS_SEVERE_MIN = 80.0
LIS_HIGH_MIN = 60.0
LIS_MODERATE_MIN = 40.0
LIS_ELEVATED_MIN = 20.0

LIS_MIN = 0.0
LIS_MAX = 100.0

# Daylight window, local hours [start, end)
DAYLIGHT_START_HOUR = 7
DAYLIGHT_END_HOUR = 19
