"""Watch Loop Cadences and Cooldowns"""

from datetime import timedelta

FAST_WATCH_PERIOD_SEC = 60
ALERT_WATCH_PERIOD_SEC = 300
FORECAST_WARM_PERIOD_SEC = 1800

SHORT_FUSE_COOLDOWN = timedelta(minutes=10)
LIS_THRESHOLD_COOLDOWN = timedelta(minutes=30)

FORECAST_WINDOW = timedelta(hours=24)
