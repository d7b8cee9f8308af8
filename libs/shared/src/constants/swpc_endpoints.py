"""NOAA SWPC Endpoints"""

KP_FORECAST_URL = (
    "https://services.swpc.noaa.gov/products/noaa-planetary-k-index-forecast.json"
)
ALERTS_URL = "https://services.swpc.noaa.gov/products/alerts.json"

BZ_FIELD = "bz_gsm"
SPEED_FIELD = "speed"

USER_AGENT = "spaceweather-watcher/0.2"
