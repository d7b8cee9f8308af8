"""太空天氣遙測 Port"""

from typing import Protocol

from libs.shared.src.dtos.space_weather.alert_levels_dto import AlertLevelsDTO
from libs.shared.src.enums.realtime_feed import RealtimeFeed


class TelemetryProviderPort(Protocol):
    """太空天氣遙測 Port (NOAA SWPC)

    所有方法在資料缺漏或格式錯誤時回傳降級值，不拋出例外
    """

    def fetch_kp_max_24h(self) -> float:
        """取得未來 24 小時預報 Kp 最大值

        Returns:
            float: Kp 最大值，資料不可用時為 0.0
        """
        ...

    def fetch_latest_scalar(self, feed: RealtimeFeed, field: str) -> float | None:
        """取得時間序列資料中最新的欄位數值 (由新到舊掃描)

        Args:
            feed: 即時太陽風資料來源
            field: 欄位名稱 (例如 bz_gsm, speed)

        Returns:
            float | None: 最新數值，資料不可用時為 None
        """
        ...

    def fetch_alert_levels(self) -> AlertLevelsDTO:
        """取得目前 SWPC 警報中 G/R/S 的最大等級

        Returns:
            AlertLevelsDTO: 各等級 0-5，無警報時為 0
        """
        ...
