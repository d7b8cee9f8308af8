"""
NOAA SWPC 客戶端

以 requests 取得 SWPC (services.swpc.noaa.gov) 的 JSON 資料。
Session 建立後不再修改，可由多個輪詢迴圈共用。
"""

import logging
from typing import Any

import requests

from libs.shared.src.constants.swpc_endpoints import USER_AGENT
from libs.shared.src.errors.telemetry_unavailable_error import (
    TelemetryUnavailableError,
)


class SwpcClient:
    """SWPC JSON 客戶端"""

    def __init__(
        self,
        timeout: float = 15.0,
        session: requests.Session | None = None,
    ) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update({"User-Agent": USER_AGENT})

    def get_json(self, url: str) -> Any:
        """取得 JSON 內容

        Args:
            url: 資料來源 URL

        Returns:
            Any: 解析後的 JSON

        Raises:
            TelemetryUnavailableError: 網路錯誤、逾時、非 2xx 或 JSON 格式錯誤
        """
        try:
            response = self._session.get(url, timeout=self._timeout)
            response.raise_for_status()
        except requests.RequestException as e:
            raise TelemetryUnavailableError(url, str(e))

        try:
            return response.json()
        except ValueError as e:
            raise TelemetryUnavailableError(url, f"malformed JSON ({e})")

    def close(self) -> None:
        """關閉連線池"""
        self._session.close()
