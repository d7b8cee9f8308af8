"""預熱 Kp 預報 Command (每 30 分鐘)

不發送通知，僅維持上游預報資料來源的連線與快取
"""

import asyncio
import logging

from injector import inject

from libs.watching.src.ports.telemetry_provider_port import TelemetryProviderPort
from libs.watching.src.ports.warm_forecast_port import WarmForecastPort


class WarmForecastCommand(WarmForecastPort):
    """預熱 Kp 預報"""

    @inject
    def __init__(self, telemetry: TelemetryProviderPort) -> None:
        self._logger = logging.getLogger(self.__class__.__name__)
        self._telemetry = telemetry

    async def execute(self) -> float:
        loop = asyncio.get_running_loop()
        kp = await loop.run_in_executor(None, self._telemetry.fetch_kp_max_24h)
        self._logger.debug(f"Kp forecast refreshed: max next 24h {kp:.1f}")
        return kp
