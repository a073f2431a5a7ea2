from typing import List

from smarthome.providers.base import UpstreamProvider
from smarthome.schemas.telemetry import TelemetryRecord

class TelemetryProvider(UpstreamProvider):
    """Client for the telemetry service"""

    resource = "telemetry"

    async def get_telemetry(self, device_id: str) -> List[TelemetryRecord]:
        response = await self._request("GET", f"/telemetry/{device_id}")
        return self._decode(response, List[TelemetryRecord])
