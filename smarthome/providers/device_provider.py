from typing import List

from smarthome.providers.base import UpstreamProvider
from smarthome.schemas.device import DeviceCreate, DeviceResponse, DeviceUpdate

class DeviceProvider(UpstreamProvider):
    """Client for the device service"""

    resource = "device"

    async def list_devices(self, house_id: str) -> List[DeviceResponse]:
        response = await self._request("GET", "/devices", params={"houseId": house_id})
        return self._decode(response, List[DeviceResponse])

    async def get_device(self, device_id: str) -> DeviceResponse:
        response = await self._request("GET", f"/devices/{device_id}")
        return self._decode(response, DeviceResponse)

    async def create_device(self, payload: DeviceCreate) -> DeviceResponse:
        response = await self._request(
            "POST",
            "/devices",
            ok_statuses=(200, 201),
            action="posting",
            json=payload.model_dump(by_alias=True),
        )
        return self._decode(response, DeviceResponse)

    async def update_device(self, device_id: str, payload: DeviceUpdate) -> DeviceResponse:
        response = await self._request(
            "PUT",
            f"/devices/{device_id}",
            action="putting",
            json=payload.model_dump(by_alias=True),
        )
        return self._decode(response, DeviceResponse)

    async def delete_device(self, device_id: str) -> None:
        await self._request("DELETE", f"/devices/{device_id}", action="deleting")
