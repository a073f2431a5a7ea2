"""
Gateway routes: device calls proxied to the device service, telemetry
fetched from the telemetry service.

Every upstream failure becomes a 500; an upstream 404 cannot be told apart
from an unreachable upstream.
"""
from fastapi import APIRouter, HTTPException, Depends, Query, Request
from typing import List, Optional
import logging

from smarthome.errors import UpstreamError, ValidationError
from smarthome.providers.device_provider import DeviceProvider
from smarthome.providers.telemetry_provider import TelemetryProvider
from smarthome.schemas.device import DeviceCreate, DeviceUpdate, DeviceResponse, MessageResponse
from smarthome.schemas.telemetry import TelemetryRecord

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/devices", tags=["gateway"])

def get_device_provider(request: Request) -> DeviceProvider:
    return request.app.state.device_provider

def get_telemetry_provider(request: Request) -> TelemetryProvider:
    return request.app.state.telemetry_provider

def upstream_failure(prefix: str, error: UpstreamError) -> HTTPException:
    logger.error(f"{prefix}: {str(error)}")
    return HTTPException(status_code=500, detail=f"{prefix}: {error}")

@router.get("", response_model=List[DeviceResponse])
async def list_devices(house_id: Optional[str] = Query(None, alias="houseId"), devices: DeviceProvider = Depends(get_device_provider)):
    """Get all devices of a house from the device service"""
    if not house_id:
        raise ValidationError("houseId is required")
    try:
        return await devices.list_devices(house_id)
    except UpstreamError as e:
        raise upstream_failure("Failed to fetch data", e)

@router.get("/{device_id}", response_model=DeviceResponse)
async def get_device(device_id: str, devices: DeviceProvider = Depends(get_device_provider)):
    """Get device by ID from the device service"""
    try:
        return await devices.get_device(device_id)
    except UpstreamError as e:
        raise upstream_failure("Failed to fetch data", e)

@router.get("/{device_id}/telemetry", response_model=List[TelemetryRecord])
async def get_telemetry(device_id: str, telemetry: TelemetryProvider = Depends(get_telemetry_provider)):
    """Get telemetry for a device; the device itself is not looked up first"""
    try:
        return await telemetry.get_telemetry(device_id)
    except UpstreamError as e:
        raise upstream_failure("Failed to fetch telemetry data", e)

@router.post("", response_model=DeviceResponse)
async def create_device(payload: DeviceCreate, devices: DeviceProvider = Depends(get_device_provider)):
    """Create a device through the device service"""
    try:
        return await devices.create_device(payload)
    except UpstreamError as e:
        raise upstream_failure("Failed to post data", e)

@router.put("/{device_id}", response_model=DeviceResponse)
async def update_device(
    device_id: str,
    payload: DeviceUpdate,
    devices: DeviceProvider = Depends(get_device_provider)
):
    """Update a device through the device service"""
    try:
        return await devices.update_device(device_id, payload)
    except UpstreamError as e:
        raise upstream_failure("Failed to update data", e)

@router.delete("/{device_id}", response_model=MessageResponse)
async def delete_device(device_id: str, devices: DeviceProvider = Depends(get_device_provider)):
    """Delete a device through the device service"""
    try:
        await devices.delete_device(device_id)
    except UpstreamError as e:
        raise upstream_failure("Failed to delete data", e)
    return {"message": "Device deleted successfully"}
