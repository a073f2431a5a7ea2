from fastapi import APIRouter, HTTPException, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session
from typing import Annotated, List, Optional
import logging

from smarthome.database import get_db
from smarthome.errors import NotFound, SmartHomeError, ValidationError
from smarthome.schemas.device import (
    DeviceCreate, DeviceUpdate, DeviceResponse, MessageResponse, SQL_INT_MAX, SQL_INT_MIN
)
from smarthome.services.device_lifecycle import DeviceLifecycle, Outcome

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/devices", tags=["devices"])

CONSISTENCY_HEADER = "X-Consistency-Warning"

DeviceId = Annotated[int, Path(ge=SQL_INT_MIN, le=SQL_INT_MAX)]

def get_lifecycle(db: Session = Depends(get_db)) -> DeviceLifecycle:
    return DeviceLifecycle(db)

def parse_house_id(raw: Optional[str]) -> int:
    if not raw:
        raise ValidationError("houseId is required")
    try:
        house = int(raw)
    except ValueError:
        raise ValidationError("Invalid houseId")
    if not SQL_INT_MIN <= house <= SQL_INT_MAX:
        raise ValidationError("Invalid houseId")
    return house

def report_warnings(outcome: Outcome, response: Response) -> None:
    if outcome.warnings:
        response.headers[CONSISTENCY_HEADER] = "; ".join(str(w) for w in outcome.warnings)

@router.get("", response_model=List[DeviceResponse])
def list_devices(house_id: Optional[str] = Query(None, alias="houseId"), lifecycle: DeviceLifecycle = Depends(get_lifecycle)):
    """Get all devices of a house, each with its attributes"""
    house = parse_house_id(house_id)
    try:
        return lifecycle.list_devices(house)
    except SmartHomeError as e:
        logger.error(f"Error listing devices for house {house}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

@router.get("/{device_id}", response_model=DeviceResponse)
def get_device(device_id: DeviceId, lifecycle: DeviceLifecycle = Depends(get_lifecycle)):
    """Get device by ID"""
    try:
        return lifecycle.get_device(device_id)
    except NotFound as e:
        raise HTTPException(status_code=404, detail=str(e).capitalize())
    except SmartHomeError as e:
        logger.error(f"Error getting device {device_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
def create_device(
    payload: DeviceCreate,
    response: Response,
    lifecycle: DeviceLifecycle = Depends(get_lifecycle)
):
    """Create a device and seed its default attributes"""
    try:
        outcome = lifecycle.create_device(payload)
    except SmartHomeError as e:
        logger.error(f"Error creating device: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    report_warnings(outcome, response)
    return outcome.device

@router.put("/{device_id}", response_model=DeviceResponse)
def update_device(
    device_id: DeviceId,
    payload: DeviceUpdate,
    response: Response,
    lifecycle: DeviceLifecycle = Depends(get_lifecycle)
):
    """Update a device; its attributes are reset to the defaults"""
    try:
        outcome = lifecycle.update_device(device_id, payload)
    except NotFound:
        raise HTTPException(status_code=404, detail="Device not found")
    except SmartHomeError as e:
        logger.error(f"Error updating device {device_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    report_warnings(outcome, response)
    return outcome.device

@router.delete("/{device_id}", response_model=MessageResponse)
def delete_device(device_id: DeviceId, response: Response, lifecycle: DeviceLifecycle = Depends(get_lifecycle)):
    """Delete a device and its attributes"""
    try:
        outcome = lifecycle.delete_device(device_id)
    except SmartHomeError as e:
        # Missing devices are reported as 500 here, like every other delete failure
        logger.error(f"Error deleting device {device_id}: {str(e)}")
        raise HTTPException(status_code=500, detail=str(e))

    report_warnings(outcome, response)
    return {"message": "Device deleted successfully"}
