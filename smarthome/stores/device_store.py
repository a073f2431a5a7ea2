"""
Device Store: CRUD against the devices table
"""
import enum
import logging
from datetime import datetime
from typing import Any, List, Tuple

from sqlalchemy import update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from smarthome.database import get_utc_datetime
from smarthome.errors import NotFound, SmartHomeError
from smarthome.models.device import Device, DeviceStatus
from smarthome.schemas.device import DeviceCreate, DeviceUpdate

logger = logging.getLogger(__name__)

class UpdateRule(enum.Enum):
    ALWAYS = "always"
    IF_NON_EMPTY = "if-non-empty"

# SET clause order after last_updated; an empty string means "leave unchanged",
# house_id and device_model_id are rewritten even when the caller resends the old value.
UPDATE_RULES: Tuple[Tuple[str, UpdateRule], ...] = (
    ("name", UpdateRule.IF_NON_EMPTY),
    ("serial_number", UpdateRule.IF_NON_EMPTY),
    ("house_id", UpdateRule.ALWAYS),
    ("device_model_id", UpdateRule.ALWAYS),
)

def build_update_assignments(model: DeviceUpdate, now: datetime) -> List[Tuple[str, Any]]:
    """Ordered (column, value) pairs for a partial device update"""
    assignments: List[Tuple[str, Any]] = [("last_updated", now)]
    for field, rule in UPDATE_RULES:
        value = getattr(model, field)
        if rule is UpdateRule.IF_NON_EMPTY and value == "":
            continue
        assignments.append((field, value))
    return assignments

class DeviceStore:
    """Accessor for device rows, bound to one session"""

    def __init__(self, db: Session):
        self.db = db

    def list(self, house_id: int) -> List[Device]:
        try:
            return (
                self.db.query(Device)
                .filter(Device.house_id == house_id)
                .order_by(Device.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise SmartHomeError(f"error querying devices: {e}") from e

    def get(self, device_id: int) -> Device:
        try:
            device = self.db.query(Device).filter(Device.id == device_id).first()
        except SQLAlchemyError as e:
            raise SmartHomeError(f"error getting device by ID: {e}") from e
        if device is None:
            raise NotFound("device not found")
        return device

    def create(self, model: DeviceCreate) -> Device:
        now = get_utc_datetime()
        device = Device(
            device_model_id=model.device_model_id,
            house_id=model.house_id,
            serial_number=model.serial_number,
            name=model.name,
            status=DeviceStatus.ACTIVE.value,
            last_updated=now,
            created_at=now,
        )
        try:
            self.db.add(device)
            self.db.commit()
            self.db.refresh(device)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise SmartHomeError(f"error creating device: {e}") from e

        logger.info(f"Created device {device.id} in house {device.house_id}")
        return device

    def update(self, device_id: int, model: DeviceUpdate) -> Device:
        self.get(device_id)

        assignments = build_update_assignments(model, get_utc_datetime())
        table = Device.__table__
        stmt = (
            update(table)
            .where(table.c.id == device_id)
            .ordered_values(*[(table.c[field], value) for field, value in assignments])
        )
        try:
            self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise SmartHomeError(f"error updating device: {e}") from e

        logger.info(f"Updated device {device_id}: {', '.join(field for field, _ in assignments)}")
        return self.get(device_id)

    def delete(self, device_id: int) -> None:
        try:
            deleted = (
                self.db.query(Device)
                .filter(Device.id == device_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise SmartHomeError(f"error deleting device: {e}") from e

        if deleted == 0:
            raise NotFound("device not found")
        logger.info(f"Deleted device {device_id}")
