"""
Attribute Store: CRUD against the devices_attributes table
"""
from typing import List

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from smarthome.errors import NotFound, SmartHomeError
from smarthome.models.device import DeviceAttribute
from smarthome.schemas.device import DeviceAttributeCreate

class AttributeStore:
    """Accessor for attribute rows, bound to one session.

    No uniqueness is enforced on (device_id, key); callers that seed
    attributes are responsible for not creating duplicates.
    """

    def __init__(self, db: Session):
        self.db = db

    def list_by_device(self, device_id: int) -> List[DeviceAttribute]:
        try:
            return (
                self.db.query(DeviceAttribute)
                .filter(DeviceAttribute.device_id == device_id)
                .order_by(DeviceAttribute.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise SmartHomeError(f"error querying device attribute: {e}") from e

    def create(self, attribute: DeviceAttributeCreate) -> DeviceAttribute:
        row = DeviceAttribute(
            device_id=attribute.device_id,
            key=attribute.key,
            value=attribute.value,
        )
        try:
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise SmartHomeError(f"error creating device attribute: {e}") from e
        return row

    def delete_all_by_device(self, device_id: int) -> None:
        """Delete every attribute of a device; a device without attributes is an error"""
        try:
            deleted = (
                self.db.query(DeviceAttribute)
                .filter(DeviceAttribute.device_id == device_id)
                .delete(synchronize_session=False)
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise SmartHomeError(f"error deleting device attributes: {e}") from e

        if deleted == 0:
            raise NotFound("device attributes not found")
