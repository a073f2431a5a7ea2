"""
Device lifecycle: keeps a device and its attribute set changing together
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from sqlalchemy.orm import Session

from smarthome.errors import ConsistencyWarning, NotFound, SmartHomeError
from smarthome.models.device import Device, DeviceAttribute
from smarthome.schemas.device import (
    DeviceAttributeCreate,
    DeviceAttributeResponse,
    DeviceCreate,
    DeviceResponse,
    DeviceUpdate,
)
from smarthome.stores.attribute_store import AttributeStore
from smarthome.stores.device_store import DeviceStore

logger = logging.getLogger(__name__)

DEFAULT_ATTRIBUTES = (
    ("temperature", "18.0"),
    ("humidity", "30.0"),
)

@dataclass
class Outcome:
    """Result of a lifecycle operation plus the attribute steps that failed"""
    device: Optional[DeviceResponse] = None
    warnings: List[ConsistencyWarning] = field(default_factory=list)

def to_response(device: Device, attributes) -> DeviceResponse:
    response = DeviceResponse.model_validate(device)
    response.attributes = [DeviceAttributeResponse.model_validate(a) for a in attributes]
    return response

class DeviceLifecycle:
    """Runs device and attribute steps as one logical unit.

    Steps are committed one at a time and never rolled back. When an attribute
    step fails after the device row changed, the device is still returned and
    the failure is reported as a ConsistencyWarning so the caller can re-seed.
    Nothing here locks: concurrent readers can see a device with no or stale
    attributes while a flow is in progress.
    """

    def __init__(self, db: Session):
        self.devices = DeviceStore(db)
        self.attributes = AttributeStore(db)

    def list_devices(self, house_id: int) -> List[DeviceResponse]:
        result = []
        for device in self.devices.list(house_id):
            try:
                attrs = self.attributes.list_by_device(device.id)
            except SmartHomeError as e:
                logger.error(f"Error loading attributes for device {device.id}: {str(e)}")
                attrs = []
            result.append(to_response(device, attrs))
        return result

    def get_device(self, device_id: int) -> DeviceResponse:
        device = self.devices.get(device_id)
        try:
            attrs = self.attributes.list_by_device(device_id)
        except SmartHomeError as e:
            logger.error(f"Error loading attributes for device {device_id}: {str(e)}")
            raise NotFound("device attributes not found") from e
        return to_response(device, attrs)

    def create_device(self, model: DeviceCreate) -> Outcome:
        device = self.devices.create(model)
        outcome = Outcome()

        attrs = self.seed_default_attributes(device.id, outcome)

        outcome.device = to_response(device, attrs)
        return outcome

    def update_device(self, device_id: int, model: DeviceUpdate) -> Outcome:
        device = self.devices.update(device_id, model)
        outcome = Outcome()

        # Attributes are reset to the defaults on every update, caller-set values are dropped
        try:
            self.attributes.delete_all_by_device(device_id)
        except SmartHomeError as e:
            outcome.warnings.append(self._warn(device_id, "delete attributes", e))

        attrs = self.seed_default_attributes(device_id, outcome)

        outcome.device = to_response(device, attrs)
        return outcome

    def delete_device(self, device_id: int) -> Outcome:
        outcome = Outcome()
        try:
            self.attributes.delete_all_by_device(device_id)
        except SmartHomeError as e:
            outcome.warnings.append(self._warn(device_id, "delete attributes", e))

        self.devices.delete(device_id)
        return outcome

    def seed_default_attributes(self, device_id: int, outcome: Outcome) -> List[DeviceAttribute]:
        """Insert the default attribute pair one row at a time.

        Stops at the first failed insert; the rows already committed are
        returned and the failure is added to the outcome.
        """
        seeded = []
        for key, value in DEFAULT_ATTRIBUTES:
            try:
                seeded.append(self.attributes.create(DeviceAttributeCreate(device_id=device_id, key=key, value=value)))
            except SmartHomeError as e:
                outcome.warnings.append(self._warn(device_id, "seed attributes", e))
                break
        return seeded

    def _warn(self, device_id: int, step: str, error: Exception) -> ConsistencyWarning:
        warning = ConsistencyWarning(device_id, step, error)
        logger.warning(str(warning))
        return warning
