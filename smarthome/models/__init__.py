from smarthome.database import Base
from .device import Device, DeviceAttribute, DeviceStatus

__all__ = [
    "Base",
    "Device",
    "DeviceAttribute",
    "DeviceStatus"
]
