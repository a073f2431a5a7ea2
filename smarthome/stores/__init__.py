from .device_store import DeviceStore, UpdateRule, UPDATE_RULES, build_update_assignments
from .attribute_store import AttributeStore

__all__ = [
    "DeviceStore",
    "AttributeStore",
    "UpdateRule",
    "UPDATE_RULES",
    "build_update_assignments"
]
