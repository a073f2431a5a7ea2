from .device_lifecycle import DeviceLifecycle, Outcome, DEFAULT_ATTRIBUTES

__all__ = [
    "DeviceLifecycle",
    "Outcome",
    "DEFAULT_ATTRIBUTES"
]
