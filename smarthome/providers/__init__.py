from .device_provider import DeviceProvider
from .telemetry_provider import TelemetryProvider

__all__ = [
    "DeviceProvider",
    "TelemetryProvider"
]
