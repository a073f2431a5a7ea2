from .device import (
    DeviceAttributeCreate,
    DeviceAttributeResponse,
    DeviceCreate,
    DeviceUpdate,
    DeviceResponse,
    MessageResponse
)
from .telemetry import TelemetryMetric, TelemetryRecord

__all__ = [
    "DeviceAttributeCreate",
    "DeviceAttributeResponse",
    "DeviceCreate",
    "DeviceUpdate",
    "DeviceResponse",
    "MessageResponse",
    "TelemetryMetric",
    "TelemetryRecord"
]
