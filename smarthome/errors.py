"""Error types shared by the device service and the gateway."""


class SmartHomeError(Exception):
    """Base exception for the smarthome services."""

    pass


class NotFound(SmartHomeError):
    """No row matches a lookup or mutation target."""

    pass


class ValidationError(SmartHomeError):
    """A required input field is missing or invalid."""

    pass


class UpstreamError(SmartHomeError):
    """Base exception for calls against an upstream service."""

    pass


class TransportError(UpstreamError):
    """Upstream unreachable or timed out."""

    pass


class DecodeError(UpstreamError):
    """Upstream answered with a body that does not match the expected shape."""

    pass


class UpstreamStatusError(UpstreamError):
    """Upstream answered with an unexpected status code."""

    def __init__(self, status_code: int):
        self.status_code = status_code
        super().__init__(f"unexpected status code: {status_code}")


class ConsistencyWarning(UserWarning):
    """An attribute step failed after the device mutation was committed.

    Never raised through the HTTP layer: the coordinator logs it and hands it
    back next to the device so the caller can re-seed.
    """

    def __init__(self, device_id: int, step: str, error: Exception):
        self.device_id = device_id
        self.step = step
        self.error = error
        super().__init__(f"device {device_id}: {step} failed: {error}")
