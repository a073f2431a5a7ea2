from .devices import router as devices_router
from .gateway import router as gateway_router
from .health import router as health_router

__all__ = [
    "devices_router",
    "gateway_router",
    "health_router"
]
