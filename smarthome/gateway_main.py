# smarthome/gateway_main.py
import logging
from typing import Optional

from fastapi import FastAPI

from smarthome.database import settings
from smarthome.app_setup import add_cors, configure_logging, install_error_handlers
from smarthome.providers import DeviceProvider, TelemetryProvider

# Routers
from smarthome.routers import gateway_router, health_router

logger = logging.getLogger(__name__)


def create_gateway_app(
    device_provider: Optional[DeviceProvider] = None,
    telemetry_provider: Optional[TelemetryProvider] = None,
) -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Smart Home Gateway API",
        description="Devices from the device service, telemetry from the telemetry service",
        version="1.0.0",
        debug=settings.debug,
    )

    add_cors(app)
    install_error_handlers(app)

    # Injected upstream clients are used as given; missing ones are built at startup
    app.state.device_provider = device_provider
    app.state.telemetry_provider = telemetry_provider

    # Mount router
    app.include_router(health_router)                                # /health
    app.include_router(gateway_router, prefix=settings.api_prefix)   # /devices/...

    # Startup: one shared client per upstream
    @app.on_event("startup")
    async def _startup():
        if app.state.device_provider is None:
            app.state.device_provider = DeviceProvider(
                settings.device_api_url, timeout=settings.upstream_timeout_seconds
            )
        if app.state.telemetry_provider is None:
            app.state.telemetry_provider = TelemetryProvider(
                settings.telemetry_api_url, timeout=settings.upstream_timeout_seconds
            )
        logger.info(
            f"Gateway upstreams: devices={app.state.device_provider.base_url} "
            f"telemetry={app.state.telemetry_provider.base_url}"
        )

    @app.on_event("shutdown")
    async def _shutdown():
        await app.state.device_provider.aclose()
        await app.state.telemetry_provider.aclose()

    return app


app = create_gateway_app()
