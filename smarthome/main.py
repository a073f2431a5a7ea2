# smarthome/main.py
from fastapi import FastAPI

from smarthome.database import settings
from smarthome.init_db import init_database
from smarthome.app_setup import add_cors, configure_logging, install_error_handlers

# Routers
from smarthome.routers import devices_router, health_router


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(
        title="Smart Home Device API",
        description="Devices and their attributes",
        version="1.0.0",
        debug=settings.debug,
    )

    add_cors(app)
    install_error_handlers(app)

    # Mount router
    app.include_router(health_router)                                # /health
    app.include_router(devices_router, prefix=settings.api_prefix)   # /devices/...

    # Startup: create tables (idempotent)
    @app.on_event("startup")
    async def _startup():
        init_database()

    return app


app = create_app()
