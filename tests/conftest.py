"""Pytest configuration and fixtures for the device service and gateway tests."""

from __future__ import annotations

from typing import Callable

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from smarthome.database import enable_sqlite_foreign_keys, get_db
from smarthome.gateway_main import create_gateway_app
from smarthome.main import create_app
from smarthome.models import Base
from smarthome.providers import DeviceProvider, TelemetryProvider

DEVICE_API = "http://device-api.test"
TELEMETRY_API = "http://telemetry-api.test"


@pytest.fixture
def engine():
    """In-memory SQLite shared by every session of one test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    enable_sqlite_foreign_keys(engine)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory) -> TestClient:
    """Device service app bound to the in-memory database."""
    app = create_app()

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    return TestClient(app)


@pytest.fixture
def device_payload() -> dict:
    return {"serialNumber": "SN1", "deviceModelId": 1, "houseId": 2, "name": "Thermostat"}


@pytest.fixture
def sample_device() -> dict:
    """Device as the device service returns it."""
    return {
        "id": 7,
        "serialNumber": "SN1",
        "deviceModelId": 1,
        "houseId": 2,
        "name": "Thermostat",
        "status": "active",
        "attributes": [
            {"id": 1, "deviceId": 7, "key": "temperature", "value": "18.0"},
            {"id": 2, "deviceId": 7, "key": "humidity", "value": "30.0"},
        ],
        "lastUpdated": "2025-01-01T10:00:00Z",
        "createdAt": "2025-01-01T10:00:00Z",
    }


@pytest.fixture
def sample_telemetry() -> list:
    """Telemetry records as the telemetry service returns them."""
    return [
        {
            "id": "1",
            "deviceId": "7",
            "createdAt": "2025-01-01T10:00:00Z",
            "metricId": [
                {"id": "1", "key": "temperature", "value": "21.37", "unit": "C"},
                {"id": "2", "key": "humidity", "value": "33.10", "unit": "%"},
            ],
            "houseId": "1",
        }
    ]


def make_provider(cls, base_url: str, handler: Callable[[httpx.Request], httpx.Response]):
    """Provider whose transport is answered by ``handler``."""
    client = httpx.AsyncClient(base_url=base_url, transport=httpx.MockTransport(handler))
    return cls(base_url, client=client)


@pytest.fixture
def gateway_factory():
    """Build a gateway client from two upstream handlers."""

    def factory(device_handler=None, telemetry_handler=None) -> TestClient:
        def unused(request: httpx.Request) -> httpx.Response:
            raise AssertionError(f"unexpected upstream call: {request.method} {request.url}")

        app = create_gateway_app(
            device_provider=make_provider(DeviceProvider, DEVICE_API, device_handler or unused),
            telemetry_provider=make_provider(TelemetryProvider, TELEMETRY_API, telemetry_handler or unused),
        )
        return TestClient(app)

    return factory
