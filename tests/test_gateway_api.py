"""Tests for the aggregation gateway routes."""

from __future__ import annotations

import httpx
from fastapi.testclient import TestClient

from smarthome.database import settings
from smarthome.gateway_main import create_gateway_app


def test_health(gateway_factory):
    assert gateway_factory().get("/health").json() == {"status": "ok"}


def test_list_requires_house_id(gateway_factory):
    client = gateway_factory()

    response = client.get("/devices")

    assert response.status_code == 400
    assert response.json() == {"error": "houseId is required"}


def test_list_forwards_upstream_result(gateway_factory, sample_device):
    calls = []

    def devices(request: httpx.Request) -> httpx.Response:
        calls.append(str(request.url))
        return httpx.Response(200, json=[sample_device])

    response = gateway_factory(device_handler=devices).get("/devices", params={"houseId": "2"})

    assert response.status_code == 200
    body = response.json()
    assert body[0]["serialNumber"] == "SN1"
    assert body[0]["attributes"][0] == {"id": 1, "deviceId": 7, "key": "temperature", "value": "18.0"}
    assert len(calls) == 1


def test_get_device(gateway_factory, sample_device):
    client = gateway_factory(device_handler=lambda request: httpx.Response(200, json=sample_device))

    response = client.get("/devices/7")

    assert response.status_code == 200
    assert response.json()["id"] == 7


def test_upstream_not_found_is_folded_into_500(gateway_factory):
    client = gateway_factory(device_handler=lambda request: httpx.Response(404, json={"error": "Device not found"}))

    response = client.get("/devices/7")

    assert response.status_code == 500
    assert response.json() == {"error": "Failed to fetch data: unexpected status code: 404"}


def test_upstream_unreachable_is_500(gateway_factory):
    def devices(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    response = gateway_factory(device_handler=devices).get("/devices/7")

    assert response.status_code == 500
    assert response.json()["error"].startswith("Failed to fetch data: ")


def test_create_device(gateway_factory, sample_device, device_payload):
    client = gateway_factory(device_handler=lambda request: httpx.Response(201, json=sample_device))

    response = client.post("/devices", json=device_payload)

    assert response.status_code == 200
    assert response.json()["status"] == "active"


def test_create_validates_locally(gateway_factory):
    response = gateway_factory().post("/devices", json={"serialNumber": "SN1"})
    assert response.status_code == 400


def test_create_failure(gateway_factory, device_payload):
    client = gateway_factory(device_handler=lambda request: httpx.Response(500, json={"error": "boom"}))

    response = client.post("/devices", json=device_payload)

    assert response.status_code == 500
    assert response.json()["error"].startswith("Failed to post data")


def test_update_device(gateway_factory, sample_device, device_payload):
    seen = []

    def devices(request: httpx.Request) -> httpx.Response:
        seen.append((request.method, request.url.path))
        return httpx.Response(200, json={**sample_device, "serialNumber": "SN2"})

    response = gateway_factory(device_handler=devices).put(
        "/devices/7", json={**device_payload, "serialNumber": "SN2"}
    )

    assert response.status_code == 200
    assert response.json()["serialNumber"] == "SN2"
    assert seen == [("PUT", "/devices/7")]


def test_update_failure(gateway_factory, device_payload):
    client = gateway_factory(device_handler=lambda request: httpx.Response(404, json={"error": "Device not found"}))

    response = client.put("/devices/7", json=device_payload)

    assert response.status_code == 500
    assert response.json()["error"].startswith("Failed to update data")


def test_delete_device(gateway_factory):
    client = gateway_factory(device_handler=lambda request: httpx.Response(200, json={"message": "ok"}))

    response = client.delete("/devices/7")

    assert response.status_code == 200
    assert response.json() == {"message": "Device deleted successfully"}


def test_delete_failure(gateway_factory):
    client = gateway_factory(device_handler=lambda request: httpx.Response(500, json={"error": "device not found"}))

    response = client.delete("/devices/7")

    assert response.status_code == 500
    assert response.json()["error"].startswith("Failed to delete data")


def test_telemetry_skips_device_lookup(gateway_factory, sample_telemetry):
    # device_handler left unset: any call to the device service fails the test
    client = gateway_factory(telemetry_handler=lambda request: httpx.Response(200, json=sample_telemetry))

    response = client.get("/devices/12345/telemetry")

    assert response.status_code == 200
    body = response.json()
    assert body[0]["deviceId"] == "7"
    assert body[0]["metricId"][0]["key"] == "temperature"
    assert body[0]["houseId"] == "1"


def test_telemetry_timeout(gateway_factory):
    def telemetry(request: httpx.Request) -> httpx.Response:
        raise httpx.ReadTimeout("timed out", request=request)

    response = gateway_factory(telemetry_handler=telemetry).get("/devices/7/telemetry")

    assert response.status_code == 500
    body = response.json()
    assert set(body) == {"error"}
    assert "Failed to fetch telemetry data" in body["error"]


def test_telemetry_decode_error(gateway_factory):
    client = gateway_factory(telemetry_handler=lambda request: httpx.Response(200, content=b"<html>"))

    response = client.get("/devices/7/telemetry")

    assert response.status_code == 500
    assert "Failed to fetch telemetry data" in response.json()["error"]


def test_default_upstreams_built_on_startup_and_closed_on_shutdown():
    app = create_gateway_app()
    assert app.state.device_provider is None
    assert app.state.telemetry_provider is None

    with TestClient(app):
        devices = app.state.device_provider
        telemetry = app.state.telemetry_provider
        assert devices.base_url == settings.device_api_url.rstrip("/")
        assert telemetry.base_url == settings.telemetry_api_url.rstrip("/")
        assert devices.timeout == settings.upstream_timeout_seconds

    assert devices._client.is_closed
    assert telemetry._client.is_closed
