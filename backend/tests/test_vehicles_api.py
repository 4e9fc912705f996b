from __future__ import annotations

from io import BytesIO
from zipfile import ZipFile

import pytest
from fastapi.testclient import TestClient

from backend.app import create_app
from backend.core.storage import MemoryStorage


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app(storage=MemoryStorage()))


def _create(client: TestClient, **payload: str) -> dict:
    body = {"vehicleNumber": "tn01ab1234", "ownerName": "RAJESH KUMAR"}
    body.update(payload)
    response = client.post("/vehicles/", json=body)
    assert response.status_code == 201, response.text
    return response.json()["vehicle"]


def test_healthcheck(client: TestClient) -> None:
    assert client.get("/health").json() == {"status": "ok"}


def test_create_normalizes_number_and_returns_notice(client: TestClient) -> None:
    response = client.post("/vehicles/", json={"vehicleNumber": "tn01ab1234", "fuelType": "PETROL"})

    assert response.status_code == 201
    payload = response.json()
    assert payload["notice"]["title"] == "Vehicle Created"
    vehicle = payload["vehicle"]
    assert vehicle["vehicleNumber"] == "TN 01 AB 1234"
    assert vehicle["fuelType"] == "PETROL"
    assert vehicle["createdAt"] == vehicle["updatedAt"]
    assert client.get(f"/vehicles/{vehicle['id']}").json() == vehicle


def test_create_without_number_is_rejected(client: TestClient) -> None:
    response = client.post("/vehicles/", json={"ownerName": "NOBODY"})

    assert response.status_code == 400
    assert response.json()["detail"]["description"] == "Please enter a vehicle number"
    assert client.get("/vehicles/").json() == []


def test_list_and_search(client: TestClient) -> None:
    first = _create(client)
    second = _create(client, vehicleNumber="ka05mn9876", ownerName="Priya Sharma")

    assert [v["id"] for v in client.get("/vehicles/").json()] == [first["id"], second["id"]]
    assert [v["id"] for v in client.get("/vehicles/", params={"search": "PRIYA"}).json()] == [second["id"]]
    assert len(client.get("/vehicles/", params={"search": "  "}).json()) == 2


def test_put_and_patch(client: TestClient) -> None:
    vehicle = _create(client, model="PULSAR")

    put = client.put(f"/vehicles/{vehicle['id']}", json={"vehicleNumber": "tn 01 ab 1234", "model": "PULSAR 150"})
    assert put.status_code == 200
    assert put.json()["notice"]["title"] == "Vehicle Updated"
    assert put.json()["vehicle"]["model"] == "PULSAR 150"
    assert put.json()["vehicle"]["ownerName"] == "RAJESH KUMAR"

    patch = client.patch(f"/vehicles/{vehicle['id']}", json={"rtoOffice": "RTO PUNE"})
    assert patch.status_code == 200
    assert patch.json()["rtoOffice"] == "RTO PUNE"
    assert patch.json()["model"] == "PULSAR 150"

    assert client.patch(f"/vehicles/{vehicle['id']}", json={"vehicleNumber": "--"}).status_code == 400
    assert client.patch("/vehicles/missing", json={"model": "X"}).status_code == 404
    assert client.put("/vehicles/missing", json={"vehicleNumber": "X"}).status_code == 404


def test_delete(client: TestClient) -> None:
    vehicle = _create(client)

    assert client.delete(f"/vehicles/{vehicle['id']}").status_code == 204
    assert client.get(f"/vehicles/{vehicle['id']}").status_code == 404
    assert client.delete(f"/vehicles/{vehicle['id']}").status_code == 404


def test_single_pdf_download(client: TestClient) -> None:
    vehicle = _create(client)

    response = client.get(f"/vehicles/{vehicle['id']}/pdf")

    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert 'filename="TN01AB1234_RC.pdf"' in response.headers["content-disposition"]
    assert response.content.startswith(b"%PDF")


def test_reference_endpoints(client: TestClient) -> None:
    options = client.get("/vehicles/options").json()
    assert "LMV (Light Motor Vehicle)" in options["vehicleClasses"]
    assert "ELECTRIC" in options["fuelTypes"]

    formatted = client.get("/vehicles/number-format", params={"value": "mh12cd5678"}).json()
    assert formatted == {"raw": "mh12cd5678", "formatted": "MH 12 CD 5678"}

    client.post("/vehicles/sample-data")
    stats = client.get("/vehicles/stats").json()
    assert stats == {"total": 3, "selected": 0, "lightVehicles": 1, "electric": 0}


def test_dashboard_bulk_export_flow(client: TestClient) -> None:
    first = _create(client)
    second = _create(client, vehicleNumber="ka05mn9876")

    rejected = client.post("/dashboard/export")
    assert rejected.status_code == 400
    assert rejected.json()["detail"]["title"] == "No Selection"

    state = client.post("/dashboard/selection/all").json()
    assert state["selectionState"] == "all"
    assert state["selectedIds"] == [first["id"], second["id"]]

    response = client.post("/dashboard/export")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/zip"
    assert response.headers["x-export-count"] == "2"
    assert "vehicle_pdfs_" in response.headers["content-disposition"]
    with ZipFile(BytesIO(response.content)) as archive:
        assert sorted(archive.namelist()) == ["KA05MN9876_RC.pdf", "TN01AB1234_RC.pdf"]

    assert client.get("/dashboard/").json()["selectedIds"] == []


def test_dashboard_query_toggle_and_delete(client: TestClient) -> None:
    first = _create(client)
    second = _create(client, vehicleNumber="ka05mn9876", ownerName="PRIYA")
    client.get("/dashboard/")

    toggled = client.post(f"/dashboard/selection/{first['id']}").json()
    assert toggled["selectedIds"] == [first["id"]]
    assert toggled["selectionState"] == "partial"

    filtered = client.put("/dashboard/query", json={"query": "priya"}).json()
    assert [v["id"] for v in filtered["vehicles"]] == [second["id"]]
    assert filtered["selectedIds"] == [first["id"]]

    assert client.post("/dashboard/selection/missing").status_code == 404
    assert client.delete("/dashboard/vehicles/missing").status_code == 204
    assert client.delete(f"/dashboard/vehicles/{first['id']}").status_code == 204

    state = client.get("/dashboard/").json()
    assert state["selectedIds"] == []
    assert state["stats"]["total"] == 1
    assert client.delete("/dashboard/selection").json()["selectionState"] == "none"
