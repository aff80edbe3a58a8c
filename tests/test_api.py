"""
Pytest tests for the FastAPI surface: four circuits, contract config, health,
debug registry, and request validation.
"""

from __future__ import annotations

import pytest


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_verify_qualification_route(client):
    r = client.post(
        "/api/circuits/verify-qualification",
        json={"vendor_score": 85, "minimum_threshold": 80, "salt": 12345},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["method"] == "verifyQualification"
    assert data["result"] is True
    assert data["params"]["salt"] == "12345"
    assert data["detail"]["privacy_level"] == "FULL_ZERO_KNOWLEDGE"


def test_verify_qualification_false_is_success(client):
    """A False answer is a 200 with result false and no error."""
    r = client.post(
        "/api/circuits/verify-qualification",
        json={"vendor_score": 75, "minimum_threshold": 80, "salt": 12345},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["result"] is False
    assert "error" not in data


def test_verify_qualification_large_salt(client):
    salt = 2**130 + 1
    r = client.post(
        "/api/circuits/verify-qualification",
        json={"vendor_score": 1, "minimum_threshold": 0, "salt": salt},
    )
    assert r.status_code == 200
    assert r.json()["params"]["salt"] == str(salt)


@pytest.mark.parametrize(
    "body",
    [
        {"vendor_score": -1, "minimum_threshold": 80, "salt": 1},
        {"vendor_score": 85, "minimum_threshold": -1, "salt": 1},
        {"vendor_score": "eighty", "minimum_threshold": 80, "salt": 1},
        {"vendor_score": 85, "minimum_threshold": 80},
    ],
)
def test_verify_qualification_rejects_malformed(client, body):
    """Malformed input is rejected before reaching the engine."""
    r = client.post("/api/circuits/verify-qualification", json=body)
    assert r.status_code == 422


def test_check_compliance_route(client):
    r = client.post(
        "/api/circuits/check-compliance",
        json={"certification_valid": True, "insurance_active": False, "payment_history_good": True},
    )
    assert r.status_code == 200
    data = r.json()
    assert data["method"] == "checkCompliance"
    assert data["result"] is False
    assert data["detail"]["criteria"]["insurance"] == "✗"


def test_check_compliance_missing_flag(client):
    r = client.post(
        "/api/circuits/check-compliance",
        json={"certification_valid": True, "insurance_active": True},
    )
    assert r.status_code == 422


def test_record_and_status_routes(client):
    """Record 999 then status 999 is QUALIFIED; 123 is NOT_QUALIFIED."""
    r1 = client.post("/api/circuits/record-qualification", json={"vendor_id": 999})
    assert r1.status_code == 200
    rec = r1.json()
    assert rec["method"] == "recordQualification"
    assert "result" not in rec
    assert rec["detail"]["registry_size"] == 1
    assert rec["detail"]["ledger_update"] == "vendors.markQualified(999)"

    r2 = client.get("/api/vendors/999/status")
    assert r2.status_code == 200
    assert r2.json()["result"] is True
    assert r2.json()["detail"]["status"] == "QUALIFIED"

    r3 = client.get("/api/vendors/123/status")
    assert r3.json()["result"] is False
    assert r3.json()["detail"]["status"] == "NOT_QUALIFIED"


def test_record_twice_size_one(client, registry):
    client.post("/api/circuits/record-qualification", json={"vendor_id": 999})
    r = client.post("/api/circuits/record-qualification", json={"vendor_id": 999})
    assert r.json()["detail"]["registry_size"] == 1
    assert len(registry) == 1


def test_record_rejects_negative_id(client, registry):
    r = client.post("/api/circuits/record-qualification", json={"vendor_id": -5})
    assert r.status_code == 422
    assert len(registry) == 0


def test_status_negative_id_answers_not_qualified(client):
    r = client.get("/api/vendors/-5/status")
    assert r.status_code == 200
    assert r.json()["result"] is False


def test_status_non_numeric_id(client):
    r = client.get("/api/vendors/abc/status")
    assert r.status_code == 422


def test_large_vendor_id_round_trip(client):
    vendor_id = 2**100
    client.post("/api/circuits/record-qualification", json={"vendor_id": vendor_id})
    r = client.get(f"/api/vendors/{vendor_id}/status")
    assert r.json()["result"] is True


def test_contract_config_route(client):
    r = client.get("/api/contract")
    assert r.status_code == 200
    data = r.json()
    assert data["network"] == "midnight-testnet"
    assert data["backend"] == "simulated"
    assert data["address"].startswith("2aa78f99")


def test_debug_registry_disabled_by_default(client):
    r = client.get("/debug/registry")
    assert r.status_code == 404
    assert r.json() == {"detail": "Not found"}


def test_debug_registry_enabled(client, monkeypatch):
    monkeypatch.setenv("QUALIFICATION_DEBUG", "1")
    for vendor_id in (5, 3, 5):
        client.post("/api/circuits/record-qualification", json={"vendor_id": vendor_id})
    r = client.get("/debug/registry")
    assert r.status_code == 200
    assert r.json() == {"size": 2, "vendor_ids": [3, 5]}


def test_apps_do_not_share_registries(engine, contract_config):
    """Each app owns its engine; recording in one is invisible to another."""
    from fastapi.testclient import TestClient

    from vendor_qualification.api_server.server import create_app
    from vendor_qualification.engine import QualificationEngine

    first = TestClient(create_app(engine))
    second = TestClient(create_app(QualificationEngine(config=contract_config)))
    first.post("/api/circuits/record-qualification", json={"vendor_id": 42})
    assert first.get("/api/vendors/42/status").json()["result"] is True
    assert second.get("/api/vendors/42/status").json()["result"] is False


def test_module_app_importable():
    from vendor_qualification.api_server.app import app

    assert app.title == "Vendor Qualification API"
