"""
Pytest fixtures for vendor qualification tests. Each test gets its own engine
and registry; envelope timestamps come from a frozen clock.
"""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

FROZEN_NOW = datetime(2026, 2, 14, 10, 2, 32, tzinfo=timezone.utc)
FROZEN_TIMESTAMP = "2026-02-14T10:02:32Z"
TEST_CONTRACT_ADDRESS = "2aa78f99159e7662a1fe3658f402ef4e64ff77c8769cb07368ac1702696301f8"


@pytest.fixture
def contract_config():
    from vendor_qualification.engine import ContractConfig

    return ContractConfig(
        address=TEST_CONTRACT_ADDRESS,
        network="midnight-testnet",
        deployed_at="2026-02-14T10:02:32.337Z",
    )


@pytest.fixture
def registry():
    from vendor_qualification.engine import VendorRegistry

    return VendorRegistry()


@pytest.fixture
def engine(registry, contract_config):
    """Simulated engine over the `registry` fixture, frozen clock."""
    from vendor_qualification.engine import QualificationEngine

    return QualificationEngine(registry=registry, config=contract_config, clock=lambda: FROZEN_NOW)


@pytest.fixture
def client(engine, monkeypatch):
    """FastAPI TestClient over an app that owns the `engine` fixture."""
    from fastapi.testclient import TestClient

    from vendor_qualification.api_server.server import create_app

    monkeypatch.delenv("QUALIFICATION_DEBUG", raising=False)
    return TestClient(create_app(engine))
