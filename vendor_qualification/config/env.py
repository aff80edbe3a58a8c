"""
Environment variable loading and validation for Vendor Qualification.

- CONTRACT_ADDRESS: contract identifier carried into every envelope
- QUALIFICATION_NETWORK: network label (default: midnight-testnet)
- CONTRACT_DEPLOYED_AT: deployment instant reported by the config endpoint
- QUALIFICATION_BACKEND: simulated | remote (default: simulated)
- CONTRACT_GATEWAY_URL: base URL of the contract gateway (required for remote)
- CONTRACT_CALL_TIMEOUT_SEC: per-call timeout for the remote backend
- QUALIFICATION_DEBUG: expose /debug/registry when truthy
- Loads .env from project root when available.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root: config is vendor_qualification/config/, root is 2 levels up
_CONFIG_DIR = Path(__file__).resolve().parent
_PACKAGE_DIR = _CONFIG_DIR.parent
_ROOT = _PACKAGE_DIR.parent
_ENV_PATH = _ROOT / ".env"

# Deployment recorded for the vendor qualification contract
DEFAULT_CONTRACT_ADDRESS = "2aa78f99159e7662a1fe3658f402ef4e64ff77c8769cb07368ac1702696301f8"
DEFAULT_NETWORK = "midnight-testnet"
DEFAULT_DEPLOYED_AT = "2026-02-14T10:02:32.337Z"

BACKEND_SIMULATED = "simulated"
BACKEND_REMOTE = "remote"
DEFAULT_CONTRACT_CALL_TIMEOUT_SEC = 10.0

_TRUTHY = ("1", "true", "yes", "on")


def load_qualification_env() -> None:
    """Load .env from project root. Safe to call multiple times; existing env wins."""
    load_dotenv(_ENV_PATH, override=False)


def get_contract_address() -> str:
    load_qualification_env()
    return (os.getenv("CONTRACT_ADDRESS") or "").strip() or DEFAULT_CONTRACT_ADDRESS


def get_network() -> str:
    load_qualification_env()
    return (os.getenv("QUALIFICATION_NETWORK") or "").strip() or DEFAULT_NETWORK


def get_contract_deployed_at() -> str:
    load_qualification_env()
    return (os.getenv("CONTRACT_DEPLOYED_AT") or "").strip() or DEFAULT_DEPLOYED_AT


def get_backend_kind() -> str:
    """
    Return QUALIFICATION_BACKEND from env: simulated | remote.
    Unknown values fall back to simulated.
    """
    load_qualification_env()
    raw = (os.getenv("QUALIFICATION_BACKEND") or BACKEND_SIMULATED).strip().lower()
    if raw in (BACKEND_REMOTE, "real", "onchain"):
        return BACKEND_REMOTE
    return BACKEND_SIMULATED


def get_contract_gateway_url() -> str | None:
    load_qualification_env()
    url = (os.getenv("CONTRACT_GATEWAY_URL") or "").strip()
    return url.rstrip("/") or None


def get_contract_call_timeout() -> float:
    load_qualification_env()
    raw = (os.getenv("CONTRACT_CALL_TIMEOUT_SEC") or "").strip()
    if not raw:
        return DEFAULT_CONTRACT_CALL_TIMEOUT_SEC
    try:
        return max(0.1, float(raw))
    except ValueError:
        return DEFAULT_CONTRACT_CALL_TIMEOUT_SEC


def is_debug_enabled() -> bool:
    """Return True when QUALIFICATION_DEBUG enables the registry debug endpoint."""
    load_qualification_env()
    return (os.getenv("QUALIFICATION_DEBUG") or "").strip().lower() in _TRUTHY
