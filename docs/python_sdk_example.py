"""
Vendor Qualification API Python client example.

Uses the requests library. Mirrors the routes of vendor_qualification.api_server.
Run: pip install requests

Usage:
    from docs.python_sdk_example import QualificationClient
    client = QualificationClient("http://localhost:8000")
    envelope = client.verify_qualification(85, 80, 12345)
    if envelope.get("error"):
        ...  # the envelope error is the only failure signal
    qualified = envelope["result"]
"""

from __future__ import annotations

from typing import Any

import requests


class QualificationClientError(Exception):
    """Raised when the API returns a non-2xx response."""

    def __init__(self, message: str, status_code: int | None = None, response: requests.Response | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class QualificationClient:
    """Client for the vendor qualification API."""

    def __init__(self, base_url: str = "http://localhost:8000", timeout: float = 30.0):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()

    def _request(
        self,
        method: str,
        path: str,
        *,
        json: dict[str, Any] | None = None,
    ) -> requests.Response:
        url = f"{self.base_url}{path}"
        resp = self._session.request(method, url, json=json, timeout=self.timeout)
        if not resp.ok:
            detail = resp.json().get("detail", resp.text) if resp.headers.get("content-type", "").startswith("application/json") else resp.text
            raise QualificationClientError(
                f"API error: {detail}",
                status_code=resp.status_code,
                response=resp,
            )
        return resp

    def verify_qualification(self, vendor_score: int, minimum_threshold: int, salt: int) -> dict[str, Any]:
        """Circuit 1: vendor_score >= minimum_threshold."""
        body = {"vendor_score": vendor_score, "minimum_threshold": minimum_threshold, "salt": salt}
        return self._request("POST", "/api/circuits/verify-qualification", json=body).json()

    def check_compliance(
        self,
        certification_valid: bool,
        insurance_active: bool,
        payment_history_good: bool,
    ) -> dict[str, Any]:
        """Circuit 2: all three requirements."""
        body = {
            "certification_valid": certification_valid,
            "insurance_active": insurance_active,
            "payment_history_good": payment_history_good,
        }
        return self._request("POST", "/api/circuits/check-compliance", json=body).json()

    def record_qualification(self, vendor_id: int) -> dict[str, Any]:
        """Circuit 3: mark vendor qualified (idempotent)."""
        return self._request("POST", "/api/circuits/record-qualification", json={"vendor_id": vendor_id}).json()

    def is_vendor_qualified(self, vendor_id: int) -> dict[str, Any]:
        """Circuit 4: yes/no status."""
        return self._request("GET", f"/api/vendors/{vendor_id}/status").json()

    def contract_config(self) -> dict[str, Any]:
        return self._request("GET", "/api/contract").json()

    def debug_registry(self) -> dict[str, Any]:
        """All recorded vendor ids. The server answers 404 unless QUALIFICATION_DEBUG=1."""
        return self._request("GET", "/debug/registry").json()

    def health(self) -> dict[str, str]:
        """Liveness probe."""
        return self._request("GET", "/health").json()


# -----------------------------------------------------------------------------
# Example usage
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    client = QualificationClient("http://localhost:8000")

    print("Health:", client.health())
    print("Contract:", client.contract_config())

    verified = client.verify_qualification(85, 80, 12345)
    print("Qualified:", verified.get("result"), verified.get("detail", {}).get("privacy_level"))

    compliance = client.check_compliance(True, True, True)
    print("Compliant:", compliance.get("result"), compliance.get("detail", {}).get("criteria"))

    recorded = client.record_qualification(999)
    print("Registry size:", recorded.get("detail", {}).get("registry_size"))

    status = client.is_vendor_qualified(999)
    print("Status:", status.get("detail", {}).get("status"))
