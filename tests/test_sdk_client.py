"""
Tests for the requests-based API client in docs/python_sdk_example.py.

The requests.Session is mocked; assertions cover routes, bodies and error mapping.
"""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from docs.python_sdk_example import QualificationClient, QualificationClientError


def _response(payload, *, ok=True, status_code=200):
    resp = MagicMock()
    resp.ok = ok
    resp.status_code = status_code
    resp.json.return_value = payload
    resp.headers = {"content-type": "application/json"}
    resp.text = str(payload)
    return resp


def test_verify_qualification_request():
    client = QualificationClient("http://api.test/")
    with patch.object(client._session, "request", return_value=_response({"result": True})) as req:
        out = client.verify_qualification(85, 80, 12345)
    assert out == {"result": True}
    req.assert_called_once_with(
        "POST",
        "http://api.test/api/circuits/verify-qualification",
        json={"vendor_score": 85, "minimum_threshold": 80, "salt": 12345},
        timeout=30.0,
    )


def test_status_request_path():
    client = QualificationClient("http://api.test")
    with patch.object(client._session, "request", return_value=_response({"result": False})) as req:
        client.is_vendor_qualified(123)
    assert req.call_args.args == ("GET", "http://api.test/api/vendors/123/status")


def test_record_request_body():
    client = QualificationClient("http://api.test")
    with patch.object(client._session, "request", return_value=_response({"detail": {"registry_size": 1}})) as req:
        out = client.record_qualification(999)
    assert out["detail"]["registry_size"] == 1
    assert req.call_args.kwargs["json"] == {"vendor_id": 999}


def test_debug_registry_request():
    client = QualificationClient("http://api.test")
    payload = {"size": 2, "vendor_ids": [3, 5]}
    with patch.object(client._session, "request", return_value=_response(payload)) as req:
        out = client.debug_registry()
    assert out == payload
    assert req.call_args.args == ("GET", "http://api.test/debug/registry")


def test_debug_registry_disabled_raises():
    client = QualificationClient("http://api.test")
    bad = _response({"detail": "Not found"}, ok=False, status_code=404)
    with patch.object(client._session, "request", return_value=bad):
        with pytest.raises(QualificationClientError) as exc_info:
            client.debug_registry()
    assert exc_info.value.status_code == 404


def test_non_2xx_raises():
    client = QualificationClient("http://api.test")
    bad = _response({"detail": "Not found"}, ok=False, status_code=404)
    with patch.object(client._session, "request", return_value=bad):
        with pytest.raises(QualificationClientError, match="Not found") as exc_info:
            client.health()
    assert exc_info.value.status_code == 404
