"""
Circuit backends: where the four contract circuits are actually evaluated.

- SimulatedBackend: evaluates predicates locally and owns a VendorRegistry.
- RemoteContractBackend: submits circuit calls to a contract gateway over HTTP
  (httpx). Same four-circuit contract, interchangeable behind the engine.

Backends raise on failure; the engine turns exceptions into error envelopes.
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Any

import httpx

from vendor_qualification.config.env import (
    BACKEND_REMOTE,
    get_backend_kind,
    get_contract_address,
    get_contract_call_timeout,
    get_contract_gateway_url,
)
from vendor_qualification.core.exceptions import BackendNotConfiguredError, ContractCallError
from vendor_qualification.engine.models import Circuit, CircuitOutcome
from vendor_qualification.engine.registry import VendorRegistry
from vendor_qualification.qualification_logging import get_logger

logger = get_logger(__name__)


def _bool_output(value: bool) -> str:
    return f"[{str(value).lower()}]"


class QualificationBackend(ABC):
    """Four-circuit contract. Implementations must not retain vendor scores."""

    kind: str = "abstract"

    @abstractmethod
    def verify_qualification(self, vendor_score: int, minimum_threshold: int, salt: int) -> CircuitOutcome:
        ...

    @abstractmethod
    def check_compliance(
        self,
        certification_valid: bool,
        insurance_active: bool,
        payment_history_good: bool,
    ) -> CircuitOutcome:
        ...

    @abstractmethod
    def record_qualification(self, vendor_id: int) -> CircuitOutcome:
        ...

    @abstractmethod
    def is_vendor_qualified(self, vendor_id: int) -> CircuitOutcome:
        ...

    def qualified_vendors(self) -> list[int] | None:
        """Full registry enumeration, when the backend can provide it."""
        return None


class SimulatedBackend(QualificationBackend):
    """Local evaluation. The salt is a proof-binding placeholder and never affects results."""

    kind = "simulated"

    def __init__(self, registry: VendorRegistry | None = None) -> None:
        self.registry = registry if registry is not None else VendorRegistry()

    def verify_qualification(self, vendor_score: int, minimum_threshold: int, salt: int) -> CircuitOutcome:
        value = vendor_score >= minimum_threshold
        return CircuitOutcome(value=value, output=_bool_output(value))

    def check_compliance(
        self,
        certification_valid: bool,
        insurance_active: bool,
        payment_history_good: bool,
    ) -> CircuitOutcome:
        value = bool(certification_valid and insurance_active and payment_history_good)
        return CircuitOutcome(value=value, output=_bool_output(value))

    def record_qualification(self, vendor_id: int) -> CircuitOutcome:
        added, size = self.registry.add(vendor_id)
        if added:
            logger.info("vendor_recorded", vendor_id=vendor_id, registry_size=size)
        else:
            logger.debug("vendor_already_recorded", vendor_id=vendor_id, registry_size=size)
        return CircuitOutcome(value=None, output="Vendor marked as qualified", registry_size=size)

    def is_vendor_qualified(self, vendor_id: int) -> CircuitOutcome:
        value = self.registry.contains(vendor_id)
        return CircuitOutcome(value=value, output=_bool_output(value))

    def qualified_vendors(self) -> list[int]:
        return self.registry.snapshot()


class RemoteContractBackend(QualificationBackend):
    """
    Contract gateway client.

    POST {base_url}/contracts/{address}/circuits/{circuit} with {"args": [...]}.
    Response: {"result": value | [value, ...], "transactionHash"?, "gasUsed"?, "registrySize"?}.
    Integers are sent as JSON numbers (arbitrary size); no retries.
    """

    kind = "remote"

    def __init__(
        self,
        base_url: str,
        contract_address: str,
        *,
        timeout: float = 10.0,
        client: httpx.Client | None = None,
    ) -> None:
        if not base_url:
            raise BackendNotConfiguredError("Contract gateway URL not set (CONTRACT_GATEWAY_URL)")
        self.base_url = base_url.rstrip("/")
        self.contract_address = contract_address
        self.timeout = timeout
        self._client = client

    def _circuit_url(self, circuit: Circuit) -> str:
        return f"{self.base_url}/contracts/{self.contract_address}/circuits/{circuit.value}"

    def _post(self, client: httpx.Client, circuit: Circuit, args: list[Any]) -> httpx.Response:
        return client.post(self._circuit_url(circuit), json={"args": args}, timeout=self.timeout)

    def _call(self, circuit: Circuit, args: list[Any]) -> dict[str, Any]:
        try:
            if self._client is not None:
                resp = self._post(self._client, circuit, args)
            else:
                with httpx.Client(timeout=self.timeout) as client:
                    resp = self._post(client, circuit, args)
        except httpx.HTTPError as e:
            logger.warning("contract_call_transport_error", circuit=circuit.value, error=str(e))
            raise ContractCallError(f"Contract call failed: {e}", circuit=circuit.value) from e

        if resp.status_code >= 400:
            logger.warning("contract_call_http_error", circuit=circuit.value, status_code=resp.status_code)
            raise ContractCallError(
                f"Contract call {circuit.value} returned HTTP {resp.status_code}",
                status_code=resp.status_code,
                circuit=circuit.value,
            )
        try:
            data = resp.json()
        except json.JSONDecodeError as e:
            raise ContractCallError(f"Invalid JSON from contract gateway for {circuit.value}", circuit=circuit.value) from e
        if not isinstance(data, dict):
            raise ContractCallError(f"Unexpected payload from contract gateway for {circuit.value}", circuit=circuit.value)
        if data.get("error"):
            raise ContractCallError(str(data["error"]), circuit=circuit.value)
        return data

    @staticmethod
    def _outcome(circuit: Circuit, data: dict[str, Any], *, boolean: bool = True) -> CircuitOutcome:
        raw = data.get("result")
        first = raw[0] if isinstance(raw, list) and raw else raw
        gas = data.get("gasUsed")
        size = data.get("registrySize")
        if boolean:
            if not isinstance(first, bool):
                raise ContractCallError(
                    f"Expected boolean result from {circuit.value}, got {type(first).__name__}",
                    circuit=circuit.value,
                )
            value: bool | None = first
            output = _bool_output(first)
        else:
            value = None
            output = json.dumps(raw) if isinstance(raw, list) else "Vendor marked as qualified"
        return CircuitOutcome(
            value=value,
            output=output,
            transaction_hash=data.get("transactionHash"),
            gas_used=str(gas) if gas is not None else None,
            registry_size=int(size) if size is not None else None,
        )

    def verify_qualification(self, vendor_score: int, minimum_threshold: int, salt: int) -> CircuitOutcome:
        data = self._call(Circuit.VERIFY_QUALIFICATION, [vendor_score, minimum_threshold, salt])
        return self._outcome(Circuit.VERIFY_QUALIFICATION, data)

    def check_compliance(
        self,
        certification_valid: bool,
        insurance_active: bool,
        payment_history_good: bool,
    ) -> CircuitOutcome:
        data = self._call(
            Circuit.CHECK_COMPLIANCE,
            [certification_valid, insurance_active, payment_history_good],
        )
        return self._outcome(Circuit.CHECK_COMPLIANCE, data)

    def record_qualification(self, vendor_id: int) -> CircuitOutcome:
        data = self._call(Circuit.RECORD_QUALIFICATION, [vendor_id])
        return self._outcome(Circuit.RECORD_QUALIFICATION, data, boolean=False)

    def is_vendor_qualified(self, vendor_id: int) -> CircuitOutcome:
        data = self._call(Circuit.IS_VENDOR_QUALIFIED, [vendor_id])
        return self._outcome(Circuit.IS_VENDOR_QUALIFIED, data)


def build_backend(registry: VendorRegistry | None = None) -> QualificationBackend:
    """
    Backend selected by QUALIFICATION_BACKEND.
    remote requires CONTRACT_GATEWAY_URL; raises BackendNotConfiguredError otherwise.
    """
    kind = get_backend_kind()
    if kind == BACKEND_REMOTE:
        url = get_contract_gateway_url()
        if not url:
            raise BackendNotConfiguredError(
                "QUALIFICATION_BACKEND=remote requires CONTRACT_GATEWAY_URL"
            )
        logger.info("backend_selected", backend=kind, gateway=url)
        return RemoteContractBackend(
            url,
            get_contract_address(),
            timeout=get_contract_call_timeout(),
        )
    logger.info("backend_selected", backend=kind)
    return SimulatedBackend(registry)
