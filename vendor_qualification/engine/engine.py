"""
Qualification engine: the four contract circuits behind one call/response contract.

Each operation delegates evaluation to the injected backend and wraps the
outcome in its envelope type. Any exception from the backend becomes an
error envelope; nothing is retried and nothing propagates to the caller.
Vendor scores and thresholds are echoed in the envelope but never logged.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Callable

from vendor_qualification.config.env import (
    get_contract_address,
    get_contract_deployed_at,
    get_network,
)
from vendor_qualification.engine.backends import QualificationBackend, SimulatedBackend
from vendor_qualification.engine.models import (
    Circuit,
    ComplianceDetail,
    ComplianceEnvelope,
    ContractConfig,
    QualificationStatus,
    RecordDetail,
    RecordEnvelope,
    StatusDetail,
    StatusEnvelope,
    ThresholdDetail,
    ThresholdEnvelope,
)
from vendor_qualification.engine.registry import VendorRegistry
from vendor_qualification.qualification_logging import get_logger

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def default_contract_config() -> ContractConfig:
    """ContractConfig from env (CONTRACT_ADDRESS, QUALIFICATION_NETWORK, CONTRACT_DEPLOYED_AT)."""
    return ContractConfig(
        address=get_contract_address(),
        network=get_network(),
        deployed_at=get_contract_deployed_at(),
    )


def _error_message(exc: BaseException) -> str:
    return str(exc) or "Unknown error"


def _check(flag: bool) -> str:
    return "✓" if flag else "✗"


class QualificationEngine:
    """
    Evaluates the four circuits and owns (through its backend) the vendor registry.

    Args:
        backend: circuit backend; defaults to a SimulatedBackend over `registry`.
        registry: registry for the default simulated backend; ignored when `backend` is given.
        config: contract identifiers carried into every envelope.
        clock: returns an aware datetime used for envelope timestamps.
    """

    def __init__(
        self,
        backend: QualificationBackend | None = None,
        *,
        registry: VendorRegistry | None = None,
        config: ContractConfig | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.backend = backend if backend is not None else SimulatedBackend(registry)
        self.config = config or default_contract_config()
        self._clock = clock or utc_now

    def _timestamp(self) -> str:
        """ISO-8601 UTC with Z. Falls back to the system clock if the injected clock fails."""
        try:
            now = self._clock().astimezone(timezone.utc)
        except Exception as e:
            logger.warning("clock_failed", error=_error_message(e))
            now = utc_now()
        return now.isoformat().replace("+00:00", "Z")

    def _envelope_base(self, params: dict[str, Any]) -> dict[str, Any]:
        return {
            "params": params,
            "timestamp": self._timestamp(),
            "contract_address": self.config.address,
            "network": self.config.network,
        }

    def verify_qualification(self, vendor_score: int, minimum_threshold: int, salt: int) -> ThresholdEnvelope:
        """Circuit 1: vendor_score >= minimum_threshold. The salt never affects the result."""
        params = {
            "vendor_score": vendor_score,
            "minimum_threshold": minimum_threshold,
            "salt": str(salt),
        }
        base = self._envelope_base(params)
        try:
            outcome = self.backend.verify_qualification(vendor_score, minimum_threshold, salt)
            detail = ThresholdDetail(
                circuit=Circuit.VERIFY_QUALIFICATION.value,
                input=f"[{vendor_score}, {minimum_threshold}, {salt}]",
                output=outcome.output,
                zk_proof="Proves vendorScore >= minimumThreshold without revealing score",
            )
            logger.info("qualification_verified", method=Circuit.VERIFY_QUALIFICATION.value, qualified=outcome.value)
            return ThresholdEnvelope(
                **base,
                result=outcome.value,
                detail=detail,
                transaction_hash=outcome.transaction_hash,
                gas_used=outcome.gas_used,
            )
        except Exception as e:
            logger.warning("verify_qualification_failed", error=_error_message(e))
            return ThresholdEnvelope(**base, error=_error_message(e))

    def check_compliance(
        self,
        certification_valid: bool,
        insurance_active: bool,
        payment_history_good: bool,
    ) -> ComplianceEnvelope:
        """Circuit 2: all three requirements must hold. The criteria breakdown is display only."""
        params = {
            "certification_valid": certification_valid,
            "insurance_active": insurance_active,
            "payment_history_good": payment_history_good,
        }
        base = self._envelope_base(params)
        try:
            outcome = self.backend.check_compliance(certification_valid, insurance_active, payment_history_good)
            flags = ", ".join(str(f).lower() for f in (certification_valid, insurance_active, payment_history_good))
            detail = ComplianceDetail(
                circuit=Circuit.CHECK_COMPLIANCE.value,
                input=f"[{flags}]",
                output=outcome.output,
                criteria={
                    "certification": _check(certification_valid),
                    "insurance": _check(insurance_active),
                    "payment_history": _check(payment_history_good),
                },
            )
            logger.info("compliance_checked", method=Circuit.CHECK_COMPLIANCE.value, compliant=outcome.value)
            return ComplianceEnvelope(
                **base,
                result=outcome.value,
                detail=detail,
                transaction_hash=outcome.transaction_hash,
                gas_used=outcome.gas_used,
            )
        except Exception as e:
            logger.warning("check_compliance_failed", error=_error_message(e))
            return ComplianceEnvelope(**base, error=_error_message(e))

    def record_qualification(self, vendor_id: int) -> RecordEnvelope:
        """Circuit 3: mark vendor_id qualified. Idempotent; no boolean result."""
        params = {"vendor_id": vendor_id}
        base = self._envelope_base(params)
        try:
            outcome = self.backend.record_qualification(vendor_id)
            detail = RecordDetail(
                circuit=Circuit.RECORD_QUALIFICATION.value,
                input=f"[{vendor_id}]",
                output=outcome.output,
                ledger_update=f"vendors.markQualified({vendor_id})",
                registry_size=outcome.registry_size,
            )
            return RecordEnvelope(
                **base,
                detail=detail,
                transaction_hash=outcome.transaction_hash,
                gas_used=outcome.gas_used,
            )
        except Exception as e:
            logger.warning("record_qualification_failed", vendor_id=vendor_id, error=_error_message(e))
            return RecordEnvelope(**base, error=_error_message(e))

    def is_vendor_qualified(self, vendor_id: int) -> StatusEnvelope:
        """Circuit 4: yes/no membership at call time. Unknown ids answer False."""
        params = {"vendor_id": vendor_id}
        base = self._envelope_base(params)
        try:
            outcome = self.backend.is_vendor_qualified(vendor_id)
            status = QualificationStatus.QUALIFIED if outcome.value else QualificationStatus.NOT_QUALIFIED
            detail = StatusDetail(
                circuit=Circuit.IS_VENDOR_QUALIFIED.value,
                input=f"[{vendor_id}]",
                output=outcome.output,
                status=status,
            )
            logger.debug("vendor_status_checked", vendor_id=vendor_id, status=status.value)
            return StatusEnvelope(
                **base,
                result=outcome.value,
                detail=detail,
                transaction_hash=outcome.transaction_hash,
                gas_used=outcome.gas_used,
            )
        except Exception as e:
            logger.warning("is_vendor_qualified_failed", vendor_id=vendor_id, error=_error_message(e))
            return StatusEnvelope(**base, error=_error_message(e))

    def contract_config(self) -> dict[str, Any]:
        out = self.config.to_dict()
        out["backend"] = self.backend.kind
        return out

    def qualified_vendors(self) -> list[int] | None:
        """Internal enumeration of the registry (debug/testing). Not part of the public circuits."""
        return self.backend.qualified_vendors()
