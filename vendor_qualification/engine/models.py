"""
Data models for the qualification engine.

Request shapes, per-circuit detail blocks and the tagged response envelopes.
Each circuit has its own envelope type keyed by `method`; every envelope
carries either a result/detail pair or an error.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union


class Circuit(str, Enum):
    """The four contract circuits, named as the contract names them."""

    VERIFY_QUALIFICATION = "verifyQualification"
    CHECK_COMPLIANCE = "checkCompliance"
    RECORD_QUALIFICATION = "recordQualification"
    IS_VENDOR_QUALIFIED = "isVendorQualified"


class PrivacyLevel(str, Enum):
    FULL_ZERO_KNOWLEDGE = "FULL_ZERO_KNOWLEDGE"
    PRIVACY_PRESERVING = "PRIVACY_PRESERVING"
    PUBLIC = "PUBLIC"


class QualificationStatus(str, Enum):
    QUALIFIED = "QUALIFIED"
    NOT_QUALIFIED = "NOT_QUALIFIED"


@dataclass(frozen=True)
class ContractConfig:
    """Identifying attributes carried into every envelope. No effect on outcomes."""

    address: str
    network: str
    deployed_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "address": self.address,
            "network": self.network,
            "deployed_at": self.deployed_at,
        }


@dataclass(frozen=True)
class QualificationRequest:
    vendor_score: int
    minimum_threshold: int
    salt: int


@dataclass(frozen=True)
class ComplianceRequest:
    certification_valid: bool
    insurance_active: bool
    payment_history_good: bool


@dataclass(frozen=True)
class CircuitOutcome:
    """
    What a backend returns for one circuit call.

    value: boolean answer (None for recordQualification).
    output: formatted circuit output, e.g. "[true]".
    transaction_hash / gas_used: only set by backends that submit transactions.
    registry_size: registry size after a record call, when the backend knows it.
    """

    value: bool | None
    output: str
    transaction_hash: str | None = None
    gas_used: str | None = None
    registry_size: int | None = None


# -----------------------------------------------------------------------------
# Per-circuit detail blocks
# -----------------------------------------------------------------------------


@dataclass
class ThresholdDetail:
    circuit: str
    input: str
    output: str
    zk_proof: str
    privacy_level: PrivacyLevel = PrivacyLevel.FULL_ZERO_KNOWLEDGE

    def to_dict(self) -> dict[str, Any]:
        return {
            "circuit": self.circuit,
            "input": self.input,
            "output": self.output,
            "zk_proof": self.zk_proof,
            "privacy_level": self.privacy_level.value,
        }


@dataclass
class ComplianceDetail:
    circuit: str
    input: str
    output: str
    criteria: dict[str, str]
    logic: str = "certification AND insurance AND paymentHistory"
    privacy_level: PrivacyLevel = PrivacyLevel.FULL_ZERO_KNOWLEDGE

    def to_dict(self) -> dict[str, Any]:
        return {
            "circuit": self.circuit,
            "input": self.input,
            "output": self.output,
            "logic": self.logic,
            "criteria": dict(self.criteria),
            "privacy_level": self.privacy_level.value,
        }


@dataclass
class RecordDetail:
    circuit: str
    input: str
    output: str
    ledger_update: str
    registry_size: int | None
    note: str = "This is a public transaction visible on-chain"
    privacy_level: PrivacyLevel = PrivacyLevel.PUBLIC

    def to_dict(self) -> dict[str, Any]:
        return {
            "circuit": self.circuit,
            "input": self.input,
            "output": self.output,
            "ledger_update": self.ledger_update,
            "registry_size": self.registry_size,
            "note": self.note,
            "privacy_level": self.privacy_level.value,
        }


@dataclass
class StatusDetail:
    circuit: str
    input: str
    output: str
    status: QualificationStatus
    privacy_note: str = "Only yes/no returned. Score and details are never revealed."
    privacy_level: PrivacyLevel = PrivacyLevel.PRIVACY_PRESERVING

    def to_dict(self) -> dict[str, Any]:
        return {
            "circuit": self.circuit,
            "input": self.input,
            "output": self.output,
            "status": self.status.value,
            "privacy_note": self.privacy_note,
            "privacy_level": self.privacy_level.value,
        }


# -----------------------------------------------------------------------------
# Envelopes
# -----------------------------------------------------------------------------


@dataclass
class ResponseEnvelope:
    """
    Uniform result of every engine call.

    Exactly one of result/error is meaningful, except for recordQualification
    which has no boolean result. A False result is a successful answer.
    """

    METHOD: ClassVar[Circuit]

    params: dict[str, Any]
    timestamp: str
    contract_address: str
    network: str
    result: bool | None = None
    error: str | None = None
    transaction_hash: str | None = None
    gas_used: str | None = None

    @property
    def method(self) -> str:
        return self.METHOD.value

    @property
    def ok(self) -> bool:
        return self.error is None

    def _detail_dict(self) -> dict[str, Any] | None:
        detail = getattr(self, "detail", None)
        return detail.to_dict() if detail is not None else None

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "method": self.method,
            "params": dict(self.params),
            "timestamp": self.timestamp,
            "contract_address": self.contract_address,
            "network": self.network,
        }
        if self.error is not None:
            out["error"] = self.error
            return out
        if self.result is not None:
            out["result"] = self.result
        detail = self._detail_dict()
        if detail is not None:
            out["detail"] = detail
        if self.transaction_hash:
            out["transaction_hash"] = self.transaction_hash
        if self.gas_used:
            out["gas_used"] = self.gas_used
        return out


@dataclass
class ThresholdEnvelope(ResponseEnvelope):
    METHOD: ClassVar[Circuit] = Circuit.VERIFY_QUALIFICATION

    detail: ThresholdDetail | None = None


@dataclass
class ComplianceEnvelope(ResponseEnvelope):
    METHOD: ClassVar[Circuit] = Circuit.CHECK_COMPLIANCE

    detail: ComplianceDetail | None = None


@dataclass
class RecordEnvelope(ResponseEnvelope):
    METHOD: ClassVar[Circuit] = Circuit.RECORD_QUALIFICATION

    detail: RecordDetail | None = None


@dataclass
class StatusEnvelope(ResponseEnvelope):
    METHOD: ClassVar[Circuit] = Circuit.IS_VENDOR_QUALIFIED

    detail: StatusDetail | None = None


AnyEnvelope = Union[ThresholdEnvelope, ComplianceEnvelope, RecordEnvelope, StatusEnvelope]


@dataclass
class WorkflowResult:
    """Outcome of the qualify -> comply -> record -> status workflow."""

    vendor_id: int
    steps: list[AnyEnvelope] = field(default_factory=list)
    qualified: bool = False
    stopped_at: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "vendor_id": self.vendor_id,
            "qualified": self.qualified,
            "stopped_at": self.stopped_at,
            "steps": [s.to_dict() for s in self.steps],
        }
