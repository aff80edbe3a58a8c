# Qualification engine: four contract circuits, vendor registry, pluggable backends.

from vendor_qualification.engine.backends import (
    QualificationBackend,
    RemoteContractBackend,
    SimulatedBackend,
    build_backend,
)
from vendor_qualification.engine.engine import QualificationEngine, default_contract_config
from vendor_qualification.engine.models import (
    Circuit,
    ComplianceEnvelope,
    ComplianceRequest,
    ContractConfig,
    PrivacyLevel,
    QualificationRequest,
    QualificationStatus,
    RecordEnvelope,
    ResponseEnvelope,
    StatusEnvelope,
    ThresholdEnvelope,
    WorkflowResult,
)
from vendor_qualification.engine.registry import VendorRegistry
from vendor_qualification.engine.workflow import run_qualification_workflow

__all__ = [
    "Circuit",
    "ComplianceEnvelope",
    "ComplianceRequest",
    "ContractConfig",
    "PrivacyLevel",
    "QualificationBackend",
    "QualificationEngine",
    "QualificationRequest",
    "QualificationStatus",
    "RecordEnvelope",
    "RemoteContractBackend",
    "ResponseEnvelope",
    "SimulatedBackend",
    "StatusEnvelope",
    "ThresholdEnvelope",
    "VendorRegistry",
    "WorkflowResult",
    "build_backend",
    "default_contract_config",
    "run_qualification_workflow",
]
