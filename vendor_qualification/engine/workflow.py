"""
End-to-end qualification workflow over one engine.

verify threshold -> check compliance -> record -> confirm status.
Stops at the first step that errors or answers False; a False answer is a
normal stop, not an error.
"""

from __future__ import annotations

from vendor_qualification.engine.engine import QualificationEngine
from vendor_qualification.engine.models import WorkflowResult
from vendor_qualification.qualification_logging import bind_vendor


def run_qualification_workflow(
    engine: QualificationEngine,
    vendor_id: int,
    vendor_score: int,
    minimum_threshold: int,
    salt: int,
    *,
    certification_valid: bool = True,
    insurance_active: bool = True,
    payment_history_good: bool = True,
) -> WorkflowResult:
    log = bind_vendor(vendor_id)
    result = WorkflowResult(vendor_id=vendor_id)

    threshold = engine.verify_qualification(vendor_score, minimum_threshold, salt)
    result.steps.append(threshold)
    if not threshold.ok or not threshold.result:
        result.stopped_at = threshold.method
        log.info("workflow_stopped", step=threshold.method, error=threshold.error)
        return result

    compliance = engine.check_compliance(certification_valid, insurance_active, payment_history_good)
    result.steps.append(compliance)
    if not compliance.ok or not compliance.result:
        result.stopped_at = compliance.method
        log.info("workflow_stopped", step=compliance.method, error=compliance.error)
        return result

    record = engine.record_qualification(vendor_id)
    result.steps.append(record)
    if not record.ok:
        result.stopped_at = record.method
        log.info("workflow_stopped", step=record.method, error=record.error)
        return result

    status = engine.is_vendor_qualified(vendor_id)
    result.steps.append(status)
    if not status.ok:
        result.stopped_at = status.method
        log.info("workflow_stopped", step=status.method, error=status.error)
        return result

    result.qualified = bool(status.result)
    log.info("workflow_completed", qualified=result.qualified)
    return result
