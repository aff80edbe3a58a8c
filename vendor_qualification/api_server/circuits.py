"""
FastAPI router: the four contract circuits.

POST /circuits/verify-qualification, POST /circuits/check-compliance,
POST /circuits/record-qualification, GET /vendors/{vendor_id}/status.

Malformed input is rejected here (422) and never reaches the engine. Engine
errors come back as envelopes with an `error` field and HTTP 200: the envelope,
not the status code, is the failure signal.
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, Field

from vendor_qualification.engine import QualificationEngine

router = APIRouter(tags=["circuits"])


def get_engine(request: Request) -> QualificationEngine:
    """Dependency: the engine owned by this app instance."""
    return request.app.state.engine


class VerifyQualificationRequest(BaseModel):
    """POST /circuits/verify-qualification body."""

    vendor_score: int = Field(..., ge=0, description="Private vendor score; only the outcome is meant to be observable")
    minimum_threshold: int = Field(..., ge=0, description="Minimum score required")
    salt: int = Field(..., description="Proof-binding salt (any size); does not affect the result")


class CheckComplianceRequest(BaseModel):
    """POST /circuits/check-compliance body."""

    certification_valid: bool
    insurance_active: bool
    payment_history_good: bool


class RecordQualificationRequest(BaseModel):
    """POST /circuits/record-qualification body."""

    vendor_id: int = Field(..., ge=0, description="Vendor identifier (unbounded)")


@router.post("/circuits/verify-qualification")
def verify_qualification(
    body: VerifyQualificationRequest,
    engine: QualificationEngine = Depends(get_engine),
) -> dict[str, Any]:
    return engine.verify_qualification(body.vendor_score, body.minimum_threshold, body.salt).to_dict()


@router.post("/circuits/check-compliance")
def check_compliance(
    body: CheckComplianceRequest,
    engine: QualificationEngine = Depends(get_engine),
) -> dict[str, Any]:
    return engine.check_compliance(
        body.certification_valid,
        body.insurance_active,
        body.payment_history_good,
    ).to_dict()


@router.post("/circuits/record-qualification")
def record_qualification(
    body: RecordQualificationRequest,
    engine: QualificationEngine = Depends(get_engine),
) -> dict[str, Any]:
    return engine.record_qualification(body.vendor_id).to_dict()


@router.get("/vendors/{vendor_id}/status")
def vendor_status(
    vendor_id: int,
    engine: QualificationEngine = Depends(get_engine),
) -> dict[str, Any]:
    """Yes/no only. Ids never recorded, including negative ids, answer NOT_QUALIFIED."""
    return engine.is_vendor_qualified(vendor_id).to_dict()
