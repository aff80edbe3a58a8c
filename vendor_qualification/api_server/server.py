"""
FastAPI server: HTTP surface of the qualification engine.

Each app instance owns one engine (and so one registry). The module-level
`app` builds its engine from env (QUALIFICATION_BACKEND, CONTRACT_ADDRESS, ...);
tests build isolated apps with create_app(engine=...).
"""

from __future__ import annotations

from typing import Any

from fastapi import Depends, FastAPI, HTTPException
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from vendor_qualification import __version__
from vendor_qualification.api_server.circuits import get_engine, router as circuits_router
from vendor_qualification.config.env import is_debug_enabled
from vendor_qualification.engine import QualificationEngine, build_backend
from vendor_qualification.qualification_logging import get_logger

logger = get_logger(__name__)


# -----------------------------------------------------------------------------
# Response models
# -----------------------------------------------------------------------------


class ContractConfigResponse(BaseModel):
    """GET /api/contract response."""

    address: str = Field(..., description="Contract identifier carried into every envelope")
    network: str = Field(..., description="Network label")
    deployed_at: str = Field(..., description="Deployment instant (ISO 8601)")
    backend: str = Field(..., description="simulated | remote")


class RegistryDebugResponse(BaseModel):
    """GET /debug/registry response."""

    size: int = Field(..., ge=0, description="Number of recorded vendors")
    vendor_ids: list[int] = Field(default_factory=list, description="All recorded vendor ids, sorted")


# -----------------------------------------------------------------------------
# App and routes
# -----------------------------------------------------------------------------


def create_app(engine: QualificationEngine | None = None) -> FastAPI:
    """Build the API around `engine` (default: engine with the env-selected backend)."""
    if engine is None:
        engine = QualificationEngine(build_backend())

    app = FastAPI(
        title="Vendor Qualification API",
        description="Four-circuit vendor qualification contract: threshold, compliance, registry.",
        version=__version__,
    )
    app.state.engine = engine
    app.include_router(circuits_router, prefix="/api")

    @app.get("/health")
    def health() -> dict[str, str]:
        """Liveness probe: API is up."""
        return {"status": "ok"}

    @app.get("/api/contract", response_model=ContractConfigResponse)
    def contract_config(engine: QualificationEngine = Depends(get_engine)) -> ContractConfigResponse:
        return ContractConfigResponse(**engine.contract_config())

    @app.get("/debug/registry", response_model=RegistryDebugResponse)
    def debug_registry(engine: QualificationEngine = Depends(get_engine)) -> RegistryDebugResponse:
        """
        Debug: full registry enumeration. Disabled unless QUALIFICATION_DEBUG=1,
        since the public status circuit only ever answers yes/no.
        """
        if not is_debug_enabled():
            raise HTTPException(status_code=404, detail="Not found")
        vendor_ids = engine.qualified_vendors()
        if vendor_ids is None:
            raise HTTPException(status_code=501, detail="Registry enumeration not supported by this backend")
        return RegistryDebugResponse(size=len(vendor_ids), vendor_ids=vendor_ids)

    @app.exception_handler(HTTPException)
    def http_exception_handler(request: Any, exc: HTTPException) -> JSONResponse:
        """Consistent JSON error response for HTTPException."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
        )

    logger.info("api_app_created", backend=engine.backend.kind, contract_address=engine.config.address)
    return app


app = create_app()
