"""
Application-level exceptions.

Raised by backends and configuration; the engine converts them into
error-shaped envelopes, so none of these escape an engine call.
"""

from __future__ import annotations


class QualificationError(Exception):
    """Base class for vendor qualification errors."""


class BackendNotConfiguredError(QualificationError):
    """Raised when the selected backend is missing required configuration."""


class ContractCallError(QualificationError):
    """Raised when a remote contract call fails or returns an unusable payload."""

    def __init__(self, message: str, status_code: int | None = None, circuit: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.circuit = circuit
