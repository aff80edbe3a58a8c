"""
Structured JSON logging: timestamp, event_type, method, vendor_id.

structlog with ISO timestamps, log level, and consistent keys for aggregation.
Private circuit inputs (vendor_score, minimum_threshold, salt) are redacted by a
processor before rendering, so a stray keyword argument cannot leak a score.

Uses only Python stdlib logging and structlog; no vendor_qualification imports to avoid circular imports.
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any

import structlog

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)

# JSON output for production (LOG_FORMAT=json); human-readable for local
LOG_FORMAT = os.getenv("LOG_FORMAT", "json").strip().lower()

PRIVATE_KEYS = frozenset({"vendor_score", "minimum_threshold", "salt", "score", "threshold"})
REDACTED = "[redacted]"


def _add_timestamp(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    if "timestamp" not in event_dict:
        event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _normalize_event(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Rename structlog 'event' to event_type; keep message if present."""
    if "event" in event_dict and "event_type" not in event_dict:
        event_dict["event_type"] = event_dict.pop("event")
    if "message" not in event_dict and "event_type" in event_dict:
        event_dict["message"] = str(event_dict["event_type"])
    return event_dict


def redact_private_inputs(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Replace private circuit inputs with a marker, including inside a `params` dict."""
    for key in PRIVATE_KEYS.intersection(event_dict):
        event_dict[key] = REDACTED
    params = event_dict.get("params")
    if isinstance(params, dict) and PRIVATE_KEYS.intersection(params):
        event_dict["params"] = {k: (REDACTED if k in PRIVATE_KEYS else v) for k, v in params.items()}
    return event_dict


def configure_structlog(level: int = LOG_LEVEL_VALUE, log_format: str = LOG_FORMAT) -> None:
    """Configure structlog: redaction, timestamp, level, event_type, JSON or console rendering."""
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        redact_private_inputs,
        _add_timestamp,
        _normalize_event,
    ]
    if log_format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Return a structured logger for the given module name.

        logger = get_logger(__name__)
        logger.info("vendor_recorded", vendor_id=999, registry_size=1)
    Output (JSON): {"event_type": "vendor_recorded", "vendor_id": 999, "registry_size": 1, "timestamp": "...", "level": "info", "logger": "module.name"}
    """
    return structlog.get_logger(name).bind(logger=name)


def bind_vendor(vendor_id: int) -> structlog.BoundLogger:
    """Logger with vendor_id bound to all subsequent calls (one per workflow run)."""
    return get_logger("vendor_qualification").bind(vendor_id=vendor_id)
