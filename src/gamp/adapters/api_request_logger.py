"""Utility for logging outgoing hits when GAMP_LOG_REQUESTS is enabled."""

import logging
import os
from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

REDACTED = "***REDACTED***"

# Visitor identifiers are personal data; keep them out of logs.
_SENSITIVE_PARAMS = frozenset({"cid", "uid"})
_SENSITIVE_HEADERS = frozenset({"authorization", "cookie"})


def should_log_requests() -> bool:
    """Check if request logging is enabled via GAMP_LOG_REQUESTS environment variable."""
    return os.getenv("GAMP_LOG_REQUESTS", "").lower() == "true"


def _redact_sensitive_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Redact visitor identifiers from a parameter set."""
    return {k: REDACTED if k in _SENSITIVE_PARAMS else v for k, v in params.items()}


def _redact_sensitive_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    return {k: REDACTED if k.lower() in _SENSITIVE_HEADERS else v for k, v in headers.items()}


def _build_url_with_params(url: str, params: Mapping[str, Any] | None) -> str:
    """Build full URL with query parameters."""
    if not params:
        return url
    query = urlencode(list(params.items()), safe="*")
    return f"{url}?{query}" if "?" not in url else f"{url}&{query}"


def log_api_request(
    method: str,
    url: str,
    params: Mapping[str, Any] | None = None,
    headers: Mapping[str, str] | None = None,
    payload: Mapping[str, Any] | None = None,
) -> None:
    """Log an outgoing hit if GAMP_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET or POST).
        url: Collection endpoint URL.
        params: Query parameters (GET hits).
        headers: Request headers (sensitive headers are redacted).
        payload: Form fields (POST hits).
    """
    if not should_log_requests():
        return

    safe_params = _redact_sensitive_params(params) if params else None
    log_parts = [f"{method} {_build_url_with_params(url, safe_params)}"]

    if headers:
        safe_headers = _redact_sensitive_headers(headers)
        log_parts.append("Headers: " + ", ".join(f"{k}: {v}" for k, v in safe_headers.items()))

    if payload:
        safe_payload = _redact_sensitive_params(payload)
        log_parts.append(f"Payload: {urlencode(list(safe_payload.items()), safe='*')}")

    logger.info("Measurement Protocol request:\n" + "\n".join(log_parts))
