"""Utility for logging API requests when NEARBY_LOG_REQUESTS is enabled."""

import json
import logging
import os
import re
from typing import Any

logger = logging.getLogger(__name__)

_SENSITIVE_PARAMS = {"key", "api_key", "signature"}
_KEY_IN_URL = re.compile(r"([?&](?:key|api_key|signature)=)[^&]*")


def should_log_requests() -> bool:
    """Check if request logging is enabled via NEARBY_LOG_REQUESTS environment variable."""
    return os.getenv("NEARBY_LOG_REQUESTS", "").lower() == "true"


def redact_url(url: str) -> str:
    """Mask credentials embedded in a URL's query string."""
    return _KEY_IN_URL.sub(r"\1***REDACTED***", url)


def _redact_sensitive_params(params: dict[str, Any]) -> dict[str, Any]:
    """Redact credentials from query parameters."""
    return {k: "***REDACTED***" if k.lower() in _SENSITIVE_PARAMS else v for k, v in params.items()}


def _build_url_with_params(url: str, params: dict[str, Any] | None) -> str:
    """Build full URL with query parameters."""
    if not params:
        return url
    param_str = "&".join(f"{k}={v}" for k, v in sorted(params.items()))
    return f"{url}?{param_str}" if "?" not in url else f"{url}&{param_str}"


def _format_payload(payload: Any) -> str:
    """Format payload for logging."""
    try:
        return json.dumps(payload, indent=2) if isinstance(payload, dict) else str(payload)
    except (TypeError, ValueError):
        return str(payload)


def log_api_request(
    method: str,
    url: str,
    params: dict[str, Any] | None = None,
    payload: Any = None,
) -> None:
    """Log API request details if NEARBY_LOG_REQUESTS is enabled.

    Args:
        method: HTTP method (GET, POST, etc.).
        url: Request URL, possibly with an encoded query string.
        params: Query parameters (optional, credentials are redacted).
        payload: Request payload/body (optional).
    """
    if not should_log_requests():
        return

    safe_params = _redact_sensitive_params(params) if params else None
    full_url = _build_url_with_params(redact_url(url), safe_params)
    log_parts = [f"{method} {full_url}"]

    if payload is not None:
        log_parts.append(f"Payload: {_format_payload(payload)}")

    logger.info("API Request:\n" + "\n".join(log_parts))


def log_api_response(url: str, status: int, body: str) -> None:
    """Log a raw API response body (truncated) if NEARBY_LOG_REQUESTS is enabled."""
    if not should_log_requests():
        return

    logger.info(f"API Response {status} for {redact_url(url)}:\n{body[:2000]}")
