"""Logging of outbound API calls when SEESTADTBOT_LOG_REQUESTS is enabled."""

import json
import logging
import os
from collections.abc import Mapping, Sequence
from urllib.parse import urlencode

logger = logging.getLogger(__name__)

QueryParams = Sequence[tuple[str, str]]

_SENSITIVE_HEADERS = {"authorization", "cookie", "x-api-key"}


def should_log_requests() -> bool:
    """Check if request logging is enabled via SEESTADTBOT_LOG_REQUESTS environment variable."""
    return os.getenv("SEESTADTBOT_LOG_REQUESTS", "").lower() == "true"


def build_url(url: str, params: QueryParams | None) -> str:
    """Build the full URL, keeping repeated parameters such as rbl=1&rbl=2 in order."""
    if not params:
        return url
    query = urlencode(list(params))
    return f"{url}&{query}" if "?" in url else f"{url}?{query}"


def redact_headers(headers: Mapping[str, str]) -> dict[str, str]:
    """Redact sensitive headers from logging."""
    return {
        k: "***REDACTED***" if k.lower() in _SENSITIVE_HEADERS else v for k, v in headers.items()
    }


def log_api_request(
    url: str,
    params: QueryParams | None = None,
    headers: Mapping[str, str] | None = None,
    timeout: float | None = None,
) -> None:
    """Log a GET request if SEESTADTBOT_LOG_REQUESTS is enabled.

    Args:
        url: Request URL, possibly with a query string already.
        params: Query parameters as (name, value) pairs.
        headers: Request headers, sensitive ones are redacted.
        timeout: Request timeout in seconds.
    """
    if not should_log_requests():
        return

    message = f"API Request: GET {build_url(url, params)}"
    if timeout is not None:
        message += f" (timeout {timeout}s)"
    if headers:
        message += f"\nHeaders: {json.dumps(redact_headers(headers), indent=2)}"
    logger.info(message)


def log_api_response(url: str, status: int, elapsed_seconds: float) -> None:
    """Log the status and duration of a response if request logging is enabled."""
    if not should_log_requests():
        return

    logger.info(f"API Response: {status} for {url} after {elapsed_seconds:.3f}s")
