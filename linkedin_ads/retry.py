"""Retry policy for transient LinkedIn API responses."""

from __future__ import annotations

import re

import requests

MAX_ATTEMPTS = 3
"""Total number of attempts, the first one included."""

_RETRYABLE_STATUSES = frozenset({429, 502, 503, 504})
_BASE_DELAY = 0.2
_INTEGER_RE = re.compile(r"[+-]?\d+")


def should_retry(status: int) -> bool:
    """Report whether an HTTP status warrants another attempt."""
    return status in _RETRYABLE_STATUSES


def retry_delay(response: requests.Response | None, attempt: int) -> float:
    """Seconds to wait before the next attempt.

    Honours an integer Retry-After header and otherwise backs off
    exponentially from 200ms (0.2, 0.4, 0.8, ...).
    """
    if response is not None:
        retry_after = response.headers.get("Retry-After", "")
        if _INTEGER_RE.fullmatch(retry_after):
            return float(int(retry_after))
    return (1 << attempt) * _BASE_DELAY