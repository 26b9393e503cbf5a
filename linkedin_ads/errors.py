"""Exceptions raised by the API client and decoding of LinkedIn error bodies."""

from __future__ import annotations

import json
import re
from typing import Any

import requests

_SCOPE_RE = re.compile(
    r"(?:scope|required ?permissions?|needs)[: ]+([\w_,\s]+)",
    re.IGNORECASE | re.ASCII,
)
_INTEGER_RE = re.compile(r"[+-]?\d+")

_UNAUTHORIZED = 401
_FORBIDDEN = 403
_TOO_MANY_REQUESTS = 429


class ClientError(Exception):
    """Base class for every failure reported by the API client."""


class APIError(ClientError):
    """A structured LinkedIn error envelope.

    LinkedIn reports errors as JSON such as
    ``{"status":401,"code":"UNAUTHORIZED","message":"...","serviceErrorCode":65601}``.
    ``retry_after`` holds the Retry-After header in seconds and is only set on
    429 responses that survived every retry.
    """

    def __init__(
        self,
        status: int,
        code: str = "",
        message: str = "",
        service_error_code: int = 0,
        retry_after: int = 0,
    ) -> None:
        super().__init__()
        self.status = status
        self.code = code
        self.message = message
        self.service_error_code = service_error_code
        self.retry_after = retry_after

    def __str__(self) -> str:
        if self.code:
            base = f"linkedin api {self.status} {self.code}: {self.message}"
        else:
            base = f"linkedin api {self.status}: {self.message}"
        if self.status == _UNAUTHORIZED:
            return base + " — run 'linkedin-ads auth login' to refresh your token"
        if self.status == _FORBIDDEN:
            hint = " — token is missing the required scope for this endpoint"
            scope = extract_scope(self.message)
            if scope:
                hint = f" — missing scope: {scope}"
            if self.service_error_code:
                return f"{base} (serviceErrorCode: {self.service_error_code}){hint}"
            return base + hint
        if self.status == _TOO_MANY_REQUESTS and self.retry_after > 0:
            return f"{base} — Retry-After: {_format_duration(self.retry_after)}"
        return base

    def __repr__(self) -> str:
        return (
            f"APIError(status={self.status!r}, code={self.code!r}, "
            f"message={self.message!r}, service_error_code={self.service_error_code!r}, "
            f"retry_after={self.retry_after!r})"
        )


class HTTPStatusError(ClientError):
    """An error response whose body is not a LinkedIn error envelope."""

    def __init__(self, status: int, body: str) -> None:
        super().__init__(status, body)
        self.status = status
        self.body = body

    def __str__(self) -> str:
        return f"http {self.status}: {self.body}"


def extract_scope(message: str) -> str:
    """Return the scope hint embedded in a 403 message, or "" when none is found."""
    match = _SCOPE_RE.search(message)
    if match is None:
        return ""
    return match.group(1).strip()


def parse_error(response: requests.Response) -> ClientError:
    """Build the exception describing an error response (the caller raises it)."""
    content = response.content
    try:
        payload = json.loads(content)
    except ValueError:
        payload = None
    error = _api_error_from(payload)
    if error is not None:
        if error.status == _TOO_MANY_REQUESTS:
            retry_after = response.headers.get("Retry-After", "")
            if _INTEGER_RE.fullmatch(retry_after):
                error.retry_after = int(retry_after)
        return error
    return HTTPStatusError(response.status_code, content.decode("utf-8", errors="replace"))


def _api_error_from(payload: Any) -> APIError | None:
    if not isinstance(payload, dict):
        return None
    status = _field(payload, "status", int, 0)
    code = _field(payload, "code", str, "")
    message = _field(payload, "message", str, "")
    service_code = _field(payload, "serviceErrorCode", int, 0)
    if status is None or code is None or message is None or service_code is None:
        return None
    if status == 0:
        return None
    return APIError(status, code, message, service_code)


def _field(payload: dict, key: str, kind: type, default: Any) -> Any:
    """Return payload[key] if it has the expected type, the default if absent, else None."""
    value = payload.get(key)
    if value is None:
        return default
    if isinstance(value, bool) or not isinstance(value, kind):
        return None
    return value


def _format_duration(seconds: int) -> str:
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"