"""HTTP gateway to the LinkedIn Marketing REST API.

Every request goes through :class:`Client` so that authentication, the
LinkedIn-Version header, the Rest.li protocol header, retries and error
decoding are applied the same way everywhere.
"""

from __future__ import annotations

import json
import sys
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, TextIO, Union
from urllib.parse import urlencode, urlsplit, urlunsplit

import requests

from linkedin_ads.errors import ClientError, parse_error
from linkedin_ads.retry import MAX_ATTEMPTS, retry_delay, should_retry

DEFAULT_TIMEOUT = 30.0
RESTLI_PROTOCOL_VERSION = "2.0.0"

QueryParams = Mapping[str, Union[str, Sequence[str]]]

_KB = 1024
_MB = 1024 * 1024


def format_bytes(n: int) -> str:
    """Render a byte count compactly; a negative (unknown) size renders as "-"."""
    if n < 0:
        return "-"
    if n >= _MB:
        return f"{n / _MB:.1f}MB"
    if n >= _KB:
        return f"{n / _KB:.1f}KB"
    return f"{n}B"


@dataclass(frozen=True)
class PostResult:
    """Outcome of a POST: the new resource id (if any) and the raw body."""

    resource_id: str
    content: bytes = b""

    def json(self) -> Any:
        """Decode the response body, or return None when it was empty."""
        if not self.content:
            return None
        return _decode(self.content)


class Client:
    """A small LinkedIn REST client backed by a requests session."""

    def __init__(
        self,
        base_url: str,
        token: str = "",
        api_version: str = "",
        session: requests.Session | None = None,
        verbose: bool = False,
        logger: TextIO | None = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._base = base_url
        self._token = token
        self._version = api_version
        self._session = session if session is not None else requests.Session()
        self._verbose = verbose
        self._logger = logger if logger is not None else sys.stderr
        self._timeout = timeout

    @property
    def base_url(self) -> str:
        """The configured API root, e.g. https://api.linkedin.com/rest."""
        return self._base

    def get_json(self, path: str, query: QueryParams | None = None) -> Any:
        """GET path with URL-encoded query parameters and decode the JSON body."""
        url = self._base + path
        if query is not None:
            url = _with_query(url, _encode_query(query))
        response = self._send("GET", url)
        _check(response)
        return _decode(response.content)

    def get_json_raw_query(self, path: str, raw_query: str) -> Any:
        """GET path with an already-encoded query string forwarded verbatim.

        Needed for Rest.li finder parameters whose tuple syntax, such as
        ``(start:(year:2026,...))`` or ``List(urn:...)``, must not be escaped.
        """
        response = self._send("GET", _with_query(self._base + path, raw_query))
        _check(response)
        return _decode(response.content)

    def post_json(self, path: str, body: Any) -> PostResult:
        """POST a JSON body and return the new id from X-RestLi-Id or X-LinkedIn-Id."""
        response = self._send("POST", self._base + path, body=body)
        _check(response)
        resource_id = response.headers.get("X-RestLi-Id") or response.headers.get(
            "X-LinkedIn-Id", ""
        )
        return PostResult(resource_id, response.content)

    def partial_update(self, path: str, body: Any) -> None:
        """Send a Rest.li PARTIAL_UPDATE; body is usually {"patch": {"$set": ...}}."""
        response = self._send(
            "POST",
            self._base + path,
            body=body,
            extra_headers={"X-RestLi-Method": "PARTIAL_UPDATE"},
        )
        _check(response)

    def delete(self, path: str) -> None:
        """Send a DELETE; any 2xx response counts as success."""
        _check(self._send("DELETE", self._base + path))

    def put_binary(self, target_url: str, data: bytes, content_type: str) -> None:
        """PUT raw bytes to an absolute URL such as an image upload target.

        Only Authorization and Content-Type are sent; no retries are made.
        """
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": content_type,
        }
        response = self._request("PUT", target_url, data, headers)
        _check(response)

    def _send(
        self,
        method: str,
        url: str,
        body: Any = None,
        extra_headers: Mapping[str, str] | None = None,
    ) -> requests.Response:
        payload = None
        if body is not None:
            payload = json.dumps(body, separators=(",", ":"), ensure_ascii=False).encode("utf-8")
        headers = {
            "Authorization": f"Bearer {self._token}",
            "Linkedin-Version": self._version,
            "X-Restli-Protocol-Version": RESTLI_PROTOCOL_VERSION,
            "Accept": "application/json",
        }
        if payload is not None:
            headers["Content-Type"] = "application/json"
        headers.update(extra_headers or {})

        for attempt in range(MAX_ATTEMPTS - 1):
            response = self._request(method, url, payload, headers)
            if not should_retry(response.status_code):
                return response
            delay = retry_delay(response, attempt)
            response.close()
            time.sleep(max(0.0, delay))
        return self._request(method, url, payload, headers)

    def _request(
        self,
        method: str,
        url: str,
        payload: bytes | None,
        headers: Mapping[str, str],
    ) -> requests.Response:
        started = time.monotonic()
        try:
            response = self._session.request(
                method, url, data=payload, headers=dict(headers), timeout=self._timeout
            )
        except requests.RequestException as exc:
            self._trace(f"{method} {url} (err: {exc}, {_elapsed_ms(started)}ms)")
            raise ClientError(f"{method} {url}: {exc}") from exc
        size = format_bytes(_content_length(response))
        self._trace(f"{method} {url} ({response.status_code}, {_elapsed_ms(started)}ms, {size})")
        return response

    def _trace(self, line: str) -> None:
        # Authorization headers are never written here.
        if self._verbose and self._logger is not None:
            self._logger.write(line + "\n")


def _encode_query(query: QueryParams) -> str:
    pairs: list[tuple[str, str]] = []
    for key in sorted(query):
        value = query[key]
        if isinstance(value, str):
            pairs.append((key, value))
        else:
            pairs.extend((key, item) for item in value)
    return urlencode(pairs)


def _with_query(url: str, raw_query: str) -> str:
    return urlunsplit(urlsplit(url)._replace(query=raw_query))


def _check(response: requests.Response) -> None:
    if response.status_code >= 300:
        raise parse_error(response)


def _decode(content: bytes) -> Any:
    try:
        return json.loads(content)
    except ValueError as exc:
        raise ClientError(f"decode response: {exc}") from exc


def _content_length(response: requests.Response) -> int:
    try:
        return int(response.headers.get("Content-Length", ""))
    except ValueError:
        return -1


def _elapsed_ms(started: float) -> int:
    return int((time.monotonic() - started) * 1000)