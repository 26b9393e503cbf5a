"""Pagination over Rest.li start/count finders and cursor-token endpoints."""

from __future__ import annotations

from typing import Any
from urllib.parse import urlsplit

from linkedin_ads.client import Client, QueryParams
from linkedin_ads.errors import ClientError

DEFAULT_PAGE_SIZE = 500


def extract_path_and_query(href: str, base: str) -> tuple[str, str] | None:
    """Turn an absolute paging link into (path, raw query) relative to base.

    Returns None when the link is empty, unparsable or on another host; the
    caller then falls back to start/count arithmetic.
    """
    if not href:
        return None
    try:
        link = urlsplit(href)
        root = urlsplit(base)
    except ValueError:
        return None
    if _host(link.netloc) != _host(root.netloc):
        return None
    path = link.path
    if root.path not in ("", "/") and path.startswith(root.path):
        path = path[len(root.path):]
    return path or "/", link.query


def paginate_start_count(
    client: Client,
    path: str,
    query: QueryParams | None = None,
    page_size: int = DEFAULT_PAGE_SIZE,
    limit: int = 0,
) -> list[Any]:
    """Collect every element of a start/count finder.

    Follows ``paging.links[rel=next]`` when the server provides it. With a
    positive limit, at most that many elements are returned.
    """
    if page_size <= 0:
        page_size = DEFAULT_PAGE_SIZE
    params: dict[str, Any] = dict(query or {})
    start = 0
    following: tuple[str, str] | None = None
    items: list[Any] = []
    while True:
        if following is None:
            params["start"] = str(start)
            params["count"] = str(page_size)
            page = client.get_json(path, params)
        else:
            page = client.get_json_raw_query(*following)
        elements = _elements(page)
        items.extend(elements)
        if limit > 0 and len(items) >= limit:
            return items[:limit]
        target = extract_path_and_query(_next_href(page), client.base_url)
        if target is not None:
            following = target
            continue
        # Once links are being followed, a missing next link ends the stream.
        if following is not None or len(elements) < page_size:
            return items
        total = _total(page)
        if total > 0 and start + page_size >= total:
            return items
        start += page_size


def paginate_start_count_raw(
    client: Client,
    path: str,
    raw_query: str,
    page_size: int = DEFAULT_PAGE_SIZE,
    limit: int = 0,
) -> list[Any]:
    """Like :func:`paginate_start_count` for a pre-encoded query string.

    The start/count cursor is appended to the raw query, so Rest.li tuples
    with parentheses and colons reach the server unescaped.
    """
    if page_size <= 0:
        page_size = DEFAULT_PAGE_SIZE
    start = 0
    current_path, current_query = path, raw_query
    following = False
    items: list[Any] = []
    while True:
        full_query = current_query
        if not following:
            full_query = f"{current_query}&start={start}&count={page_size}"
        page = client.get_json_raw_query(current_path, full_query)
        elements = _elements(page)
        items.extend(elements)
        if limit > 0 and len(items) >= limit:
            return items[:limit]
        target = extract_path_and_query(_next_href(page), client.base_url)
        if target is not None:
            following = True
            current_path, current_query = target
            continue
        if following or len(elements) < page_size:
            return items
        total = _total(page)
        if total > 0 and start + page_size >= total:
            return items
        start += page_size


def paginate_token(
    client: Client,
    path: str,
    query: QueryParams | None = None,
    limit: int = 0,
) -> list[Any]:
    """Collect every element of an endpoint paged by metadata.nextPageToken."""
    params: dict[str, Any] = dict(query or {})
    items: list[Any] = []
    while True:
        page = client.get_json(path, params)
        items.extend(_elements(page))
        if limit > 0 and len(items) >= limit:
            return items[:limit]
        token = _next_token(page)
        if not token:
            return items
        params["pageToken"] = token


def _host(netloc: str) -> str:
    return netloc.rpartition("@")[2]


def _elements(page: Any) -> list[Any]:
    if not isinstance(page, dict):
        raise ClientError(f"unexpected page of type {type(page).__name__}")
    elements = page.get("elements")
    if elements is None:
        return []
    if not isinstance(elements, list):
        raise ClientError("page elements is not a list")
    return elements


def _paging(page: dict) -> dict:
    paging = page.get("paging")
    return paging if isinstance(paging, dict) else {}


def _next_href(page: dict) -> str:
    for link in _paging(page).get("links") or []:
        if isinstance(link, dict) and link.get("rel") == "next":
            href = link.get("href")
            return href if isinstance(href, str) else ""
    return ""


def _total(page: dict) -> int:
    total = _paging(page).get("total")
    if isinstance(total, int) and not isinstance(total, bool):
        return total
    return 0


def _next_token(page: dict) -> str:
    metadata = page.get("metadata")
    if not isinstance(metadata, dict):
        return ""
    token = metadata.get("nextPageToken")
    return token if isinstance(token, str) else ""