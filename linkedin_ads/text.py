"""Small text helpers for terminal tables."""

from __future__ import annotations


def truncate(s: str, n: int) -> str:
    """Shorten s to at most n characters, ending with an ellipsis when cut."""
    if n < 0:
        raise ValueError("truncate width must not be negative")
    if len(s) <= n:
        return s
    if n <= 1:
        return s[:n]
    return s[: n - 1] + "…"