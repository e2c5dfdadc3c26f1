"""Shared utilities for decoding."""


def body_preview(body: bytes, limit: int = 200) -> str:
    """Return a printable, truncated preview of a raw response body."""
    return body[:limit].decode("utf-8", errors="replace")
