"""Length limits for user-entered text."""

from __future__ import annotations

DEFAULT_LIMIT = 50


def limit_text(text: str, limit: int = DEFAULT_LIMIT) -> str:
    """Cut ``text`` down to at most ``limit`` characters."""
    if limit < 0:
        raise ValueError("limit must not be negative")
    return text[:limit]