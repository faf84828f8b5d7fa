"""Response error extraction for load test observability.

Parses ShopSmart API error responses into human-readable messages. Every
error body has the shape ``{"error": "msg", "kind": "Kind", "details": {...}}``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from requests import Response


def error_kind(response: Response) -> str | None:
    """Return the ``kind`` of an error body, or ``None`` if there is none."""
    try:
        body = response.json()
    except Exception:
        return None
    return body.get("kind") if isinstance(body, dict) else None


def extract_error_detail(response: Response) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    """
    try:
        body = response.json()
    except Exception:
        # Not JSON: return raw text, truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if isinstance(body, dict) and "error" in body:
        kind = body.get("kind")
        return f"{kind}: {body['error']}" if kind else str(body["error"])

    # Unknown shape: stringify and truncate
    return str(body)[:300]
