"""Response error extraction for load test observability.

Parses Lesson Shop API error responses into human-readable messages.
Handles three response shapes:

- Pydantic validation (422): {"detail": [{"loc": [...], "msg": "...", "type": "..."}]}
- Domain errors (400/404): {"detail": "msg"} or {"detail": {"field": ["msg", ...]}}
- Image and server errors (404/500): {"message": "msg"}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from locust.clients import ResponseContextManager


def extract_error_detail(response: ResponseContextManager) -> str:
    """Extract a human-readable error message from an API error response.

    Returns a compact string suitable for Locust failure messages and log lines.
    Gracefully handles unparseable bodies and missing fields.
    """
    try:
        body = response.json()
    except ValueError:
        # Not JSON, return raw text truncated
        text = getattr(response, "text", "") or ""
        return text[:300] or "(empty response body)"

    if not isinstance(body, dict):
        return str(body)[:300]

    detail = body.get("detail")

    # Pydantic validation errors: {"detail": [{"loc": [...], "msg": "..."}]}
    if isinstance(detail, list):
        parts = []
        for err in detail:
            loc = ".".join(str(p) for p in err.get("loc", []))
            msg = err.get("msg", str(err))
            parts.append(f"{loc}: {msg}" if loc else msg)
        return " | ".join(parts)

    # Protean validation errors: {"detail": {"field": ["msg", ...]}}
    if isinstance(detail, dict):
        return " | ".join(
            f"{field}: {', '.join(messages) if isinstance(messages, list) else messages}"
            for field, messages in detail.items()
        )

    if detail is not None:
        return str(detail)

    if "message" in body:
        return str(body["message"])

    # Unknown shape, stringify and truncate
    return str(body)[:300]
