from __future__ import annotations

from scaffold4ai.domain.constants import APP_VERSION

USER_AGENT = f"Scaffold4AI-Client/{APP_VERSION}"

# Response bodies longer than this are cut in log messages
LOG_BODY_LIMIT = 500


def truncate_body(body: str, limit: int = LOG_BODY_LIMIT) -> str:
    """Shorten a response body for diagnostics."""
    if len(body) <= limit:
        return body
    return body[:limit] + "..."
