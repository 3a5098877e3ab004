"""API key guard for the games router."""

from __future__ import annotations

import logging
import secrets

from fastapi import Header, HTTPException, Query, status

from scorecard.config import env_bool, load_api_keys

logger = logging.getLogger(__name__)


def _key_matches(candidate: str, allowed_keys: set[str]) -> bool:
    raw = candidate.encode("utf-8")
    return any(secrets.compare_digest(raw, key.encode("utf-8")) for key in allowed_keys)


def require_api_key(
    x_api_key: str | None = Header(default=None, alias="x-api-key"),
    api_key_query: str | None = Query(default=None, alias="apiKey"),
) -> str | None:
    """Check the caller's key when ``REQUIRE_API_KEY`` is on.

    The key is read from ``x-api-key`` or the ``apiKey`` query parameter;
    browser ``EventSource`` clients can only send the latter.
    """

    candidate = x_api_key or api_key_query
    if not env_bool("REQUIRE_API_KEY"):
        return candidate

    allowed_keys = load_api_keys()
    if not allowed_keys:
        logger.warning("REQUIRE_API_KEY is set but no API keys are configured")
    if candidate is None or not _key_matches(candidate, allowed_keys):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="invalid api key",
        )
    return candidate


__all__ = ["require_api_key"]
