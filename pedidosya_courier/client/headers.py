"""Default request headers shared by both courier clients."""

from __future__ import annotations


def build_default_headers(api_token: str, user_agent: str) -> dict[str, str]:
    """Return the static headers attached to every courier request.

    The token is sent verbatim as the Authorization value, as issued by the API.
    """
    if not api_token or not api_token.strip():
        raise ValueError("api_token is required")
    if any(char in api_token for char in "\r\n"):
        raise ValueError("api_token is not a valid header value")
    return {
        "Authorization": api_token.strip(),
        "Accept": "application/json",
        "User-Agent": user_agent,
    }
