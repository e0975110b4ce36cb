# src/api_connector/utils/url.py
"""URL helpers shared by the pipeline and the OAuth2 flow."""

from typing import Any, Mapping
from urllib.parse import quote, urlencode


def is_absolute_url(url: str) -> bool:
    return url.lower().startswith(("http://", "https://"))


def join_url(base_url: str, endpoint: str) -> str:
    """
    Join a base URL and an endpoint with exactly one slash.

    Absolute endpoints are returned unchanged.

    Examples:
        >>> join_url("https://api.example.com/", "/users")
        'https://api.example.com/users'
        >>> join_url("https://api.example.com", "https://other.example.com/token")
        'https://other.example.com/token'
    """
    if is_absolute_url(endpoint) or not base_url:
        return endpoint
    if not endpoint:
        return base_url.rstrip('/')
    return f"{base_url.rstrip('/')}/{endpoint.lstrip('/')}"


def build_query_string(params: Mapping[str, Any]) -> str:
    """
    Encode query parameters per RFC 3986 (spaces as %20, slashes as %2F).

    None values are skipped, lists are repeated (``a=1&a=2``).
    """
    filtered = {key: value for key, value in params.items() if value is not None}
    return urlencode(filtered, doseq=True, quote_via=quote)
