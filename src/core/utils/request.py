"""Helpers for reading API Gateway proxy events."""

from typing import Any

from core.utils.constants import SIZE_HEADER, SIZE_QUERY_PARAM


def get_header(event: dict[str, Any], name: str) -> str | None:
    """Return a request header value, matching the name case-insensitively.

    API Gateway forwards headers with the casing the client used, so
    ``Authorization`` may arrive as ``authorization``.
    """
    headers = event.get("headers") or {}
    wanted = name.lower()

    for key, value in headers.items():
        if key.lower() == wanted:
            return value

    return None


def get_query_param(event: dict[str, Any], name: str) -> str | None:
    query_params = event.get("queryStringParameters") or {}
    return query_params.get(name)


def get_path_param(event: dict[str, Any], name: str) -> str | None:
    path_params = event.get("pathParameters") or {}
    return path_params.get(name)


def extract_size_hint(event: dict[str, Any]) -> str | None:
    """Return the requested size, header first, query string second."""
    return get_header(event, SIZE_HEADER) or get_query_param(event, SIZE_QUERY_PARAM)
