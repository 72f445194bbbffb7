"""API key extraction from request headers.

Clients send ``Authorization: ApiKey <token>``. Only the token up to the next
space is returned; anything after a second space is dropped.
"""

from __future__ import annotations

from collections.abc import Mapping

from fastapi import Request

API_KEY_SCHEME = "ApiKey"


def get_api_key(headers: Mapping[str, str | None]) -> str | None:
    """Return the API key from an ``authorization`` header, or None.

    The header map is expected to be keyed by lower-case names (Starlette
    ``Headers`` already is). A missing, empty, single-token or non-``ApiKey``
    value yields None. The key may be the empty string.
    """
    auth = headers.get("authorization")
    if not auth:
        return None

    scheme, sep, rest = auth.partition(" ")
    if not sep or scheme != API_KEY_SCHEME:
        return None

    return rest.partition(" ")[0]


def extract_api_key(request: Request) -> str | None:
    """Extract API key from Authorization: ApiKey header."""
    return get_api_key(request.headers)
