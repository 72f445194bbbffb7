"""Known API keys for authenticating callers.

Keys are read once from APIKEY_SERVICE_KEYS (comma-separated) and cached.

When no keys are configured, auth is disabled automatically so a local dev
server can be reached without credentials.

Auth can also be explicitly disabled via APIKEY_SERVICE_NO_AUTH=true.
"""

from __future__ import annotations

import hashlib
import logging
import os
import secrets

logger = logging.getLogger(__name__)

_keys: frozenset[str] | None = None


def get_known_keys() -> frozenset[str] | None:
    """Return the configured API keys.

    Returns None (auth disabled) when:
    - APIKEY_SERVICE_NO_AUTH=true, OR
    - APIKEY_SERVICE_KEYS is unset or lists no keys
    """
    global _keys
    if os.environ.get("APIKEY_SERVICE_NO_AUTH", "").lower() == "true":
        return None
    if _keys is None:
        raw = os.environ.get("APIKEY_SERVICE_KEYS", "")
        keys = frozenset(k.strip() for k in raw.split(",") if k.strip())
        if not keys:
            return None  # Dev mode
        _keys = keys
        logger.info("Loaded %d API key(s)", len(keys))
    return _keys


def reset_cache() -> None:
    global _keys
    _keys = None


def verify_api_key(key: str) -> bool:
    """Check a key against the known keys using constant-time comparison."""
    known = get_known_keys()
    if known is None:
        return True  # Auth disabled
    if not key:
        return False
    # Compare against every key so timing doesn't reveal which one matched
    matched = False
    for candidate in known:
        if secrets.compare_digest(key.encode("utf-8"), candidate.encode("utf-8")):
            matched = True
    return matched


def key_fingerprint(key: str) -> str:
    """Short SHA-256 prefix of a key, safe to log."""
    return hashlib.sha256(key.encode("utf-8")).hexdigest()[:12]
