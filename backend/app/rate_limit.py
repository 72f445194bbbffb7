"""Rate limiting configuration (avoids circular imports)."""

import os

from slowapi import Limiter
from slowapi.util import get_remote_address

# Per-client limits for the auth routes
WHOAMI_LIMIT = "30/minute"
VERIFY_LIMIT = "10/minute"  # public route, keeps key guessing slow

# APIKEY_SERVICE_NO_RATE_LIMIT=true turns the limiter off (conftest.py sets it)
_enabled = os.environ.get("APIKEY_SERVICE_NO_RATE_LIMIT", "").lower() != "true"

limiter = Limiter(key_func=get_remote_address, enabled=_enabled)
