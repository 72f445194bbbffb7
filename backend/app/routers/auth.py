"""API key inspection endpoints."""

import logging

from fastapi import APIRouter, Depends, Request

from app.models.auth_models import VerifyKeyRequest, VerifyKeyResponse, WhoAmIResponse
from app.rate_limit import VERIFY_LIMIT, WHOAMI_LIMIT, limiter
from app.services.auth import extract_api_key, get_api_key
from app.services.key_store import get_known_keys, key_fingerprint, verify_api_key

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get("/whoami", response_model=WhoAmIResponse)
@limiter.limit(WHOAMI_LIMIT)
async def whoami(
    request: Request,
    api_key: str | None = Depends(extract_api_key),
) -> WhoAmIResponse:
    """Report which key (by fingerprint) the request authenticated with."""
    auth_enabled = get_known_keys() is not None
    if api_key is None:
        return WhoAmIResponse(authenticated=False, auth_enabled=auth_enabled)
    return WhoAmIResponse(
        authenticated=auth_enabled and verify_api_key(api_key),
        auth_enabled=auth_enabled,
        fingerprint=key_fingerprint(api_key),
    )


@router.post("/verify", response_model=VerifyKeyResponse)
@limiter.limit(VERIFY_LIMIT)
async def verify_key(req: VerifyKeyRequest, request: Request) -> VerifyKeyResponse:
    """Check an Authorization header value without sending it as credentials.

    ``valid`` means a request carrying this header would pass the auth check.
    """
    api_key = get_api_key({"authorization": req.authorization})
    if api_key is None:
        return VerifyKeyResponse(well_formed=False, valid=False)

    valid = verify_api_key(api_key)
    fingerprint = key_fingerprint(api_key)
    logger.info("Verified key %s: valid=%s", fingerprint, valid)
    return VerifyKeyResponse(well_formed=True, valid=valid, fingerprint=fingerprint)
