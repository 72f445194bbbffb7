"""Pydantic models for the auth endpoints."""

from pydantic import BaseModel


class WhoAmIResponse(BaseModel):
    authenticated: bool
    auth_enabled: bool
    fingerprint: str | None = None


class VerifyKeyRequest(BaseModel):
    authorization: str


class VerifyKeyResponse(BaseModel):
    well_formed: bool
    valid: bool
    fingerprint: str | None = None
