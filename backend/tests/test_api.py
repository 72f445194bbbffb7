import pytest
from httpx import ASGITransport, AsyncClient

from app.main import app


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
async def client():
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest.mark.anyio
async def test_health(client: AsyncClient):
    resp = await client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.anyio
async def test_security_headers_present(client: AsyncClient):
    """Security headers should be present on all responses."""
    resp = await client.get("/api/health")
    assert resp.headers.get("X-Content-Type-Options") == "nosniff"
    assert resp.headers.get("X-Frame-Options") == "DENY"
    assert "max-age" in resp.headers.get("Strict-Transport-Security", "")


@pytest.mark.anyio
async def test_cors_restricted_methods(client: AsyncClient):
    """CORS should only allow GET, POST, OPTIONS."""
    resp = await client.options(
        "/api/health",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "DELETE",
        },
    )
    allowed = resp.headers.get("Access-Control-Allow-Methods", "")
    assert "DELETE" not in allowed


@pytest.mark.anyio
async def test_cors_allows_authorization_header(client: AsyncClient):
    resp = await client.options(
        "/api/auth/whoami",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "Authorization",
        },
    )
    assert resp.status_code == 200
    allowed = resp.headers.get("Access-Control-Allow-Headers", "")
    assert "Authorization" in allowed


@pytest.mark.anyio
async def test_whoami_auth_disabled_no_key(client: AsyncClient):
    resp = await client.get("/api/auth/whoami")
    assert resp.status_code == 200
    assert resp.json() == {
        "authenticated": False,
        "auth_enabled": False,
        "fingerprint": None,
    }


@pytest.mark.anyio
async def test_whoami_auth_disabled_with_key(client: AsyncClient):
    resp = await client.get("/api/auth/whoami", headers={"Authorization": "ApiKey dev-key"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["authenticated"] is False
    assert data["auth_enabled"] is False
    assert len(data["fingerprint"]) == 12


@pytest.mark.anyio
async def test_verify_malformed_header(client: AsyncClient):
    resp = await client.post("/api/auth/verify", json={"authorization": "Bearer token123"})
    assert resp.status_code == 200
    assert resp.json() == {"well_formed": False, "valid": False, "fingerprint": None}


@pytest.mark.anyio
async def test_verify_requires_authorization_field(client: AsyncClient):
    resp = await client.post("/api/auth/verify", json={})
    assert resp.status_code == 422
