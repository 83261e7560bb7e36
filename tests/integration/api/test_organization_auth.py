"""
Integration tests for organization login and the bearer gate
"""
from datetime import timedelta
from uuid import uuid4

import pytest

from placement_api.api.utils.jwt import generate_jwt


@pytest.mark.asyncio
async def test_login_returns_bearer_token(client, seed):
    org = await seed.organization(username="acme", password="acme-pass")
    org_id = str(org.id)

    response = await client.post(
        "/api/organization/login", json={"username": "acme", "password": "acme-pass"}
    )

    assert response.status_code == 200
    data = response.json()
    assert data["token_type"] == "bearer"
    assert data["access_token"]
    assert data["organization"] == {
        "organization_id": org_id,
        "username": "acme",
        "org_name": "Acme Pvt Ltd",
    }


@pytest.mark.asyncio
async def test_login_wrong_password(client, seed):
    await seed.organization(username="acme", password="acme-pass")

    response = await client.post(
        "/api/organization/login", json={"username": "acme", "password": "nope"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_over_long_password_for_unknown_user(client):
    response = await client.post(
        "/api/organization/login", json={"username": "ghost", "password": "x" * 100}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_missing_fields(client):
    response = await client.post("/api/organization/login", json={"username": "acme"})

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "MISSING_FIELDS"


@pytest.mark.asyncio
async def test_missing_authorization_header(client):
    response = await client.get("/api/organization/projects")

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_malformed_token(client):
    response = await client.get(
        "/api/organization/projects", headers={"Authorization": "Bearer not-a-jwt"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Invalid or expired token"


@pytest.mark.asyncio
async def test_expired_token(client, seed):
    org = await seed.organization()
    token = generate_jwt(org.id, expires_delta=timedelta(minutes=-1))

    response = await client.get(
        "/api/organization/projects", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_token_for_unknown_organization(client):
    token = generate_jwt(uuid4())

    response = await client.get(
        "/api/organization/projects", headers={"Authorization": f"Bearer {token}"}
    )

    assert response.status_code == 401
    assert response.json()["error"]["code"] == "UNAUTHENTICATED"


@pytest.mark.asyncio
async def test_wrong_scheme(client, seed, login):
    await seed.organization()
    headers = await login()
    token = headers["Authorization"].split(" ", 1)[1]

    response = await client.get(
        "/api/organization/projects", headers={"Authorization": f"Token {token}"}
    )

    assert response.status_code == 401


@pytest.mark.asyncio
async def test_health_endpoints(client):
    root = await client.get("/")
    health = await client.get("/health")

    assert root.status_code == 200
    assert health.status_code == 200
    assert health.json()["status"] == "ok"
