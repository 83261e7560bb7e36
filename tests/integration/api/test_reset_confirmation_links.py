"""
Integration tests for GET /verify-reset and GET /deny-reset

The links are opened from an email client, so every outcome is an HTML page.
"""
from datetime import timedelta

import pytest
from sqlmodel import select, update

from placement_api.libs.clock import utcnow
from placement_api.domain.entities import ResetRequest, ResetStatus


async def issue(client, seed, email="asha@example.com"):
    await seed.student(email=email)
    response = await client.post("/api/auth/forgot-password", json={"email": email})
    assert response.status_code == 200
    status = await client.get(f"/api/auth/reset-status/{email}")
    return status.json()["token"]


async def stored_status(db_session, token):
    result = await db_session.execute(
        select(ResetRequest.status).where(ResetRequest.token == token)
    )
    return result.scalar_one()


@pytest.mark.asyncio
async def test_approve_link(client, seed, db_session):
    """Test the approve link moves a pending request to approved"""
    token = await issue(client, seed)

    response = await client.get("/verify-reset", params={"token": token})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Request confirmed. You can now reset your password." in response.text
    assert await stored_status(db_session, token) == ResetStatus.approved


@pytest.mark.asyncio
async def test_deny_link(client, seed, db_session):
    """Test the deny link moves a pending request to denied"""
    token = await issue(client, seed)

    response = await client.get("/deny-reset", params={"token": token})

    assert response.status_code == 200
    assert "Reset request denied successfully." in response.text
    assert await stored_status(db_session, token) == ResetStatus.denied


@pytest.mark.asyncio
async def test_second_click_is_rejected(client, seed, db_session):
    """Test only the first decision counts"""
    # Arrange
    token = await issue(client, seed)
    await client.get("/verify-reset", params={"token": token})

    # Act
    response = await client.get("/deny-reset", params={"token": token})

    # Assert
    assert response.status_code == 400
    assert "Status: approved" in response.text
    assert await stored_status(db_session, token) == ResetStatus.approved


@pytest.mark.asyncio
async def test_unknown_token(client):
    response = await client.get("/verify-reset", params={"token": "f" * 64})

    assert response.status_code == 404
    assert "Invalid or expired token" in response.text


@pytest.mark.asyncio
async def test_missing_token(client):
    response = await client.get("/deny-reset")

    assert response.status_code == 400
    assert "Missing token" in response.text


@pytest.mark.asyncio
async def test_expired_link(client, seed, db_session):
    """Test a link clicked after the deadline expires the request"""
    # Arrange
    token = await issue(client, seed)
    await db_session.execute(
        update(ResetRequest)
        .where(ResetRequest.token == token)
        .values(expires_at=utcnow() - timedelta(seconds=1))
        .execution_options(synchronize_session=False)
    )
    await db_session.commit()

    # Act
    response = await client.get("/verify-reset", params={"token": token})

    # Assert
    assert response.status_code == 400
    assert "Link expired." in response.text
    assert await stored_status(db_session, token) == ResetStatus.expired


@pytest.mark.asyncio
async def test_link_on_stale_approved_request_is_not_pending(client, seed, db_session):
    """Test clicking deny after an approval aged out reports the request as decided"""
    # Arrange
    token = await issue(client, seed)
    assert (await client.get("/verify-reset", params={"token": token})).status_code == 200
    await db_session.execute(
        update(ResetRequest)
        .where(ResetRequest.token == token)
        .values(expires_at=utcnow() - timedelta(seconds=1))
        .execution_options(synchronize_session=False)
    )
    await db_session.commit()

    # Act
    response = await client.get("/deny-reset", params={"token": token})

    # Assert
    assert response.status_code == 400
    assert "Reset request is no longer pending. Status: expired" in response.text
    assert "Link expired." not in response.text
    assert await stored_status(db_session, token) == ResetStatus.expired
