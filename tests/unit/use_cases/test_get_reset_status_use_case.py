"""
Unit tests for GetResetStatusUseCase
"""
from datetime import timedelta

import pytest

from placement_api.app.use_cases.recovery import GetResetStatusUseCase
from placement_api.domain.entities import AccountKind, ResetRequest, ResetStatus

EMAIL = "student@example.com"


def make_request(now, status, token="c" * 64):
    return ResetRequest(
        email=EMAIL,
        token=token,
        account_kind=AccountKind.student,
        status=status,
        issued_at=now - timedelta(minutes=2),
        expires_at=now + timedelta(minutes=8),
    )


@pytest.mark.asyncio
async def test_reports_latest_request(mock_uow, clock, now):
    """Test the poll returns token and status of the latest request"""
    request = make_request(now, ResetStatus.approved)
    mock_uow.reset_requests.get_latest_by_email.return_value = request

    result = await GetResetStatusUseCase(mock_uow, clock=clock).execute(EMAIL)

    assert result.is_ok()
    assert result.value.token == request.token
    assert result.value.status == "approved"
    mock_uow.reset_requests.get_latest_by_email.assert_called_once_with(EMAIL)
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_no_request(mock_uow, clock):
    """Test polling an email that never requested a reset"""
    result = await GetResetStatusUseCase(mock_uow, clock=clock).execute(EMAIL)

    assert result.is_err()
    assert result.error.code == "NOT_FOUND"
    assert result.error.message == "No reset request found."


@pytest.mark.asyncio
async def test_stale_request_reported_as_expired(mock_uow, clock, now):
    """Test a pending request past its deadline is stored and reported as expired"""
    # Arrange
    pending = make_request(now, ResetStatus.pending)
    mock_uow.reset_requests.get_latest_by_email.return_value = pending
    mock_uow.reset_requests.expire_if_stale.return_value = True
    mock_uow.reset_requests.get_by_token.return_value = make_request(
        now, ResetStatus.expired
    )

    # Act
    result = await GetResetStatusUseCase(mock_uow, clock=clock).execute(EMAIL)

    # Assert
    assert result.is_ok()
    assert result.value.status == "expired"
    mock_uow.reset_requests.expire_if_stale.assert_called_once_with(pending.token, now)
    mock_uow.commit.assert_called_once()
