from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from placement_api.api.error import ClientError, ServerError
from placement_api.app.services.reset_confirmation_delivery import ResetConfirmationDelivery
from placement_api.app.services.unit_of_work import UnitOfWork
from placement_api.app.use_cases.recovery import (
    RequestPasswordResetUseCase,
    GetResetStatusUseCase,
    ConfirmPasswordResetUseCase,
    RequestPasswordResetResponse,
    ResetStatusResponse,
    ConfirmPasswordResetResponse,
)
from placement_api.depends import get_confirmation_delivery, get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class ForgotPasswordRequest(BaseModel):
    """
    Forgot password HTTP request payload

    Email presence is checked by the use case so a missing field gets the
    same error shape as every other recovery failure.
    """

    email: Optional[str] = Field(None, description="Recovery email of any account kind")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    delivery: ResetConfirmationDelivery = Depends(get_confirmation_delivery),
):
    """
    Start Password Recovery

    Resolves the email to a student, admin or organization account, replaces
    any previous reset request for it and emails approve/deny links.

    Raises:
        - 400 Bad Request: Email missing
        - 404 Not Found: No account owns the email
        - 500 Internal Server Error: Email could not be sent (request stays valid)
    """
    use_case = RequestPasswordResetUseCase(
        uow, delivery, ttl_minutes=ApplicationConfig.RESET_TOKEN_TTL_MINUTES
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "MISSING_FIELDS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "UNKNOWN_IDENTITY":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.get(
    "/reset-status/{email}",
    status_code=status.HTTP_200_OK,
    response_model=ResetStatusResponse,
)
async def reset_status(email: str, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Poll Reset Status

    Returns token and status of the latest reset request for the email.
    Expired requests are reported as expired.

    Raises:
        - 404 Not Found: No reset request exists for the email
    """
    use_case = GetResetStatusUseCase(uow)
    result = await use_case.execute(email)

    if result.is_err():
        error = result.error
        if error.code == "NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "MISSING_FIELDS":
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """
    Reset password HTTP request payload
    """

    token: Optional[str] = Field(None, description="Approved reset token")
    password: Optional[str] = Field(None, description="New password")


_RESET_PASSWORD_CLIENT_ERRORS = (
    "MISSING_FIELDS",
    "INVALID_PASSWORD",
    "UNKNOWN_TOKEN",
    "NOT_APPROVED",
    "TOKEN_EXPIRED",
)


async def _reset_password(request: ResetPasswordRequest, uow: UnitOfWork):
    use_case = ConfirmPasswordResetUseCase(
        uow,
        password_min_length=ApplicationConfig.PASSWORD_MIN_LENGTH,
        bcrypt_rounds=ApplicationConfig.BCRYPT_ROUNDS,
    )
    result = await use_case.execute(request.token, request.password)

    if result.is_err():
        error = result.error
        if error.code in _RESET_PASSWORD_CLIENT_ERRORS:
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def reset_password(
    request: ResetPasswordRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Commit New Password

    Writes the new password hash to the account behind an approved, unexpired
    reset token and closes the token.

    Raises:
        - 400 Bad Request: Missing fields, weak password, unknown/expired token,
          or token not approved (current status echoed in the message)
    """
    return await _reset_password(request, uow)


@router.post(
    "/reset",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
    include_in_schema=False,
)
async def reset_password_legacy(
    request: ResetPasswordRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """Older clients post here; same behavior as /reset-password"""
    return await _reset_password(request, uow)
