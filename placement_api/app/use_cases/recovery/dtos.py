"""
Credential Recovery Use Case DTOs (Data Transfer Objects)

Response classes for the password reset flow.
"""

from pydantic import BaseModel


class RequestPasswordResetResponse(BaseModel):
    """Response for issuing a reset request"""

    message: str
    account_kind: str


class ResetDecisionResponse(BaseModel):
    """Response for approving or denying a reset request from the email links"""

    status: str
    message: str


class ResetStatusResponse(BaseModel):
    """Response for polling the latest reset request of an email"""

    token: str
    status: str


class ConfirmPasswordResetResponse(BaseModel):
    """Response for committing a new password"""

    status: str
    message: str
