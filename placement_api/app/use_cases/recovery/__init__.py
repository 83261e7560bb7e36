"""
Credential Recovery Use Cases

Issue, decide, poll and commit password reset requests.
"""

from .request_password_reset_use_case import RequestPasswordResetUseCase
from .decide_password_reset_use_case import DecidePasswordResetUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .get_reset_status_use_case import GetResetStatusUseCase
from .dtos import (
    RequestPasswordResetResponse,
    ResetDecisionResponse,
    ResetStatusResponse,
    ConfirmPasswordResetResponse,
)

__all__ = [
    # Use Cases
    "RequestPasswordResetUseCase",
    "DecidePasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "GetResetStatusUseCase",
    # DTOs - Responses
    "RequestPasswordResetResponse",
    "ResetDecisionResponse",
    "ResetStatusResponse",
    "ConfirmPasswordResetResponse",
]
