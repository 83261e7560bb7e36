"""
Organization Use Cases

Login and profile management for organizations.
"""

from .login_use_case import OrganizationLoginUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .dtos import (
    UpdateProfileCommand,
    LoginResponse,
    OrganizationSummary,
    OrganizationProfile,
    UpdateProfileResponse,
)

__all__ = [
    "OrganizationLoginUseCase",
    "UpdateProfileUseCase",
    "UpdateProfileCommand",
    "LoginResponse",
    "OrganizationSummary",
    "OrganizationProfile",
    "UpdateProfileResponse",
]
